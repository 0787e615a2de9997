import logging

import numpy as np
from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from ..color.histogram import swatches_from_pixels
from ..generator.default import generate
from ..generator.options import GeneratorOptions, default_options_dict, resolve_options
from ..models.api_schemas import PaletteRequest, PaletteResponse, PixelsRequest
from ..models.swatch import Swatch

logger = logging.getLogger(__name__)

router = APIRouter()


def _resolve_or_400(options: dict) -> GeneratorOptions:
    try:
        return resolve_options(options)
    except ValidationError as e:
        fields = sorted({".".join(str(part) for part in err["loc"]) for err in e.errors()})
        raise HTTPException(status_code=400, detail=f"Invalid options: {', '.join(fields)}")


def _respond(swatches: list[Swatch], opts: GeneratorOptions) -> PaletteResponse:
    palette = generate(swatches, opts)
    return PaletteResponse(
        palette=palette.to_dict(),
        options=opts.model_dump(by_alias=True),
    )


# =====================================================================
#   DEFAULTS
# =====================================================================

@router.get("/palette/defaults")
async def get_defaults():
    return default_options_dict()


# =====================================================================
#   PALETTE FROM SWATCHES
# =====================================================================

@router.post("/palette", response_model=PaletteResponse)
async def create_palette(request: PaletteRequest):
    opts = _resolve_or_400(request.options)
    swatches = [Swatch(tuple(s.rgb), s.population) for s in request.swatches]
    return _respond(swatches, opts)


# =====================================================================
#   PALETTE FROM PIXELS
# =====================================================================

@router.post("/palette/pixels", response_model=PaletteResponse)
async def create_palette_from_pixels(request: PixelsRequest):
    opts = _resolve_or_400(request.options)
    if any(len(row) != 3 for row in request.pixels):
        logger.warning("Rejected pixel payload with rows that are not RGB triples")
        raise HTTPException(status_code=400, detail="Pixels must be [r, g, b] rows")
    if any(not 0 <= v <= 255 for row in request.pixels for v in row):
        logger.warning("Rejected pixel payload with out-of-range channel values")
        raise HTTPException(status_code=400, detail="Pixel channels must be within 0..255")

    arr = np.array(request.pixels, dtype=np.uint8)
    swatches = swatches_from_pixels(arr)
    return _respond(swatches, opts)
