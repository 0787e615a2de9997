from pydantic import BaseModel, Field, ConfigDict
from typing import Annotated, Optional, List, Tuple, Any

from ..core.types import Role

Channel = Annotated[int, Field(ge=0, le=255)]


class SwatchIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    rgb: Tuple[Channel, Channel, Channel]
    population: int = Field(0, ge=0)


class PaletteRequest(BaseModel):
    swatches: List[SwatchIn] = Field(default_factory=list)
    options: dict[str, Any] = Field(default_factory=dict)


class PixelsRequest(BaseModel):
    pixels: List[List[int]] = Field(..., min_length=1)
    options: dict[str, Any] = Field(default_factory=dict)


class SwatchOut(BaseModel):
    rgb: Tuple[int, int, int]
    hsl: Tuple[float, float, float]
    hex: str
    population: int
    titleTextColor: str
    bodyTextColor: str


class PaletteResponse(BaseModel):
    palette: dict[Role, Optional[SwatchOut]]
    options: dict[str, float]
