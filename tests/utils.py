from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from swatchkit.color.converters import hsl_to_rgb
from swatchkit.models.swatch import Swatch


def make_swatch_from_hsl(hue: float, saturation: float, luma: float, population: int = 1) -> Swatch:
    return Swatch(hsl_to_rgb(hue, saturation, luma), population)


def sample_swatches() -> List[Swatch]:
    """Mid red, near black and near white."""
    return [
        Swatch((200, 50, 50), 100),
        Swatch((30, 30, 30), 50),
        Swatch((230, 230, 230), 10),
    ]


def make_reduced_image(
    colors: Sequence[Tuple[Tuple[int, int, int], int]],
    width: int = 8,
) -> np.ndarray:
    """Lay out ``count`` pixels of each colour row-major, padding with the last colour."""
    pixels: List[Tuple[int, int, int]] = []
    for rgb, count in colors:
        pixels.extend([rgb] * count)
    height = -(-len(pixels) // width)
    pixels.extend([pixels[-1]] * (width * height - len(pixels)))
    return np.array(pixels, dtype=np.uint8).reshape(height, width, 3)
