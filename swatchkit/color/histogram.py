from __future__ import annotations

from typing import List

import numpy as np

from ..models.swatch import Swatch


def swatches_from_pixels(pixels: np.ndarray) -> List[Swatch]:
    """
    Count each distinct colour of an already-reduced image.

    ``pixels`` is an ``H x W x 3`` image or an ``N x 3`` array of RGB rows. No
    quantization happens here: every distinct triple becomes its own swatch.
    Swatches come back ordered by descending population, ties broken by RGB.
    """
    arr = np.asarray(pixels)
    if arr.ndim < 2 or arr.shape[-1] != 3:
        raise ValueError(f"Expected RGB pixels with a trailing dimension of 3, got shape {arr.shape}")

    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"Expected integer RGB channels, got dtype {arr.dtype}")

    flat = arr.reshape(-1, 3)
    if flat.size == 0:
        return []
    if flat.min() < 0 or flat.max() > 255:
        raise ValueError("RGB channels must be within 0..255")
    flat = flat.astype(np.uint8)

    colors, counts = np.unique(flat, axis=0, return_counts=True)
    # np.unique sorts rows lexicographically, so a stable sort keeps RGB order on ties
    order = np.argsort(-counts, kind="stable")

    return [
        Swatch(tuple(int(c) for c in colors[i]), int(counts[i]))
        for i in order
    ]
