from __future__ import annotations

import colorsys
from typing import Iterable

from ..core.types import HSL, RGB


def rgb_to_hsl(rgb: Iterable[int]) -> HSL:
    """Return ``(hue, saturation, luma)`` with hue in degrees ``[0, 360)``."""
    r, g, b = (int(v) / 255.0 for v in rgb)
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return h * 360.0, s, l


def hsl_to_rgb(hue: float, saturation: float, luma: float) -> RGB:
    r, g, b = colorsys.hls_to_rgb((hue % 360.0) / 360.0, luma, saturation)
    return _to_byte(r), _to_byte(g), _to_byte(b)


def _to_byte(value: float) -> int:
    return max(0, min(255, int(round(value * 255))))


def rgb_to_hex(rgb) -> str:
    r, g, b = (int(v) for v in rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


__all__ = ["rgb_to_hsl", "hsl_to_rgb", "rgb_to_hex"]
