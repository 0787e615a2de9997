"""Colour space helpers."""

from .converters import hsl_to_rgb, rgb_to_hex, rgb_to_hsl

__all__ = ["hsl_to_rgb", "rgb_to_hex", "rgb_to_hsl"]
