"""Pick a six-role palette (vibrant/muted x dark/normal/light) from colour swatches."""

from .generator import DEFAULT_OPTIONS, GeneratorOptions, generate
from .models import Palette, Swatch

__all__ = ["DEFAULT_OPTIONS", "GeneratorOptions", "Palette", "Swatch", "generate"]
