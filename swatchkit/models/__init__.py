from .palette import Palette
from .swatch import Swatch

__all__ = ["Palette", "Swatch"]
