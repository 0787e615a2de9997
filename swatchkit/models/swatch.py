from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Dict

from ..color.converters import rgb_to_hex, rgb_to_hsl
from ..core.types import HSL, RGB


@dataclass(frozen=True, eq=False)
class Swatch:
    """A candidate colour together with the number of pixels it stands for.

    Swatches compare and hash by identity: two swatches that happen to share an
    RGB triple are still different swatches when building a palette.
    """

    rgb: RGB
    population: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "rgb", tuple(int(v) for v in self.rgb))

    @cached_property
    def hsl(self) -> HSL:
        return rgb_to_hsl(self.rgb)

    @cached_property
    def yiq(self) -> float:
        r, g, b = self.rgb
        return (r * 299 + g * 587 + b * 114) / 1000

    @property
    def hex(self) -> str:
        return rgb_to_hex(self.rgb).lower()

    @property
    def title_text_color(self) -> str:
        return "#fff" if self.yiq < 200 else "#000"

    @property
    def body_text_color(self) -> str:
        return "#fff" if self.yiq < 150 else "#000"

    def get_rgb(self) -> RGB:
        return self.rgb

    def get_hsl(self) -> HSL:
        return self.hsl

    def get_population(self) -> int:
        return self.population

    def to_dict(self) -> Dict[str, Any]:
        hue, saturation, luma = self.hsl
        return {
            "rgb": list(self.rgb),
            "hsl": [hue, saturation, luma],
            "hex": self.hex,
            "population": self.population,
            "titleTextColor": self.title_text_color,
            "bodyTextColor": self.body_text_color,
        }

    def __repr__(self) -> str:
        return f"Swatch(rgb={self.rgb!r}, population={self.population!r})"
