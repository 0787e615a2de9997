"""Common lightweight type aliases used across the generator."""

from typing import Literal, Tuple

Role = Literal["Vibrant", "LightVibrant", "DarkVibrant", "Muted", "LightMuted", "DarkMuted"]
RGB = Tuple[int, int, int]
HSL = Tuple[float, float, float]

# Selection order; later roles never reuse swatches claimed by earlier ones.
ROLES: Tuple[Role, ...] = (
    "Vibrant",
    "LightVibrant",
    "DarkVibrant",
    "Muted",
    "LightMuted",
    "DarkMuted",
)

__all__ = ["Role", "RGB", "HSL", "ROLES"]
