from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional, Sequence

from ..color.converters import hsl_to_rgb
from ..core.types import Role
from ..models.palette import Palette
from ..models.swatch import Swatch
from .options import GeneratorOptions, OptionsLike, resolve_options

logger = logging.getLogger(__name__)


class RoleProfile(NamedTuple):
    role: Role
    target_luma: float
    min_luma: float
    max_luma: float
    target_saturation: float
    min_saturation: float
    max_saturation: float


# =====================================================================
#  Scoring
# =====================================================================


def _invert_diff(value: float, target: float) -> float:
    return 1 - abs(value - target)


def _weighted_mean(*pairs: tuple[float, float]) -> float:
    total = 0.0
    weight_sum = 0.0
    for value, weight in pairs:
        total += value * weight
        weight_sum += weight
    return total / weight_sum


def score(
    saturation: float,
    target_saturation: float,
    luma: float,
    target_luma: float,
    population: int,
    max_population: int,
    options: GeneratorOptions,
) -> float:
    """
    Weighted mean of saturation, luma and population fitness, each in ``[0, 1]``.

    The population term is 0 when ``max_population`` is 0. Weights summing to
    zero are a configuration error and are not guarded against.
    """
    population_fitness = population / max_population if max_population else 0.0
    return _weighted_mean(
        (_invert_diff(saturation, target_saturation), options.weight_saturation),
        (_invert_diff(luma, target_luma), options.weight_luma),
        (population_fitness, options.weight_population),
    )


# =====================================================================
#  Search
# =====================================================================


def find_max_population(swatches: Sequence[Swatch]) -> int:
    return max((s.population for s in swatches), default=0)


def find_variation(
    palette: Palette,
    swatches: Sequence[Swatch],
    max_population: int,
    target_luma: float,
    min_luma: float,
    max_luma: float,
    target_saturation: float,
    min_saturation: float,
    max_saturation: float,
    options: GeneratorOptions,
) -> Optional[Swatch]:
    """Best unclaimed swatch inside the luma/saturation bands, or ``None``."""
    best: Optional[Swatch] = None
    best_value = 0.0

    for swatch in swatches:
        _, s, l = swatch.hsl
        if not (min_saturation <= s <= max_saturation and min_luma <= l <= max_luma):
            continue
        if palette.is_selected(swatch):
            continue
        value = score(s, target_saturation, l, target_luma, swatch.population, max_population, options)
        # strict comparison: ties keep the earlier swatch
        if best is None or value > best_value:
            best = swatch
            best_value = value

    return best


# =====================================================================
#  Orchestration
# =====================================================================


def role_profiles(opts: GeneratorOptions) -> List[RoleProfile]:
    """Search bands for every role, in selection order."""
    vibrant = (opts.target_vibrant_saturation, opts.min_vibrant_saturation, 1.0)
    muted = (opts.target_mutes_saturation, 0.0, opts.max_mutes_saturation)
    normal = (opts.target_normal_luma, opts.min_normal_luma, opts.max_normal_luma)
    light = (opts.target_light_luma, opts.min_light_luma, 1.0)
    dark = (opts.target_dark_luma, 0.0, opts.max_dark_luma)

    return [
        RoleProfile("Vibrant", *normal, *vibrant),
        RoleProfile("LightVibrant", *light, *vibrant),
        RoleProfile("DarkVibrant", *dark, *vibrant),
        RoleProfile("Muted", *normal, *muted),
        RoleProfile("LightMuted", *light, *muted),
        RoleProfile("DarkMuted", *dark, *muted),
    ]


def generate_variation_colors(
    swatches: Sequence[Swatch],
    max_population: int,
    opts: GeneratorOptions,
) -> Palette:
    palette = Palette()
    for profile in role_profiles(opts):
        swatch = find_variation(
            palette,
            swatches,
            max_population,
            profile.target_luma,
            profile.min_luma,
            profile.max_luma,
            profile.target_saturation,
            profile.min_saturation,
            profile.max_saturation,
            opts,
        )
        palette[profile.role] = swatch
        logger.debug("Role %s -> %r", profile.role, swatch)
    return palette


def _derive(source: Swatch, luma: float) -> Swatch:
    hue, saturation, _ = source.hsl
    return Swatch(hsl_to_rgb(hue, saturation, luma), 0)


def generate_empty_swatches(palette: Palette, opts: GeneratorOptions) -> None:
    """Fill Vibrant/DarkVibrant from each other when exactly one was found.

    Runs sequentially: the DarkVibrant check sees a Vibrant synthesized by the
    first check.
    """
    if palette["Vibrant"] is None and palette["DarkVibrant"] is not None:
        palette["Vibrant"] = _derive(palette["DarkVibrant"], opts.target_normal_luma)
        logger.debug("Synthesized Vibrant from DarkVibrant: %r", palette["Vibrant"])
    if palette["DarkVibrant"] is None and palette["Vibrant"] is not None:
        palette["DarkVibrant"] = _derive(palette["Vibrant"], opts.target_dark_luma)
        logger.debug("Synthesized DarkVibrant from Vibrant: %r", palette["DarkVibrant"])


def default_generator(swatches: Sequence[Swatch], options: OptionsLike = None) -> Palette:
    """
    Build a six-role palette from ``swatches``:
      1) find the largest population (normalisation base)
      2) pick one unclaimed swatch per role, in fixed role order
      3) synthesize a missing Vibrant/DarkVibrant from its sibling
    """
    opts = resolve_options(options)
    swatches = list(swatches)
    max_population = find_max_population(swatches)

    palette = generate_variation_colors(swatches, max_population, opts)
    generate_empty_swatches(palette, opts)
    return palette


generate = default_generator

__all__ = [
    "RoleProfile",
    "default_generator",
    "find_max_population",
    "find_variation",
    "generate",
    "generate_empty_swatches",
    "generate_variation_colors",
    "role_profiles",
    "score",
]
