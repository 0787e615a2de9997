from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class GeneratorOptions(BaseModel):
    """Tuning parameters for the default generator.

    Field names are accepted in camelCase (``targetDarkLuma``) as well as
    snake_case. Unknown keys are ignored and anything left unset falls back to
    the defaults below.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    target_dark_luma: float = 0.26
    max_dark_luma: float = 0.45
    min_light_luma: float = 0.55
    target_light_luma: float = 0.74
    min_normal_luma: float = 0.3
    target_normal_luma: float = 0.5
    max_normal_luma: float = 0.7
    target_mutes_saturation: float = 0.3
    max_mutes_saturation: float = 0.4
    target_vibrant_saturation: float = 1.0
    min_vibrant_saturation: float = 0.35
    weight_saturation: float = 3
    weight_luma: float = 6
    weight_population: float = 1


DEFAULT_OPTIONS = GeneratorOptions()

OptionsLike = Union[GeneratorOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike = None) -> GeneratorOptions:
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, GeneratorOptions):
        return options
    return GeneratorOptions.model_validate(dict(options))


def default_options_dict(by_alias: bool = True) -> dict[str, float]:
    return DEFAULT_OPTIONS.model_dump(by_alias=by_alias)


__all__ = ["DEFAULT_OPTIONS", "GeneratorOptions", "OptionsLike", "default_options_dict", "resolve_options"]
