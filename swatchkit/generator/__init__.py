"""Palette generators."""

from .default import default_generator, generate, score
from .options import DEFAULT_OPTIONS, GeneratorOptions, resolve_options

__all__ = [
    "DEFAULT_OPTIONS",
    "GeneratorOptions",
    "default_generator",
    "generate",
    "resolve_options",
    "score",
]
