"""Glyph font generation: options, the generator protocol and the fontTools builder."""

from .base import DEFAULT_START_CODEPOINT, GenerationOptions, GenerationResult, Glyph, GlyphFontGenerator
from .builder import FontToolsGenerator, assign_codepoints

__all__ = [
    "DEFAULT_START_CODEPOINT",
    "GenerationOptions",
    "GenerationResult",
    "Glyph",
    "GlyphFontGenerator",
    "FontToolsGenerator",
    "assign_codepoints",
]
