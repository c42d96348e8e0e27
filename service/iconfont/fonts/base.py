from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

DEFAULT_START_CODEPOINT = 0xF101
DEFAULT_FONT_TYPES = ("ttf", "woff", "woff2")


@dataclass(frozen=True)
class GenerationOptions:
    font_name: str
    files: list[Path]
    dest: Path
    codepoints: dict[str, int] = field(default_factory=dict)
    base_selector: str = ""
    class_prefix: str = ""
    font_url: str = ""
    types: tuple[str, ...] = DEFAULT_FONT_TYPES
    start_codepoint: int = DEFAULT_START_CODEPOINT
    font_height: int = 1000
    descent: int = 150
    fixed_width: bool = True
    center_horizontally: bool = True
    normalize: bool = True
    css: bool = True
    scss: bool = True
    html: bool = True
    json: bool = True


@dataclass(frozen=True)
class Glyph:
    name: str
    codepoint: int

    @property
    def hex(self) -> str:
        return f"{self.codepoint:x}"

    @property
    def glyph_name(self) -> str:
        return f"uni{self.codepoint:04X}"


@dataclass(frozen=True)
class GenerationResult:
    css: str
    files: list[Path]
    glyphs: list[Glyph]

    @property
    def codepoints(self) -> dict[str, int]:
        return {g.name: g.codepoint for g in self.glyphs}


class GlyphFontGenerator(Protocol):
    def generate(self, options: GenerationOptions) -> GenerationResult: ...
