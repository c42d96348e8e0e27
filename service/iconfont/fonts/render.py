"""Stylesheet and preview rendering for generated icon fonts."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .base import GenerationOptions, Glyph

TEMPLATE_ROOT = Path(__file__).resolve().parent / "templates"

FONT_FORMATS = {
    "eot": "embedded-opentype",
    "woff2": "woff2",
    "woff": "woff",
    "ttf": "truetype",
    "svg": "svg",
}

_IDENT_RE = re.compile(r"[^A-Za-z0-9_-]+")


def css_ident(value: str) -> str:
    return _IDENT_RE.sub("-", str(value)).strip("-") or "icons"


@lru_cache(maxsize=1)
def _environment() -> Environment:
    environment = Environment(
        loader=FileSystemLoader(str(TEMPLATE_ROOT)),
        autoescape=select_autoescape(enabled_extensions=("html",), default_for_string=False),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    environment.filters.setdefault("ident", css_ident)
    return environment


def font_sources(options: GenerationOptions, version: str) -> str:
    parts: list[str] = []
    for ext in options.types:
        url = f"{options.font_url}{options.font_name}.{ext}"
        if version:
            url = f"{url}?v={version}"
        parts.append(f'url("{url}") format("{FONT_FORMATS.get(ext, ext)}")')
    return ",\n         ".join(parts)


def _context(options: GenerationOptions, glyphs: list[Glyph], version: str) -> dict[str, object]:
    return {
        "font_name": options.font_name,
        "font_url": options.font_url,
        "base_selector": options.base_selector,
        "base_class": options.base_selector.lstrip("."),
        "class_prefix": options.class_prefix,
        "glyphs": glyphs,
        "sources": font_sources(options, version),
    }


def render(template: str, options: GenerationOptions, glyphs: list[Glyph], *, version: str = "") -> str:
    return _environment().get_template(template).render(**_context(options, glyphs, version))


def render_css(options: GenerationOptions, glyphs: list[Glyph], *, version: str = "") -> str:
    return render("font.css", options, glyphs, version=version)
