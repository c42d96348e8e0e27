from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from .errors import FontGenerationError
from .fonts import GenerationOptions, GlyphFontGenerator
from .models import GeneratedBundle, IconFile, IconFolder

log = logging.getLogger(__name__)


def generation_options(
    folder: IconFolder,
    icons: list[IconFile],
    codepoints: dict[str, int],
    workdir: Path,
    *,
    font_url: str = "",
) -> GenerationOptions:
    """Fixed profile: monospaced, centered, normalized to 1000 units, all sidecars on."""
    return GenerationOptions(
        font_name=folder.name,
        files=[icon.path for icon in icons],
        dest=workdir,
        codepoints=dict(codepoints),
        base_selector=f".{folder.name}",
        class_prefix=f"{folder.name}-",
        font_url=font_url,
        font_height=1000,
        descent=150,
        fixed_width=True,
        center_horizontally=True,
        normalize=True,
        css=True,
        html=True,
        json=True,
    )


def parse_css_codepoints(css: str, class_prefix: str) -> dict[str, str]:
    """Map icon name to hex codepoint for every ``.<prefix><name>:before { content: "..." }`` rule."""
    rule_re = re.compile(
        r"^\s*\." + re.escape(class_prefix) + r'(?P<name>[^\n]+?):before\s*\{\s*content:\s*"\\?(?P<code>[0-9a-fA-F]+)"',
        re.MULTILINE,
    )
    return {m.group("name"): m.group("code").lower() for m in rule_re.finditer(css)}


def assemble_font(
    generator: GlyphFontGenerator,
    folder: IconFolder,
    icons: list[IconFile],
    codepoints: dict[str, int],
    workdir: Path,
    *,
    font_url: str = "",
) -> GeneratedBundle:
    options = generation_options(folder, icons, codepoints, workdir, font_url=font_url)
    log.info("Start generating webfont %s from %d icons (%d preassigned)", folder.name, len(icons), len(codepoints))
    try:
        result = generator.generate(options)
    except Exception as e:  # noqa: BLE001 - any generator failure aborts the run
        raise FontGenerationError(f"Webfont generation failed for {folder.name}: {e}") from e
    log.info("Successfully generated webfont files")

    files = list(result.files)
    if not options.json:
        return GeneratedBundle(files=files, codepoints=result.codepoints)

    hex_map = parse_css_codepoints(result.css, options.class_prefix)
    map_path = workdir / folder.codepoint_map_name
    log.info("Generate codepoint map %s", map_path)
    map_path.write_text(json.dumps(hex_map, indent=4, ensure_ascii=False), encoding="utf-8")
    if map_path not in files:
        files.append(map_path)

    return GeneratedBundle(
        files=files,
        codepoints={name: int(code, 16) for name, code in hex_map.items()},
        codepoint_map=map_path,
    )
