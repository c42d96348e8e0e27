"""
Icon font builder backed by fontTools.

Each SVG becomes one glyph: outlines are read with svgLib, flipped into font
coordinates, scaled to the font height, converted to quadratic curves and
packed into a TrueType font. WOFF and WOFF2 are re-flavoured copies of the
same font (WOFF2 needs brotli).
"""

from __future__ import annotations

import hashlib
import logging
import re
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.cu2quPen import Cu2QuPen
from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.transformPen import TransformPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.svgLib import SVGPath
from fontTools.ttLib import TTFont

from .base import GenerationOptions, GenerationResult, Glyph
from .render import render, render_css

log = logging.getLogger(__name__)

# Max deviation (font units) when approximating cubic curves with quadratics.
CURVE_TOLERANCE = 1.0
MAX_CODEPOINT = 0x10FFFF
WEB_FLAVORS = {"woff", "woff2"}
SIDECAR_TEMPLATES = {"css": "font.css", "scss": "font.scss", "html": "preview.html"}

_NUM_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


@dataclass(frozen=True)
class IconOutline:
    recording: RecordingPen
    bounds: tuple[float, float, float, float]
    view_top: float
    view_height: float | None


def assign_codepoints(names: list[str], preassigned: dict[str, int], start: int) -> list[Glyph]:
    used: set[int] = set()
    fixed: dict[str, int] = {}
    for name in names:
        cp = preassigned.get(name)
        if cp is None:
            continue
        if not 0 < cp <= MAX_CODEPOINT or cp in used:
            log.warning("Codepoint %x for %s is invalid or already taken, reassigning", cp, name)
            continue
        used.add(cp)
        fixed[name] = cp

    glyphs: list[Glyph] = []
    nxt = start
    for name in names:
        cp = fixed.get(name)
        if cp is None:
            while nxt in used:
                nxt += 1
            cp = nxt
            used.add(cp)
        glyphs.append(Glyph(name=name, codepoint=cp))
    return glyphs


def _view_box(svg: SVGPath) -> tuple[float, float | None]:
    root = svg.root
    nums = [float(x) for x in _NUM_RE.findall(root.get("viewBox") or "")]
    if len(nums) == 4 and nums[3] > 0:
        return nums[1], nums[3]
    height = _NUM_RE.findall(root.get("height") or "")
    if height and float(height[0]) > 0:
        return 0.0, float(height[0])
    return 0.0, None


def load_outline(path: Path) -> IconOutline:
    svg = SVGPath(filename=str(path))
    recording = RecordingPen()
    svg.draw(recording)

    bounds_pen = BoundsPen(None)
    recording.replay(bounds_pen)
    if bounds_pen.bounds is None:
        raise ValueError(f"{path.name} has no drawable outline")

    view_top, view_height = _view_box(svg)
    return IconOutline(recording=recording, bounds=bounds_pen.bounds, view_top=view_top, view_height=view_height)


def _scale_and_top(outline: IconOutline, options: GenerationOptions) -> tuple[float, float]:
    x_min, y_min, x_max, y_max = outline.bounds
    if options.normalize or not outline.view_height:
        extent = (y_max - y_min) or (x_max - x_min) or 1.0
        return options.font_height / extent, y_min
    return options.font_height / outline.view_height, outline.view_top


def _notdef(options: GenerationOptions, ascent: int) -> object:
    pen = TTGlyphPen(None)
    x0, y0 = 50, -options.descent + 50
    x1, y1 = options.font_height // 2 - 50, ascent - 50
    pen.moveTo((x0, y0))
    pen.lineTo((x1, y0))
    pen.lineTo((x1, y1))
    pen.lineTo((x0, y1))
    pen.closePath()
    return pen.glyph()


class FontToolsGenerator:
    def generate(self, options: GenerationOptions) -> GenerationResult:
        if not options.files:
            raise ValueError("No icon files to generate a font from")
        unsupported = [t for t in options.types if t != "ttf" and t not in WEB_FLAVORS]
        if unsupported:
            raise ValueError(f"Unsupported font types: {', '.join(unsupported)}")

        files = sorted(options.files, key=lambda p: Path(p).stem)
        glyphs = assign_codepoints([Path(p).stem for p in files], options.codepoints, options.start_codepoint)
        outlines = [load_outline(Path(p)) for p in files]

        ttf_bytes = self._build_ttf(options, glyphs, outlines)
        version = hashlib.sha256(ttf_bytes).hexdigest()[:12]

        options.dest.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for ext in options.types:
            path = options.dest / f"{options.font_name}.{ext}"
            if ext == "ttf":
                path.write_bytes(ttf_bytes)
            else:
                font = TTFont(BytesIO(ttf_bytes))
                font.flavor = ext
                font.save(str(path))
                font.close()
            written.append(path)

        css = render_css(options, glyphs, version=version)
        sidecars = {"css": options.css, "scss": options.scss, "html": options.html}
        for ext, enabled in sidecars.items():
            if not enabled:
                continue
            text = css if ext == "css" else render(SIDECAR_TEMPLATES[ext], options, glyphs, version=version)
            path = options.dest / f"{options.font_name}.{ext}"
            path.write_text(text, encoding="utf-8")
            written.append(path)

        log.info("Generated %s with %d glyphs", options.font_name, len(glyphs))
        return GenerationResult(css=css, files=written, glyphs=glyphs)

    def _build_ttf(self, options: GenerationOptions, glyphs: list[Glyph], outlines: list[IconOutline]) -> bytes:
        ascent = options.font_height - options.descent

        placements: list[tuple[float, float, float]] = []
        for outline in outlines:
            scale, top = _scale_and_top(outline, options)
            x_min, _, x_max, _ = outline.bounds
            placements.append((scale, top, (x_max - x_min) * scale))
        max_width = max(width for _, _, width in placements)

        glyf: dict[str, object] = {".notdef": _notdef(options, ascent)}
        advances: dict[str, int] = {".notdef": options.font_height // 2}
        for glyph, outline, (scale, top, width) in zip(glyphs, outlines, placements):
            advance = max_width if options.fixed_width else width
            offset = (advance - width) / 2 if options.center_horizontally else 0.0
            x_min = outline.bounds[0]

            tt_pen = TTGlyphPen(None)
            pen = TransformPen(
                Cu2QuPen(tt_pen, CURVE_TOLERANCE, reverse_direction=True),
                (scale, 0, 0, -scale, offset - x_min * scale, top * scale + ascent),
            )
            outline.recording.replay(pen)
            glyf[glyph.glyph_name] = tt_pen.glyph()
            advances[glyph.glyph_name] = int(round(advance))

        fb = FontBuilder(options.font_height, isTTF=True)
        fb.setupGlyphOrder(list(glyf))
        fb.setupCharacterMap({g.codepoint: g.glyph_name for g in glyphs})
        fb.setupGlyf(glyf)
        glyf_table = fb.font["glyf"]
        fb.setupHorizontalMetrics(
            {name: (advances[name], getattr(glyf_table[name], "xMin", 0)) for name in glyf}
        )
        fb.setupHorizontalHeader(ascent=ascent, descent=-options.descent)
        fb.setupNameTable({"familyName": options.font_name, "styleName": "Regular"})
        fb.setupOS2(
            sTypoAscender=ascent,
            sTypoDescender=-options.descent,
            usWinAscent=ascent,
            usWinDescent=options.descent,
        )
        fb.setupPost()

        buf = BytesIO()
        fb.save(buf)
        return buf.getvalue()
