from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from .errors import CodepointMapError

log = logging.getLogger(__name__)


def read_codepoint_map(path: Path | None) -> str | None:
    if path is None:
        return None
    return path.read_text(encoding="utf-8")


def _to_codepoint(name: str, value: object) -> int:
    if not isinstance(value, str):
        raise CodepointMapError(f"Codepoint for '{name}' must be a hex string, got {value!r}")
    text = value.strip().lower()
    if text.startswith("0x"):
        text = text[2:]
    try:
        return int(text, 16)
    except ValueError as e:
        raise CodepointMapError(f"Codepoint for '{name}' is not hexadecimal: {value!r}") from e


def reconcile_codepoints(raw: str | None, icon_names: Iterable[str]) -> dict[str, int]:
    """
    Turn a persisted codepoint map into assignments for the icons present now.

    Entries for icons that no longer exist are dropped; icons without an entry
    are left for the font generator to assign.
    """
    if raw is None:
        return {}

    # Published maps may be double-encoded ("\\f101"); backslashes carry no meaning here.
    text = raw.replace("\\", "")
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise CodepointMapError(f"Codepoint map is not valid JSON: {e}") from e
    if not isinstance(obj, dict):
        raise CodepointMapError("Codepoint map must be a JSON object")

    present = set(icon_names)
    out: dict[str, int] = {}
    for name, value in obj.items():
        if name not in present:
            log.info("Dropping %s from codepoint map, icon no longer exists", name)
            continue
        out[name] = _to_codepoint(name, value)
    return out
