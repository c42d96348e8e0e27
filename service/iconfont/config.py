# Purpose: Runtime configuration for the webfont generator.
# Notes: All values come from the environment; AWS_REGION is optional inside Lambda.
from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

DEFAULT_FONT_URL = "https://{bucket}.s3.amazonaws.com/{folder}/"


@dataclass(frozen=True)
class IconfontConfig:
    region: str
    workdir: Path
    max_workers: int
    font_url: str
    raise_errors: bool
    log_level: str


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from e


def _env_flag(name: str) -> bool:
    v = os.environ.get(name, "").strip().lower()
    return v in {"1", "true", "yes", "on"}


def get_iconfont_config() -> IconfontConfig:
    region = os.environ.get("AWS_REGION", "").strip()
    workdir = os.environ.get("ICONFONT_WORKDIR", "").strip() or os.path.join(tempfile.gettempdir(), "iconfont")
    max_workers = _env_int("ICONFONT_MAX_WORKERS", 16)
    font_url = os.environ.get("ICONFONT_FONT_URL", "").strip() or DEFAULT_FONT_URL
    log_level = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"

    if max_workers < 1:
        raise RuntimeError("ICONFONT_MAX_WORKERS must be at least 1")

    return IconfontConfig(
        region=region,
        workdir=Path(workdir),
        max_workers=max_workers,
        font_url=font_url,
        raise_errors=_env_flag("ICONFONT_RAISE_ERRORS"),
        log_level=log_level,
    )
