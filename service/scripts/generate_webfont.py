#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from urllib.parse import quote_plus

from iconfont.config import get_iconfont_config
from iconfont.errors import IconfontError
from iconfont.pipeline import build_pipeline
from iconfont.storage import LocalObjectStore


def s3_event(bucket: str, key: str) -> dict[str, object]:
    """Minimal object-created notification for ``bucket``/``key``."""
    return {"Records": [{"s3": {"bucket": {"name": bucket}, "object": {"key": key}}}]}


def main() -> int:
    ap = argparse.ArgumentParser(description="Rebuild the webfont for the icon folder containing KEY")
    ap.add_argument("bucket", help="Bucket name (a directory under --local-root in local mode)")
    ap.add_argument("key", help="Key of any SVG inside the icon folder, e.g. icons/brand/logo.svg")
    ap.add_argument(
        "--local-root",
        type=Path,
        default=None,
        help="Read and write <local-root>/<bucket>/<key> instead of S3",
    )
    ap.add_argument("--workdir", type=Path, default=None, help="Working area (default: ICONFONT_WORKDIR)")
    ap.add_argument("--max-workers", type=int, default=0, help="Parallel transfers (default: ICONFONT_MAX_WORKERS)")
    args = ap.parse_args()

    if args.max_workers < 0:
        raise SystemExit("--max-workers must be >= 0")

    config = get_iconfont_config()
    if args.workdir:
        config = replace(config, workdir=args.workdir)
    if args.max_workers:
        config = replace(config, max_workers=args.max_workers)
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    store = LocalObjectStore(args.local_root) if args.local_root else None
    pipeline = build_pipeline(config, store=store)

    # Keys on the command line are plain text; the notification carries them URL-encoded.
    try:
        result = pipeline.run(s3_event(args.bucket, quote_plus(args.key, safe="/")))
    except IconfontError as e:
        print(f"Webfont generation failed: {e}")
        return 1

    if result.status == "skipped":
        print(f"Skipped {args.key}: not an SVG inside an icon folder")
        return 0

    print(f"Built {result.folder.name} with {len(result.codepoints)} glyphs; uploaded {len(result.uploaded)} files")
    for key in result.uploaded:
        print(f"  {key}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
