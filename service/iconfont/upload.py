from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from .models import IconFolder, UploadResult
from .storage import ObjectStore

log = logging.getLogger(__name__)

CONTENT_TYPES = {
    ".eot": "application/vnd.ms-fontobject",
    ".woff2": "font/woff2",
    ".woff": "application/font-woff",
    ".ttf": "application/font-sfnt",
    ".css": "text/css",
    ".html": "text/html",
    ".scss": "text/x-scss",
    ".json": "application/json",
}
DEFAULT_CONTENT_TYPE = "text/plain"


def content_type_for(filename: str) -> str:
    return CONTENT_TYPES.get(os.path.splitext(filename)[1], DEFAULT_CONTENT_TYPE)


def bundle_files(workdir: Path) -> list[Path]:
    if not workdir.is_dir():
        return []
    with os.scandir(workdir) as it:
        entries = [Path(e.path) for e in it if e.is_file()]
    return sorted(p for p in entries if p.suffix in CONTENT_TYPES)


def _put(store: ObjectStore, folder: IconFolder, path: Path) -> str:
    log.info("Start uploading %s", path.name)
    body = path.read_bytes()
    key = folder.key_for(path.name)
    store.put_bytes(folder.bucket, key, body, content_type_for(path.name))
    return key


def upload_bundle(
    store: ObjectStore,
    folder: IconFolder,
    workdir: Path,
    *,
    max_workers: int = 16,
) -> UploadResult:
    files = bundle_files(workdir)
    uploaded: list[str] = []
    failed: list[str] = []

    if files:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {executor.submit(_put, store, folder, path): path for path in files}
            for future in as_completed(futures):
                path = futures[future]
                try:
                    key = future.result()
                except Exception:  # noqa: BLE001 - remaining files are still published
                    log.exception("Failed to upload %s", path.name)
                    failed.append(path.name)
                    continue
                log.info("File uploaded to s3://%s/%s", folder.bucket, key)
                uploaded.append(key)

    log.info("%d webfont files uploaded to '%s/%s/'", len(uploaded), folder.bucket, folder.prefix)
    return UploadResult(uploaded=sorted(uploaded), failed=sorted(failed))
