from __future__ import annotations

import logging
import posixpath
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from .errors import ObjectStoreError
from .models import ICON_EXTENSION, DownloadResult, IconFile, IconFolder
from .storage import ObjectStore

log = logging.getLogger(__name__)


def _fetch(store: ObjectStore, bucket: str, key: str, dest: Path) -> Path:
    log.info("Downloading %s", key)
    body = store.get_bytes(bucket, key)
    dest.write_bytes(body)
    return dest


def download_icon_set(
    store: ObjectStore,
    folder: IconFolder,
    workdir: Path,
    *,
    max_workers: int = 16,
) -> DownloadResult:
    workdir.mkdir(parents=True, exist_ok=True)
    map_name = folder.codepoint_map_name

    try:
        keys = store.list_keys(folder.bucket, folder.key_for(""))
    except Exception as e:  # noqa: BLE001 - no listing, nothing to build
        raise ObjectStoreError(f"Unable to list s3://{folder.bucket}/{folder.prefix}/: {e}") from e

    wanted: list[str] = []
    for key in keys:
        filename = posixpath.basename(key)
        if posixpath.splitext(filename)[1] != f".{ICON_EXTENSION}" and filename != map_name:
            log.info("Not an SVG file %s", key)
            continue
        wanted.append(key)

    icons: list[IconFile] = []
    codepoint_map: Path | None = None
    failed: list[str] = []

    if wanted:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {
                executor.submit(_fetch, store, folder.bucket, key, workdir / posixpath.basename(key)): key
                for key in wanted
            }
            for future in as_completed(futures):
                key = futures[future]
                try:
                    path = future.result()
                except Exception:  # noqa: BLE001 - one bad file must not sink the icon set
                    log.exception("Failed to download %s", key)
                    failed.append(key)
                    continue

                if path.name == map_name:
                    log.info("Codepoint map detected: %s", map_name)
                    codepoint_map = path
                else:
                    icons.append(IconFile(name=path.stem, path=path))

    icons.sort(key=lambda icon: icon.name)
    log.info(
        "%d SVG files downloaded from '%s/%s/' to '%s'",
        len(icons),
        folder.bucket,
        folder.prefix,
        workdir,
    )
    return DownloadResult(icons=icons, codepoint_map=codepoint_map, failed=sorted(failed))
