"""
Webfont pipeline: download → reconcile codepoints → generate → upload → clean.

Stages run strictly in sequence; fan-out happens only inside download and
upload, and each of those joins before the next stage starts.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .assemble import assemble_font
from .cleanup import clear_workdir
from .codepoints import read_codepoint_map, reconcile_codepoints
from .config import DEFAULT_FONT_URL, IconfontConfig
from .download import download_icon_set
from .errors import CodepointMapError, IconfontError
from .events import parse_trigger_event, resolve_icon_folder
from .fonts import FontToolsGenerator, GlyphFontGenerator
from .models import IconFolder, PipelineResult
from .storage import ObjectStore, S3ObjectStore, s3_client
from .upload import upload_bundle

log = logging.getLogger(__name__)


class WebfontPipeline:
    def __init__(
        self,
        store: ObjectStore,
        generator: GlyphFontGenerator,
        *,
        workdir: Path,
        max_workers: int = 16,
        font_url: str = DEFAULT_FONT_URL,
    ) -> None:
        self.store = store
        self.generator = generator
        self.workdir = Path(workdir)
        self.max_workers = max_workers
        self.font_url = font_url

    def run(self, payload: Any) -> PipelineResult:
        event = parse_trigger_event(payload)
        if event is None:
            return PipelineResult(status="skipped")
        folder = resolve_icon_folder(event)
        if folder is None:
            return PipelineResult(status="skipped")
        return self.build(folder)

    def build(self, folder: IconFolder) -> PipelineResult:
        log.info("Generating webfont %s from s3://%s/%s/", folder.name, folder.bucket, folder.prefix)
        # Leftovers from an invocation that timed out would otherwise be published with this bundle.
        stale = clear_workdir(self.workdir)
        if stale:
            log.warning("Removed %d stale entries from %s", stale, self.workdir)

        try:
            downloaded = download_icon_set(self.store, folder, self.workdir, max_workers=self.max_workers)
            try:
                raw_map = read_codepoint_map(downloaded.codepoint_map)
            except OSError as e:
                raise CodepointMapError(f"Unable to read {downloaded.codepoint_map}: {e}") from e
            codepoints = reconcile_codepoints(raw_map, downloaded.icon_names)
            bundle = assemble_font(
                self.generator,
                folder,
                downloaded.icons,
                codepoints,
                self.workdir,
                font_url=self.font_url_for(folder),
            )
            uploaded = upload_bundle(self.store, folder, self.workdir, max_workers=self.max_workers)
        except Exception:
            self._discard()
            raise

        clear_workdir(self.workdir)
        log.info("Finished generating web font %s", folder.name)
        return PipelineResult(
            status="completed",
            folder=folder,
            downloaded=len(downloaded.icons),
            uploaded=uploaded.uploaded,
            codepoints=bundle.codepoints,
        )

    def font_url_for(self, folder: IconFolder) -> str:
        return self.font_url.format(bucket=folder.bucket, folder=folder.prefix, name=folder.name)

    def _discard(self) -> None:
        try:
            clear_workdir(self.workdir)
        except IconfontError as e:
            log.error("Working area was not cleared after a failed run: %s", e)


def build_pipeline(
    config: IconfontConfig,
    *,
    store: ObjectStore | None = None,
    generator: GlyphFontGenerator | None = None,
) -> WebfontPipeline:
    if store is None:
        store = S3ObjectStore(s3_client(region=config.region))
    return WebfontPipeline(
        store,
        generator or FontToolsGenerator(),
        workdir=config.workdir,
        max_workers=config.max_workers,
        font_url=config.font_url,
    )
