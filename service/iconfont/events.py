from __future__ import annotations

import logging
import posixpath
import re
from typing import Any
from urllib.parse import unquote_plus

from pydantic import ValidationError

from .models import ICON_EXTENSION, IconFolder, S3Notification, TriggerEvent

log = logging.getLogger(__name__)

_EXTENSION_RE = re.compile(r"\.([^.]*)$")


def parse_trigger_event(payload: Any) -> TriggerEvent | None:
    try:
        notification = S3Notification.model_validate(payload)
    except ValidationError as e:
        log.error("Unsupported trigger payload: %s", e.errors(include_url=False))
        return None

    record = notification.Records[0].s3
    # Keys arrive URL-encoded with '+' standing in for spaces.
    key = unquote_plus(record.object_.key)
    return TriggerEvent(bucket=record.bucket.name, key=key)


def infer_file_type(key: str) -> str:
    m = _EXTENSION_RE.search(key)
    return m.group(1) if m else ""


def resolve_icon_folder(event: TriggerEvent) -> IconFolder | None:
    """
    Return the icon set the uploaded object belongs to, or None when the
    upload should not trigger a build.
    """
    file_type = infer_file_type(event.key)
    if not file_type:
        log.error("Unable to infer file type for key %s", event.key)
        return None
    if file_type != ICON_EXTENSION:
        log.info("Skipping non-svg %s", event.key)
        return None

    prefix = posixpath.dirname(event.key)
    name = prefix.split("/")[-1]
    if not name:
        log.info("No folder name specified %s", event.key)
        return None

    return IconFolder(bucket=event.bucket, prefix=prefix, name=name)
