from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from .errors import CleanupError

log = logging.getLogger(__name__)


def clear_workdir(workdir: Path) -> int:
    """Delete everything inside ``workdir``; returns the number of entries removed."""
    if not workdir.exists():
        return 0
    log.info("Delete all files in %s", workdir)
    removed = 0
    try:
        with os.scandir(workdir) as it:
            entries = list(it)
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                shutil.rmtree(entry.path)
            else:
                os.unlink(entry.path)
            removed += 1
    except OSError as e:
        raise CleanupError(f"Unable to clear working area {workdir}: {e}") from e
    return removed
