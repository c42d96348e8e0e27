"""AWS Lambda entry point: S3 object-created notifications for icon folders."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any

from .config import get_iconfont_config
from .pipeline import WebfontPipeline, build_pipeline

log = logging.getLogger(__name__)

RESPONSE_MESSAGE = "Webfont generator executed successfully"


@lru_cache(maxsize=1)
def get_pipeline() -> WebfontPipeline:
    return build_pipeline(get_iconfont_config())


def _configure_logging(level: str) -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    root.setLevel(level)


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """
    Run the pipeline for one notification.

    The response is the same fixed envelope whether the build succeeded,
    was skipped or failed; the outcome is visible in S3 and in the logs.
    Set ICONFONT_RAISE_ERRORS to let fatal failures reach the runtime.
    """
    config = get_iconfont_config()
    _configure_logging(config.log_level)
    log.info("Reading options from event: %s", json.dumps(event, default=str)[:4000])

    try:
        result = get_pipeline().run(event)
        log.info("Pipeline %s", result.status)
    except Exception:  # noqa: BLE001 - the envelope is returned whatever the outcome
        log.exception("An error occurred while generating the webfont")
        if config.raise_errors:
            raise

    return {
        "statusCode": 200,
        "body": json.dumps({"message": RESPONSE_MESSAGE, "input": event}, default=str),
    }
