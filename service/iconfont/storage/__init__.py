"""Object-store backends used by the webfont pipeline."""

from .base import ObjectStore
from .local import LocalObjectStore
from .s3 import S3ObjectStore, s3_client

__all__ = [
    "ObjectStore",
    "LocalObjectStore",
    "S3ObjectStore",
    "s3_client",
]
