"""Build icon webfonts from SVG folders in S3."""

from .errors import CleanupError, CodepointMapError, FontGenerationError, IconfontError, ObjectStoreError
from .models import IconFile, IconFolder, PipelineResult, TriggerEvent
from .pipeline import WebfontPipeline, build_pipeline

__all__ = [
    "CleanupError",
    "CodepointMapError",
    "FontGenerationError",
    "IconfontError",
    "ObjectStoreError",
    "IconFile",
    "IconFolder",
    "PipelineResult",
    "TriggerEvent",
    "WebfontPipeline",
    "build_pipeline",
]
