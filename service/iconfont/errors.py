from __future__ import annotations


class IconfontError(Exception):
    """Base class for failures that abort a webfont run."""


class CodepointMapError(IconfontError):
    pass


class FontGenerationError(IconfontError):
    pass


class CleanupError(IconfontError):
    pass


class ObjectStoreError(IconfontError):
    """Listing the icon folder failed; there is nothing to build from."""
