# sitepull/core/exceptions.py
"""
All exceptions raised by the pull pipeline.

Hierarchy:
    SitePullError
    ├── PipelineError - Transformation/serialization failures (fatal)
    │   ├── UnsupportedFormatError - Output extension has no serializer
    │   ├── CyclicReferenceError - Reference expansion loops back on itself
    │   └── PathResolutionError - Output path cannot be computed
    └── SourceError - Documents could not be fetched or read

Configuration errors live in sitepull.core.config and HTTP errors in
sitepull.core.http, next to the code that raises them.
"""

from __future__ import annotations

from typing import Sequence


class SitePullError(Exception):
    """
    Base exception for all pull errors.

    Examples:
        >>> try:
        ...     pipeline.run(source, writer)
        ... except SitePullError as e:
        ...     print(f"Pull failed: {e}")
    """

    pass


# =============================================================================
# Pipeline Errors
# =============================================================================


class PipelineError(SitePullError):
    """Pipeline stage failed. Aborts the run before any file is written."""

    pass


class UnsupportedFormatError(PipelineError):
    """Output file extension has no serializer."""

    def __init__(self, file_path: str, extension: str):
        self.file_path = file_path
        self.extension = extension
        super().__init__(
            f"Build error, data file '{file_path}' could not be created, "
            f"extension '{extension}' is not supported"
        )


class CyclicReferenceError(PipelineError):
    """Reference expansion reached a document that is already being expanded."""

    def __init__(self, chain: Sequence[str]):
        self.chain = tuple(chain)
        super().__init__("Cyclic reference: " + " -> ".join(self.chain))


class PathResolutionError(PipelineError):
    """Output path for an entry cannot be computed."""

    pass


# =============================================================================
# Source Errors
# =============================================================================


class SourceError(SitePullError):
    """Documents could not be fetched or read."""

    pass


__all__ = [
    "SitePullError",
    "PipelineError",
    "UnsupportedFormatError",
    "CyclicReferenceError",
    "PathResolutionError",
    "SourceError",
]
