# sitepull/core/__init__.py
"""
Pipeline-agnostic building blocks: document model, deep mapper, errors,
configuration loading and the HTTP client factory.
"""

from sitepull.core.deep_map import deep_map
from sitepull.core.document import (
    AssetKind,
    Document,
    EntryRole,
    OutputFile,
    ValueKind,
    canonical_id,
    draft_id,
    is_draft_id,
)
from sitepull.core.exceptions import (
    CyclicReferenceError,
    PathResolutionError,
    PipelineError,
    SitePullError,
    SourceError,
    UnsupportedFormatError,
)

__all__ = [
    "deep_map",
    "AssetKind",
    "Document",
    "EntryRole",
    "OutputFile",
    "ValueKind",
    "canonical_id",
    "draft_id",
    "is_draft_id",
    "CyclicReferenceError",
    "PathResolutionError",
    "PipelineError",
    "SitePullError",
    "SourceError",
    "UnsupportedFormatError",
]
