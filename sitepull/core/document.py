# sitepull/core/document.py
"""
Core document types for the pull pipeline.

A Document is a plain mapping fetched from the content store. Markers carried
on documents and field values (`_type`, `stackbit_model_type`) are decoded into
closed enums here so the pipeline never compares raw marker strings.

Flow: Source → Documents → Overlay → Entries/Assets → Transformer → OutputFile
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

Document = Dict[str, Any]

DRAFT_ID_PREFIX = "drafts."

# Field names understood by the pipeline
ID_FIELD = "_id"
TYPE_FIELD = "_type"
MODEL_TYPE_FIELD = "stackbit_model_type"
FIELD_NAMES_FIELD = "stackbit_field_names"
URL_PATH_FIELD = "stackbit_url_path"
DIR_FIELD = "stackbit_dir"
FILE_EXT_FIELD = "stackbit_file_ext"
FILE_PATH_FIELD = "stackbit_file_path"


# =============================================================================
# Draft Identity
# =============================================================================


def is_draft_id(object_id: Optional[str]) -> bool:
    """True if the id carries the draft marker."""
    return isinstance(object_id, str) and object_id.startswith(DRAFT_ID_PREFIX)


def canonical_id(object_id: Optional[str]) -> Optional[str]:
    """Strip the draft marker from an id (no-op for canonical ids)."""
    if is_draft_id(object_id):
        return object_id[len(DRAFT_ID_PREFIX) :]
    return object_id


def draft_id(object_id: str) -> str:
    """Prefix the draft marker unless the id already has it."""
    if is_draft_id(object_id):
        return object_id
    return f"{DRAFT_ID_PREFIX}{object_id}"


# =============================================================================
# Tagged Variants
# =============================================================================


class AssetKind(Enum):
    """Media asset document types."""

    IMAGE = "sanity.imageAsset"
    FILE = "sanity.fileAsset"

    @classmethod
    def of(cls, document: Any) -> Optional["AssetKind"]:
        """Asset kind of a document, or None for entries."""
        if not isinstance(document, dict):
            return None
        try:
            return cls(document.get(TYPE_FIELD))
        except ValueError:
            return None


class EntryRole(Enum):
    """Role an entry plays in the generated site."""

    PAGE = "page"
    DATA = "data"
    CONFIG = "config"
    UNRECOGNIZED = None

    @classmethod
    def of(cls, entry: Document) -> "EntryRole":
        marker = entry.get(MODEL_TYPE_FIELD)
        for role in (cls.PAGE, cls.DATA, cls.CONFIG):
            if marker == role.value:
                return role
        return cls.UNRECOGNIZED

    @property
    def is_root(self) -> bool:
        """Whether entries with this role produce output files."""
        return self is not EntryRole.UNRECOGNIZED


class ValueKind(Enum):
    """Typed field values that the transformer rewrites."""

    SLUG = "slug"
    IMAGE = "image"
    FILE = "file"
    COLOR = "color"
    REFERENCE = "reference"
    OTHER = None

    @classmethod
    def of(cls, value: Any) -> "ValueKind":
        if not isinstance(value, dict):
            return cls.OTHER
        marker = value.get(TYPE_FIELD)
        if marker is None:
            return cls.OTHER
        try:
            return cls(marker)
        except ValueError:
            return cls.OTHER


# =============================================================================
# Output
# =============================================================================


@dataclass(frozen=True)
class OutputFile:
    """
    A rendered file ready to be written.

    `path` is relative to the output root and always uses forward slashes.
    """

    path: str
    content: str

    @property
    def data(self) -> bytes:
        """Content encoded for writing."""
        return self.content.encode("utf-8")

    def __repr__(self) -> str:
        return f"OutputFile({self.path!r}, {len(self.content)} chars)"


__all__ = [
    "Document",
    "DRAFT_ID_PREFIX",
    "is_draft_id",
    "canonical_id",
    "draft_id",
    "AssetKind",
    "EntryRole",
    "ValueKind",
    "OutputFile",
]
