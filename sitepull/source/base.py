# sitepull/source/base.py
"""
Source protocol for fetching documents from a content store.

Sources handle the "where" of a pull: a live API, an export file, etc.
They return raw documents; every transformation happens downstream.

Flow: DocumentSource.fetch() → Documents → PullPipeline.build()
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from sitepull.core.document import DRAFT_ID_PREFIX, Document

SYSTEM_ID_PREFIX = "_."


def build_query(preview: bool) -> str:
    """
    GROQ query for every non-system document.

    Drafts are excluded unless previewing.
    """
    query = '*[!(_id in path("_.**"))'
    if not preview:
        query += ' && !(_id in path("drafts.**"))'
    return query + "]"


def matches_query(document: Document, preview: bool) -> bool:
    """Local equivalent of build_query() for sources that cannot run GROQ."""
    doc_id = document.get("_id")
    if not isinstance(doc_id, str):
        return True
    if doc_id.startswith(SYSTEM_ID_PREFIX):
        return False
    return preview or not doc_id.startswith(DRAFT_ID_PREFIX)


@runtime_checkable
class DocumentSource(Protocol):
    """
    Protocol for document sources.

    Example implementations:
    - SanitySource: Sanity HTTP query API
    - ExportFileSource: Dataset export (NDJSON or JSON array)
    """

    plugin_name: str

    def fetch(self, preview: bool = False) -> List[Document]:
        """
        Fetch all non-system documents.

        Args:
            preview: Include draft documents.
        """
        ...


__all__ = ["DocumentSource", "build_query", "matches_query"]
