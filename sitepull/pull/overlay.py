# sitepull/pull/overlay.py
"""
Draft/published overlay.

With preview enabled, the draft variant of a document replaces its published
counterpart; documents are keyed by canonical id so the output holds at most
one document per logical identity. The winning draft keeps its own
`drafts.`-prefixed `_id`.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from sitepull.core.document import ID_FIELD, Document, canonical_id, is_draft_id
from sitepull.logging.logger import get_logger
from sitepull.logging.tags import OVERLAY

logger = get_logger(__name__)


def overlay_drafts(documents: Iterable[Document]) -> List[Document]:
    """
    Replace published documents with their drafts.

    Published documents keep their position; drafts without a published
    counterpart are appended in input order. Later duplicates of the same
    id win.
    """
    published: List[Document] = []
    drafts: List[Document] = []
    for doc in documents:
        (drafts if is_draft_id(doc.get(ID_FIELD)) else published).append(doc)

    by_pure_id: Dict[Optional[str], Document] = {doc.get(ID_FIELD): doc for doc in published}
    for doc in drafts:
        by_pure_id[canonical_id(doc.get(ID_FIELD))] = doc

    logger.debug(
        f"{OVERLAY} {len(drafts)} drafts over {len(published)} published "
        f"-> {len(by_pure_id)} documents"
    )
    return list(by_pure_id.values())


def resolve_overlay(documents: Iterable[Document], preview: bool) -> List[Document]:
    """
    Produce the published view of a fetched collection.

    Args:
        documents: Fetched documents (drafts and published mixed).
        preview: Show drafts. When False every draft is removed.
    """
    if preview:
        return overlay_drafts(documents)
    return [doc for doc in documents if not is_draft_id(doc.get(ID_FIELD))]


__all__ = ["overlay_drafts", "resolve_overlay"]
