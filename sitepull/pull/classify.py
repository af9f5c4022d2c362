# sitepull/pull/classify.py
"""
Split a document collection into media assets and entries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from sitepull.core.document import AssetKind, Document, EntryRole


@dataclass
class ClassifiedDocuments:
    """Assets and entries derived from one overlaid collection."""

    entries: List[Document] = field(default_factory=list)
    assets: List[Document] = field(default_factory=list)

    @property
    def root_entries(self) -> List[Document]:
        """Entries whose role produces output (page, data, config)."""
        return [entry for entry in self.entries if EntryRole.of(entry).is_root]


def classify_documents(documents: Iterable[Document]) -> ClassifiedDocuments:
    result = ClassifiedDocuments()
    for doc in documents:
        if AssetKind.of(doc) is not None:
            result.assets.append(doc)
        else:
            result.entries.append(doc)
    return result


__all__ = ["ClassifiedDocuments", "classify_documents"]
