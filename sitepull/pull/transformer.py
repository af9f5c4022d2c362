# sitepull/pull/transformer.py
"""
Field transformer.

Rewrites typed field values of an entry into plain data for static-site
generators, using read-only lookups of sibling entries and media assets:

    slug       -> its `current` string
    image/file -> the referenced asset's `url`
    color      -> its `hex` string
    reference  -> the full referenced entry, itself transformed
    mapping    -> internal keys dropped, fields renamed via the field-name table

Missing reference or asset targets resolve to None. Reference expansion that
loops back to a document already being expanded raises CyclicReferenceError.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from sitepull.core.deep_map import FieldPath, deep_map
from sitepull.core.document import (
    FIELD_NAMES_FIELD,
    ID_FIELD,
    MODEL_TYPE_FIELD,
    Document,
    ValueKind,
)
from sitepull.core.exceptions import CyclicReferenceError, PipelineError
from sitepull.logging.logger import get_logger
from sitepull.logging.tags import TRANSFORM

logger = get_logger(__name__)


# =============================================================================
# Lookup Context
# =============================================================================


@dataclass(frozen=True)
class TransformContext:
    """
    Read-only lookups shared by every entry of one run.

    Both maps are keyed by each document's own `_id`, so an overlay-winning
    draft is only reachable under its `drafts.` id.
    """

    entries_by_id: Mapping[str, Document]
    assets_by_id: Mapping[str, Document]

    @classmethod
    def build(
        cls,
        entries: Iterable[Document],
        assets: Iterable[Document],
    ) -> "TransformContext":
        return cls(
            entries_by_id=MappingProxyType({doc.get(ID_FIELD): doc for doc in entries}),
            assets_by_id=MappingProxyType({doc.get(ID_FIELD): doc for doc in assets}),
        )

    def entry(self, entry_id: str) -> Optional[Document]:
        return self.entries_by_id.get(entry_id)

    def asset_url(self, asset_id: str) -> Optional[str]:
        asset = self.assets_by_id.get(asset_id)
        if not isinstance(asset, dict):
            return None
        return asset.get("url")


# =============================================================================
# Field Name Table
# =============================================================================


class FieldNameTable:
    """
    Key -> output name table stored on a mapping as a JSON string.

    Keys absent from the table keep their name.
    """

    def __init__(self, names: Optional[Mapping[str, str]] = None):
        self.names: Dict[str, str] = dict(names or {})

    @classmethod
    def parse(cls, raw: Any) -> "FieldNameTable":
        if isinstance(raw, dict):
            return cls(raw)
        try:
            names = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise PipelineError(f"Invalid {FIELD_NAMES_FIELD} value {raw!r}: {e}") from e
        # only objects carry names
        return cls(names if isinstance(names, dict) else None)

    def rename(self, mapping: Mapping[str, Any]) -> Dict[str, Any]:
        return {self.names.get(key, key): value for key, value in mapping.items()}

    def __len__(self) -> int:
        return len(self.names)


# =============================================================================
# Transformation
# =============================================================================


def _is_internal_key(key: Any) -> bool:
    return key == FIELD_NAMES_FIELD or (isinstance(key, str) and key.startswith("_"))


def transform_object(value: Any, field_path: FieldPath) -> Any:
    """
    Rewrite the shape of a mapping; other values pass through.

    Internal keys are dropped everywhere. The model type marker is kept on
    the entry root (the path resolver consumes it) and dropped below it.
    """
    if not isinstance(value, dict):
        return value

    raw_names = value.get(FIELD_NAMES_FIELD)
    is_root = len(field_path) == 0

    mapped = {key: child for key, child in value.items() if not _is_internal_key(key)}
    if not is_root:
        mapped.pop(MODEL_TYPE_FIELD, None)

    if raw_names:
        mapped = FieldNameTable.parse(raw_names).rename(mapped)
    return mapped


def _get_in(value: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


class FieldTransformer:
    """
    Transforms entries against a TransformContext.

    Pure: the same entry and context always give the same result, and
    neither input is mutated.

    Example:
        >>> context = TransformContext.build(entries, assets)
        >>> FieldTransformer(context).transform(entries[0])
    """

    def __init__(self, context: TransformContext):
        self.context = context

    def transform(self, entry: Document) -> Document:
        # Visited containers that came from reference expansion, by identity.
        # The value is kept alongside the id so the object outlives the walk.
        expanded: Dict[int, Tuple[Any, Any]] = {}

        def reference_chain(ancestors: Tuple[Any, ...]) -> List[Any]:
            return [expanded[id(a)][0] for a in ancestors if id(a) in expanded]

        def visit(value: Any, field_path: FieldPath, ancestors: Tuple[Any, ...], root: Any) -> Any:
            kind = ValueKind.of(value)

            if kind is ValueKind.SLUG and "current" in value:
                return value["current"]

            if kind is ValueKind.IMAGE or kind is ValueKind.FILE:
                asset_id = _get_in(value, "asset", "_ref")
                if not asset_id:
                    return None
                return self.context.asset_url(asset_id)

            if kind is ValueKind.COLOR:
                return value.get("hex")

            if kind is ValueKind.REFERENCE:
                ref_id = value.get("_ref")
                if not ref_id:
                    return None
                target = self.context.entry(ref_id)
                if target is None:
                    logger.debug(f"{TRANSFORM} Unresolved reference {ref_id!r} at {field_path}")
                    return None
                chain = reference_chain(ancestors)
                if ref_id in chain:
                    raise CyclicReferenceError(chain + [ref_id])
                result = transform_object(target, field_path)
                expanded[id(result)] = (ref_id, result)
                return result

            result = transform_object(value, field_path)
            if not field_path:
                expanded[id(result)] = (entry.get(ID_FIELD), result)
            return result

        return deep_map(entry, visit)

    def transform_all(self, entries: Iterable[Document]) -> List[Document]:
        return [self.transform(entry) for entry in entries]


def transform_entries(
    entries: Iterable[Document],
    context: TransformContext,
) -> List[Document]:
    """Transform every entry with a shared context."""
    return FieldTransformer(context).transform_all(entries)


__all__ = [
    "TransformContext",
    "FieldNameTable",
    "FieldTransformer",
    "transform_object",
    "transform_entries",
]
