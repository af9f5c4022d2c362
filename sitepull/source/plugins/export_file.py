# sitepull/source/plugins/export_file.py
"""
Dataset export source.

Reads documents from a local export instead of the live API:
- `.ndjson`: one JSON document per line (the `sanity dataset export` format)
- `.json`: a JSON array of documents, or an object with a `result` array

The same filtering as the live query applies.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Union

from sitepull.core.document import Document
from sitepull.core.exceptions import SourceError
from sitepull.logging.logger import get_logger
from sitepull.logging.tags import SOURCE
from sitepull.source.base import matches_query

logger = get_logger(__name__)


@dataclass
class ExportFileSource:
    """
    Source for documents stored in a local export file.

    Example:
        source = ExportFileSource("./export/data.ndjson")
        documents = source.fetch()
    """

    path: Union[str, Path]
    plugin_name: str = field(default="export_file", repr=False)

    def fetch(self, preview: bool = False) -> List[Document]:
        path = Path(self.path)
        if not path.is_file():
            raise SourceError(f"Export file not found: {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise SourceError(f"Failed to read export file {path}: {e}") from e

        if path.suffix.lower() == ".ndjson":
            documents = self._parse_ndjson(text, path)
        else:
            documents = self._parse_json(text, path)

        selected = [doc for doc in documents if matches_query(doc, preview)]
        logger.info(f"{SOURCE} Read {len(selected)} of {len(documents)} documents from {path}")
        return selected

    def _parse_ndjson(self, text: str, path: Path) -> List[Document]:
        documents = []
        for line_no, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                doc = json.loads(line)
            except ValueError as e:
                raise SourceError(f"Invalid JSON on line {line_no} of {path}: {e}") from e
            documents.append(self._check_document(doc, path))
        return documents

    def _parse_json(self, text: str, path: Path) -> List[Document]:
        try:
            data: Any = json.loads(text)
        except ValueError as e:
            raise SourceError(f"Invalid JSON in {path}: {e}") from e

        if isinstance(data, dict) and "result" in data:
            data = data["result"]
        if not isinstance(data, list):
            raise SourceError(f"Expected a list of documents in {path}")
        return [self._check_document(doc, path) for doc in data]

    @staticmethod
    def _check_document(doc: Any, path: Path) -> Document:
        if not isinstance(doc, dict):
            raise SourceError(f"Expected document objects in {path}, got {type(doc).__name__}")
        return doc


__all__ = ["ExportFileSource"]
