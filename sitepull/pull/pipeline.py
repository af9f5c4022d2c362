# sitepull/pull/pipeline.py
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional

from sitepull.core.document import MODEL_TYPE_FIELD, Document, OutputFile
from sitepull.logging.logger import get_logger
from sitepull.logging.tags import PIPELINE
from sitepull.pull.classify import classify_documents
from sitepull.pull.overlay import resolve_overlay
from sitepull.pull.paths import resolve_output_path, strip_routing_fields
from sitepull.pull.serializer import serialize
from sitepull.pull.transformer import FieldTransformer, TransformContext

if TYPE_CHECKING:
    from sitepull.source.base import DocumentSource
    from sitepull.writer import FileWriter

logger = get_logger(__name__)


def create_file(entry: Document, ssg_type: Optional[str]) -> Optional[OutputFile]:
    """
    Route and render one transformed root entry.

    Returns None for entries that produce no standalone file.
    """
    file_path = resolve_output_path(entry, ssg_type)
    if file_path is None:
        logger.debug(f"{PIPELINE} No file for {entry.get(MODEL_TYPE_FIELD)} entry")
        return None
    data = strip_routing_fields(entry)
    return OutputFile(path=file_path, content=serialize(data, file_path))


class PullPipeline:
    """
    End-to-end pull pipeline:

        source
          -> overlay (drafts over published, or drafts removed)
          -> classification (assets vs entries, root entries by role)
          -> field transformation (slugs, assets, colors, references, renames)
          -> path resolution (generator directory conventions)
          -> serialization (yaml / toml / json / md / html)
          -> writer

    build() is pure and computes every file before run() writes any, so a
    fatal error leaves the output tree untouched.
    """

    def __init__(self, *, ssg_type: Optional[str] = None, preview: bool = False) -> None:
        self.ssg_type = ssg_type
        self.preview = preview

    def build(self, documents: Iterable[Document]) -> List[OutputFile]:
        documents = resolve_overlay(documents, self.preview)
        classified = classify_documents(documents)
        logger.info(
            f"{PIPELINE} {len(classified.entries)} entries, {len(classified.assets)} assets"
        )

        context = TransformContext.build(classified.entries, classified.assets)
        roots = classified.root_entries
        transformed = FieldTransformer(context).transform_all(roots)

        logger.info(f"{PIPELINE} Generating file data for {len(transformed)} entries")
        files: List[OutputFile] = []
        for entry in transformed:
            output = create_file(entry, self.ssg_type)
            if output is not None:
                files.append(output)

        skipped = len(transformed) - len(files)
        if skipped:
            logger.info(f"{PIPELINE} {skipped} data entries have no file of their own")
        return files

    def run(self, source: "DocumentSource", writer: "FileWriter") -> int:
        """Fetch, build and write. Returns the number of files written."""
        logger.info(f"{PIPELINE} Starting pull from {source.plugin_name}")
        documents = source.fetch(preview=self.preview)
        logger.info(f"{PIPELINE} Got {len(documents)} documents")

        files = self.build(documents)

        logger.info(f"{PIPELINE} Writing {len(files)} files")
        writer.write(files)
        logger.info(f"{PIPELINE} Pull finished, written={len(files)}")
        return len(files)


__all__ = ["PullPipeline", "create_file"]
