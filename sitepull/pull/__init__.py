# sitepull/pull/__init__.py
"""
Document transformation pipeline.

Flow: overlay → classify → transform → resolve paths → serialize
"""

from sitepull.pull.classify import ClassifiedDocuments, classify_documents
from sitepull.pull.overlay import overlay_drafts, resolve_overlay
from sitepull.pull.paths import GENERATOR_LAYOUTS, GeneratorLayout, resolve_output_path
from sitepull.pull.pipeline import PullPipeline, create_file
from sitepull.pull.serializer import serialize
from sitepull.pull.transformer import (
    FieldNameTable,
    FieldTransformer,
    TransformContext,
    transform_entries,
)

__all__ = [
    "ClassifiedDocuments",
    "classify_documents",
    "overlay_drafts",
    "resolve_overlay",
    "GENERATOR_LAYOUTS",
    "GeneratorLayout",
    "resolve_output_path",
    "PullPipeline",
    "create_file",
    "serialize",
    "FieldNameTable",
    "FieldTransformer",
    "TransformContext",
    "transform_entries",
]
