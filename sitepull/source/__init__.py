# sitepull/source/__init__.py
"""
Document sources.

Sources fetch raw documents regardless of where they live (Sanity API,
dataset export files).
"""

from sitepull.source.base import DocumentSource, build_query
from sitepull.source.plugins.export_file import ExportFileSource
from sitepull.source.plugins.sanity import SanitySource

__all__ = [
    "DocumentSource",
    "build_query",
    "ExportFileSource",
    "SanitySource",
]
