# sitepull/__init__.py
"""
sitepull - pull structured content from a headless CMS into a static site.

Documents fetched from Sanity are overlaid (drafts over published),
classified into assets and entries, field-transformed, routed to
generator-specific file paths and serialized as YAML, TOML, JSON,
Markdown front matter or HTML.

Quick Start:
    >>> from sitepull import PullPipeline, SanitySource, FileWriter
    >>> pipeline = PullPipeline(ssg_type="hugo")
    >>> pipeline.run(SanitySource(project_id="abc123"), FileWriter("./site"))

Architecture:
    sitepull/
    ├── core/        # Document model, deep mapper, errors, config, HTTP
    ├── pull/        # Overlay, transformer, path resolver, serializer, pipeline
    ├── source/      # Document sources (Sanity HTTP API, export files)
    ├── config/      # PullConfig schema + loader
    ├── cli/         # Typer application
    └── writer.py    # Output file writer
"""

from sitepull.config import PullConfig, load_pull_config
from sitepull.core.document import OutputFile
from sitepull.core.exceptions import SitePullError, UnsupportedFormatError
from sitepull.pull.pipeline import PullPipeline
from sitepull.source import ExportFileSource, SanitySource
from sitepull.writer import FileWriter

__version__ = "0.1.0"

__all__ = [
    "PullConfig",
    "load_pull_config",
    "OutputFile",
    "SitePullError",
    "UnsupportedFormatError",
    "PullPipeline",
    "SanitySource",
    "ExportFileSource",
    "FileWriter",
]
