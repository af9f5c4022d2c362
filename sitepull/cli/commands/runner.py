# sitepull/cli/commands/runner.py
"""
Shared execution for pull-style commands.

Builds the pipeline from a PullConfig, runs it against a source and maps
failures to exit code 1.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import typer

from sitepull.cli.ui import ui
from sitepull.config import PullConfig, load_pull_config
from sitepull.core.config import ConfigError
from sitepull.core.exceptions import SitePullError
from sitepull.core.http import APIError
from sitepull.logging.logger import configure_logging, get_logger
from sitepull.logging.tags import CLI
from sitepull.pull.paths import GENERATOR_LAYOUTS
from sitepull.pull.pipeline import PullPipeline
from sitepull.source.base import DocumentSource
from sitepull.writer import FileWriter

logger = get_logger(__name__)


def setup_logging(verbose: bool) -> None:
    configure_logging(logging.DEBUG if verbose else logging.INFO)


def load_config_or_exit(config_path: Optional[Path], **overrides: Any) -> PullConfig:
    try:
        return load_pull_config(config_path, **overrides)
    except ConfigError as e:
        ui.error(str(e))
        raise typer.Exit(1)


def run_pull(source: DocumentSource, config: PullConfig, dry_run: bool = False) -> int:
    """
    Run the pipeline and report.

    Returns:
        Number of files generated.

    Raises:
        typer.Exit: With code 1 on any pull failure.
    """
    if config.ssg_type not in GENERATOR_LAYOUTS:
        ui.warning(
            f"Unknown generator {config.ssg_type!r}",
            "no default data or pages directory",
        )

    pipeline = PullPipeline(ssg_type=config.ssg_type, preview=config.preview)
    try:
        if dry_run:
            files = pipeline.build(source.fetch(preview=config.preview))
            ui.file_table("Files (dry run)", [f.path for f in files])
            count = len(files)
        else:
            count = pipeline.run(source, FileWriter(config.output_dir))
    except (SitePullError, APIError) as e:
        logger.error(f"{CLI} Failed to pull content: {e}")
        ui.error(f"Failed to pull content: {e}")
        raise typer.Exit(1)

    if dry_run:
        ui.success(f"{count} files would be written to {config.output_dir}")
    else:
        ui.success(f"Wrote {count} files to {config.output_dir}")
    return count


__all__ = ["setup_logging", "load_config_or_exit", "run_pull"]
