# sitepull/cli/commands/convert.py
"""
Convert command.

Usage:
    sitepull convert ./export/data.ndjson --ssg hugo --output ./site
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from sitepull.cli.commands.runner import load_config_or_exit, run_pull, setup_logging
from sitepull.cli.ui import ui
from sitepull.source.plugins.export_file import ExportFileSource


def command(
    export: Path,
    config_path: Optional[Path] = None,
    ssg: Optional[str] = None,
    preview: Optional[bool] = None,
    output: Optional[Path] = None,
    dry_run: bool = False,
    verbose: bool = False,
) -> None:
    setup_logging(verbose)

    config = load_config_or_exit(
        config_path,
        ssg_type=ssg,
        preview=preview,
        output_dir=output,
    )

    ui.header("sitepull", f"{export.name} -> {config.ssg_type}")
    run_pull(ExportFileSource(export), config, dry_run=dry_run)
