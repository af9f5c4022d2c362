# sitepull/cli/commands/pull.py
"""
Pull command.

Usage:
    sitepull pull --project-id abc123 --ssg hugo --output ./site
    sitepull pull --config sitepull.yaml --preview
    SANITY_PROJECT_ID=abc123 SSG_TYPE=jekyll sitepull pull
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from sitepull.cli.commands.runner import load_config_or_exit, run_pull, setup_logging
from sitepull.cli.ui import ui
from sitepull.source.plugins.sanity import SanitySource


def command(
    config_path: Optional[Path] = None,
    project_id: Optional[str] = None,
    dataset: Optional[str] = None,
    token: Optional[str] = None,
    ssg: Optional[str] = None,
    preview: Optional[bool] = None,
    output: Optional[Path] = None,
    dry_run: bool = False,
    verbose: bool = False,
) -> None:
    setup_logging(verbose)

    config = load_config_or_exit(
        config_path,
        project_id=project_id,
        dataset=dataset,
        token=token,
        ssg_type=ssg,
        preview=preview,
        output_dir=output,
    )
    if not config.project_id:
        ui.error("No Sanity project id (use --project-id or SANITY_PROJECT_ID)")
        raise typer.Exit(1)

    ui.header("sitepull", f"Sanity {config.project_id}/{config.dataset} -> {config.ssg_type}")

    source = SanitySource(
        project_id=config.project_id,
        dataset=config.dataset,
        token=config.token,
        api_version=config.api_version,
        use_cdn=config.use_cdn,
    )
    run_pull(source, config, dry_run=dry_run)
