# sitepull/cli/cli.py
"""
sitepull CLI - Main application.

Commands:
    sitepull pull       Pull content from Sanity into the site repository
    sitepull convert    Same pipeline, reading a local dataset export

NOTE: Commands use lazy loading - the pipeline is imported only when a
command is invoked.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="sitepull",
    help="Pull structured content from Sanity into static-site files.",
    no_args_is_help=True,
    add_completion=False,
)


@app.command("pull")
def pull(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file."),
    project_id: Optional[str] = typer.Option(None, "--project-id", "-p", help="Sanity project id."),
    dataset: Optional[str] = typer.Option(None, "--dataset", "-d", help="Sanity dataset."),
    token: Optional[str] = typer.Option(None, "--token", help="Sanity API token."),
    ssg: Optional[str] = typer.Option(None, "--ssg", "-s", help="Target generator: jekyll, hugo or gatsby."),
    preview: Optional[bool] = typer.Option(None, "--preview/--no-preview", help="Overlay drafts."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output root directory."),
    dry_run: bool = typer.Option(False, "--dry-run", help="List files without writing them."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Pull content from Sanity and write site files."""
    from sitepull.cli.commands import pull as mod

    mod.command(
        config_path=config,
        project_id=project_id,
        dataset=dataset,
        token=token,
        ssg=ssg,
        preview=preview,
        output=output,
        dry_run=dry_run,
        verbose=verbose,
    )


@app.command("convert")
def convert(
    export: Path = typer.Argument(..., help="Dataset export (.ndjson or .json)."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file."),
    ssg: Optional[str] = typer.Option(None, "--ssg", "-s", help="Target generator: jekyll, hugo or gatsby."),
    preview: Optional[bool] = typer.Option(None, "--preview/--no-preview", help="Overlay drafts."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output root directory."),
    dry_run: bool = typer.Option(False, "--dry-run", help="List files without writing them."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Convert a local dataset export into site files."""
    from sitepull.cli.commands import convert as mod

    mod.command(
        export=export,
        config_path=config,
        ssg=ssg,
        preview=preview,
        output=output,
        dry_run=dry_run,
        verbose=verbose,
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
