# sitepull/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from sitepull.cli.ui import ui

    ui.header("sitepull", "Pull content from Sanity")
    ui.success("Done!")
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()


class UI:
    """Consistent styling for command output."""

    def header(self, title: str, subtitle: str = "") -> None:
        if subtitle:
            content = f"[bold]{title}[/bold]\n[dim]{subtitle}[/dim]"
        else:
            content = f"[bold]{title}[/bold]"
        console.print(Panel.fit(content, border_style="blue"))

    def success(self, msg: str) -> None:
        console.print(f"[green]✓[/green] {msg}")

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {msg}")

    def warning(self, msg: str, detail: str = "") -> None:
        detail_str = f" [dim]({detail})[/dim]" if detail else ""
        console.print(f"[yellow]⚠[/yellow] {msg}{detail_str}")

    def info(self, msg: str) -> None:
        console.print(f"[dim]{msg}[/dim]")

    def file_table(self, title: str, paths: Iterable[str]) -> None:
        table = Table(title=title, show_header=True)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Path")
        for index, path in enumerate(paths, start=1):
            table.add_row(str(index), path)
        console.print(table)


ui = UI()

__all__ = ["ui", "console", "UI"]
