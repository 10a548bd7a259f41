# mutant_dna/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from mutant_dna.cli.ui import ui, console

    ui.header("Stats")
    ui.success("Done!")
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()


class UI:
    """Rich output helpers with one style across commands."""

    def print(self, msg: str, style: str = "") -> None:
        """Print with optional Rich styling."""
        if style:
            console.print(f"[{style}]{msg}[/{style}]")
        else:
            console.print(msg)

    def header(self, title: str, subtitle: str = "") -> None:
        """Print a command header in a fitted box."""
        content = f"[bold]{title}[/bold]"
        if subtitle:
            content += f"\n[dim]{subtitle}[/dim]"
        console.print(Panel.fit(content, border_style="blue"))

    def success(self, msg: str) -> None:
        console.print(f"[green]✓[/green] {msg}")

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {msg}")

    def info(self, msg: str) -> None:
        console.print(f"[dim]{msg}[/dim]")

    def table(self, title: str, rows: list[tuple[str, str]]) -> None:
        """Two-column key/value table."""
        table = Table(title=title)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        for key, value in rows:
            table.add_row(key, value)
        console.print(table)


ui = UI()

__all__ = ["ui", "console", "UI"]
