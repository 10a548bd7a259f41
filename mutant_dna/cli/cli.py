# mutant_dna/cli/cli.py
"""
mutant-dna CLI - Main application.

Commands:
    mutant-dna analyze    Classify a DNA sample (exit 0 mutant, 1 human, 2 invalid)
    mutant-dna stats      Show verification statistics
    mutant-dna serve      Start the REST API server
    mutant-dna config     View configuration

NOTE: Commands use lazy loading - heavy imports only happen when a command is invoked.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

app = typer.Typer(
    name="mutant-dna",
    help="mutant-dna - detect mutants from DNA sequences.",
    no_args_is_help=True,
    add_completion=False,
)


# =============================================================================
# LAZY COMMANDS
# =============================================================================


@app.command("analyze")
def analyze(
    rows: Optional[List[str]] = typer.Argument(None, help="DNA rows, e.g. ATGC CAGT TTAT AGAA."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="JSON file with a list of rows or {\"dna\": [...]}."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file (overrides workspace config)."),
) -> None:
    """Classify a DNA sample and store the result."""
    from mutant_dna.cli.commands import analyze as mod

    mod.command(rows=rows, file=file, config_path=config)


@app.command("stats")
def stats(
    as_json: bool = typer.Option(False, "--json", help="Output as JSON."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file (overrides workspace config)."),
) -> None:
    """Show mutant/human counts and ratio."""
    from mutant_dna.cli.commands import stats as mod

    mod.command(as_json=as_json, config_path=config)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Host to bind to (default from config)."),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to bind to (default from config)."),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload."),
) -> None:
    """Start the REST API server."""
    from mutant_dna.cli.commands import serve as mod

    mod.command(host=host, port=port, reload=reload)


@app.command("config")
def config(
    show_path: bool = typer.Option(False, "--path", "-p", help="Show config file path."),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON."),
) -> None:
    """View the merged configuration."""
    from mutant_dna.cli.commands import config as mod

    mod.command(show_path=show_path, as_json=as_json)


@app.command("version")
def version() -> None:
    """Show version."""
    from mutant_dna import __version__

    typer.echo(f"mutant-dna version {__version__}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
