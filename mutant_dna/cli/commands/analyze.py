# mutant_dna/cli/commands/analyze.py
"""
Analyze command.

Usage:
    mutant-dna analyze ATGCGA CAGTGC TTATGT AGAAGG CCCCTA TCACTG
    mutant-dna analyze --file sample.json

Exit codes:
    0  mutant
    1  human
    2  invalid DNA or config
    3  record store unavailable
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

from mutant_dna.cli.ui import ui
from mutant_dna.cli.utils import EXIT_INVALID, EXIT_STORE_ERROR, load_services_or_exit
from mutant_dna.core.dna import validate_dna
from mutant_dna.core.exceptions import StoreUnavailableError

EXIT_HUMAN = 1


def _read_rows(file: Path) -> list[str]:
    """Rows from a JSON file holding either a list or {"dna": [...]}."""
    try:
        data = json.loads(file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        ui.error(f"Cannot read {file}: {e}")
        raise typer.Exit(code=EXIT_INVALID)

    if isinstance(data, dict):
        data = data.get("dna")

    if not isinstance(data, list) or not all(isinstance(row, str) for row in data):
        ui.error(f"{file} must contain a list of strings or an object with a 'dna' list")
        raise typer.Exit(code=EXIT_INVALID)

    return data


def command(
    rows: Optional[List[str]] = None,
    file: Optional[Path] = None,
    config_path: Optional[Path] = None,
) -> None:
    if file is not None and rows:
        ui.error("Pass DNA rows or --file, not both")
        raise typer.Exit(code=EXIT_INVALID)

    dna = _read_rows(file) if file is not None else list(rows or [])

    validated = validate_dna(dna)
    if not validated.is_ok:
        ui.error(str(validated.error))
        raise typer.Exit(code=EXIT_INVALID)

    services = load_services_or_exit(config_path)
    try:
        mutant = services.mutant_service.analyze_dna(validated.value)
        dna_hash = services.mutant_service.get_dna_hash(validated.value)
    except StoreUnavailableError as e:
        ui.error(str(e))
        raise typer.Exit(code=EXIT_STORE_ERROR)
    finally:
        services.close()

    if mutant:
        ui.success(f"MUTANT [dim]({dna_hash[:12]})[/dim]")
        return

    ui.print(f"HUMAN [dim]({dna_hash[:12]})[/dim]", style="yellow")
    raise typer.Exit(code=EXIT_HUMAN)
