# mutant_dna/cli/commands/stats.py
"""
Stats command.

Usage:
    mutant-dna stats           # Table
    mutant-dna stats --json    # Same fields as GET /stats plus total
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from mutant_dna.cli.ui import ui
from mutant_dna.cli.utils import EXIT_STORE_ERROR, load_services_or_exit
from mutant_dna.core.exceptions import StoreUnavailableError


def command(as_json: bool = False, config_path: Optional[Path] = None) -> None:
    services = load_services_or_exit(config_path)
    try:
        stats = services.stats_service.get_stats()
        total = services.stats_service.get_total_analysis_count()
    except StoreUnavailableError as e:
        ui.error(str(e))
        raise typer.Exit(code=EXIT_STORE_ERROR)
    finally:
        services.close()

    if as_json:
        typer.echo(
            json.dumps(
                {
                    "count_mutant_dna": stats.count_mutant_dna,
                    "count_human_dna": stats.count_human_dna,
                    "ratio": stats.ratio,
                    "total": total,
                }
            )
        )
        return

    ui.table(
        "DNA verifications",
        [
            ("Mutants", f"{stats.count_mutant_dna:,}"),
            ("Humans", f"{stats.count_human_dna:,}"),
            ("Ratio", f"{stats.ratio:.4f}"),
            ("Total", f"{total:,}"),
        ],
    )
