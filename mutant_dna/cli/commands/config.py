# mutant_dna/cli/commands/config.py
"""
Configuration command.

Usage:
    mutant-dna config            # Show merged config
    mutant-dna config --json     # Output as JSON
    mutant-dna config --path     # Show config file path
"""

from __future__ import annotations

import typer
import yaml

from mutant_dna.cli.ui import console, ui
from mutant_dna.cli.utils import load_config_or_exit
from mutant_dna.config.loader import get_config_source
from mutant_dna.core.paths import MutantPaths


def command(show_path: bool = False, as_json: bool = False) -> None:
    if show_path:
        typer.echo(str(MutantPaths.config()))
        return

    config = load_config_or_exit()

    if as_json:
        typer.echo(config.model_dump_json(indent=2))
        return

    ui.header("mutant-dna config", get_config_source())
    console.print(yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False))
