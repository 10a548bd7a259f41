# mutant_dna/cli/utils.py
"""Helpers shared by CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from mutant_dna.cli.ui import ui
from mutant_dna.config.loader import load_app_config
from mutant_dna.config.schema import AppConfig
from mutant_dna.core.config import ConfigError
from mutant_dna.logging.logger import configure_logging, get_logger
from mutant_dna.logging.tags import CLI
from mutant_dna.services.container import Services, build_services

logger = get_logger(__name__)

EXIT_INVALID = 2
EXIT_STORE_ERROR = 3


def load_config_or_exit(config_path: Optional[Path] = None) -> AppConfig:
    """Load config, printing the error and exiting on failure."""
    try:
        config = load_app_config(config_path)
    except ConfigError as e:
        ui.error(str(e))
        raise typer.Exit(code=EXIT_INVALID)

    configure_logging(config.logging.level)
    logger.debug(f"{CLI} Config loaded (storage={config.storage.mode.value})")
    return config


def load_services_or_exit(config_path: Optional[Path] = None) -> Services:
    """Build services from config, exiting on config failure."""
    config = load_config_or_exit(config_path)
    try:
        return build_services(config)
    except ValueError as e:
        ui.error(f"Invalid storage configuration: {e}")
        raise typer.Exit(code=EXIT_INVALID)
