# mutant_dna/config/loader.py
"""
Layered configuration loading.

Merge strategy:
    1. Package defaults (mutant_dna/config/default.yaml) - always loaded
    2. User config ({workspace}/config.yaml) - overrides defaults

The merged dict is validated into an AppConfig, so every value is
guaranteed to exist and callers never need fallback logic.

Usage:
    from mutant_dna.config.loader import load_app_config

    config = load_app_config()
    config.storage.mode  # always exists
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from mutant_dna.config.schema import AppConfig
from mutant_dna.core.config import ConfigValidationError, load_yaml
from mutant_dna.core.paths import MutantPaths
from mutant_dna.logging.logger import get_logger
from mutant_dna.logging.tags import CONFIG

logger = get_logger(__name__)

DEFAULTS_PATH = Path(__file__).parent / "default.yaml"


# =============================================================================
# Deep Merge
# =============================================================================


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values from `override` take precedence over `base`.
    Nested dicts are merged recursively.
    Lists are replaced entirely (not merged).

    Examples:
        >>> deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 10}})
        {'a': 1, 'b': {'c': 10, 'd': 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


# =============================================================================
# Loading Functions
# =============================================================================


def load_defaults() -> dict[str, Any]:
    """Load the package defaults."""
    defaults = load_yaml(DEFAULTS_PATH)
    logger.debug(f"{CONFIG} Loaded defaults from {DEFAULTS_PATH}")
    return defaults


def load_user_config(path: Optional[Union[str, Path]] = None) -> dict[str, Any] | None:
    """
    Load the user override file.

    Args:
        path: Explicit file. None = MutantPaths.config().

    Returns:
        User configuration dictionary, or None if the default file does
        not exist. An explicit path that is missing is an error.
    """
    user_path = Path(path) if path is not None else MutantPaths.config()

    if path is None and not user_path.exists():
        logger.debug(f"{CONFIG} No user config at {user_path}")
        return None

    user_config = load_yaml(user_path)
    logger.debug(f"{CONFIG} Loaded user config from {user_path}")
    return user_config


def load_config_dict(path: Optional[Union[str, Path]] = None) -> dict[str, Any]:
    """Merged defaults + user overrides, unvalidated."""
    defaults = load_defaults()
    user_config = load_user_config(path)

    if user_config is None:
        return defaults

    return deep_merge(defaults, user_config)


def load_app_config(path: Optional[Union[str, Path]] = None) -> AppConfig:
    """
    Load the complete, validated configuration.

    Raises:
        ConfigNotFoundError: If an explicit path does not exist
        ConfigParseError: If a file is not valid YAML
        ConfigValidationError: If the merged config does not match AppConfig
    """
    merged = load_config_dict(path)

    try:
        config = AppConfig.model_validate(merged)
        config.storage.validate_mode()
    except (ValidationError, ValueError) as e:
        raise ConfigValidationError(f"Invalid configuration: {e}", path=Path(path) if path else None) from e

    return config


def get_config_source(path: Optional[Union[str, Path]] = None) -> str:
    """Human-readable description of where config is loaded from."""
    user_path = Path(path) if path is not None else MutantPaths.config()

    if user_path.exists():
        return f"{user_path} (overriding defaults)"
    return f"{DEFAULTS_PATH} (package defaults)"


__all__ = [
    "deep_merge",
    "load_defaults",
    "load_user_config",
    "load_config_dict",
    "load_app_config",
    "get_config_source",
]
