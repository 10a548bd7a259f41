# mutant_dna/config/__init__.py
"""
Configuration management for mutant-dna.

Usage:
    from mutant_dna.config import load_app_config

    config = load_app_config()
    config.fingerprint.sort_rows  # always exists
"""

from mutant_dna.config.loader import deep_merge, load_app_config, load_config_dict
from mutant_dna.config.schema import AppConfig

__all__ = ["AppConfig", "deep_merge", "load_app_config", "load_config_dict"]
