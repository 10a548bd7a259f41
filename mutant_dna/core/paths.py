# mutant_dna/core/paths.py
"""
Central path management for mutant-dna.

The workspace is the .mutant_dna directory in the current working
directory, or an override set for testing.

Usage:
    from mutant_dna.core.paths import MutantPaths

    config_path = MutantPaths.config()
    db_path = MutantPaths.database()

    # Override workspace for testing
    MutantPaths.set_workspace("/tmp/test_mutants")
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

WORKSPACE_DIRNAME = ".mutant_dna"
DATABASE_FILENAME = "dna_records.db"


class MutantPaths:
    """Path facade. All methods are classmethods for static access."""

    _workspace_override: Optional[Path] = None

    @classmethod
    def set_workspace(cls, path: Optional[str | Path]) -> None:
        """
        Override the workspace root.

        Pass None to reset to default (CWD).
        """
        cls._workspace_override = None if path is None else Path(path)

    @classmethod
    def reset(cls) -> None:
        """Reset to default workspace (CWD). Useful in tests."""
        cls._workspace_override = None

    @classmethod
    def workspace(cls) -> Path:
        """
        The workspace directory.

        Default: {CWD}/.mutant_dna/
        """
        if cls._workspace_override is not None:
            return cls._workspace_override
        return Path.cwd() / WORKSPACE_DIRNAME

    @classmethod
    def ensure_workspace(cls) -> Path:
        """Get workspace path and create it if it doesn't exist."""
        path = cls.workspace()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @classmethod
    def config(cls) -> Path:
        """User config file: {workspace}/config.yaml"""
        return cls.workspace() / "config.yaml"

    @classmethod
    def database(cls) -> Path:
        """Default SQLite database: {workspace}/dna_records.db"""
        return cls.workspace() / DATABASE_FILENAME


__all__ = ["MutantPaths"]
