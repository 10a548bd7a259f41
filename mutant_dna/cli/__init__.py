# mutant_dna/cli/__init__.py
from mutant_dna.cli.cli import app

__all__ = ["app"]
