# mutant_dna/logging/__init__.py
from mutant_dna.logging.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
