# mutant_dna/__init__.py
"""
mutant-dna - detect mutants from DNA sequences.

A DNA sample is an NxN matrix of bases (A, T, C, G). It belongs to a
mutant when more than one sequence of four equal bases appears
horizontally, vertically or diagonally.

Public API:
    Core:
        - MutantDetector: pure classification of a DNA matrix
        - validate_dna: shape/alphabet validation returning a tagged result
        - compute_dna_hash: canonical identity of a DNA matrix

    Services:
        - MutantService: cache-or-compute analysis backed by a record store
        - StatsService: mutant/human counts and ratio

    Storage:
        - create_record_store: SQLite (default) or PostgreSQL record store

Architecture:
    mutant_dna/
    ├── core/       # Detector, validation, fingerprint, errors, paths
    ├── storage/    # Record stores (sqlite, postgres)
    ├── services/   # Analysis and statistics services
    ├── config/     # Layered YAML config + schema
    ├── api/        # FastAPI app
    └── cli/        # Typer CLI

Examples:
    >>> from mutant_dna import MutantDetector
    >>> MutantDetector().is_mutant(["AAAA", "AAAA", "TGCA", "CGTA"])
    True
"""

__version__ = "1.0.0"

from mutant_dna.core.detector import MutantDetector
from mutant_dna.core.dna import DNA_BASES, DnaAlphabet, validate_dna
from mutant_dna.core.exceptions import (
    DnaValidationError,
    DuplicateKeyError,
    EmptyDnaError,
    InvalidShapeError,
    InvalidSymbolError,
    MutantDnaError,
    StoreUnavailableError,
)
from mutant_dna.core.fingerprint import compute_dna_hash
from mutant_dna.services.mutant_service import MutantService
from mutant_dna.services.stats_service import Stats, StatsService
from mutant_dna.storage import DnaRecord, StorageConfig, create_record_store

__all__ = [
    "__version__",
    "DNA_BASES",
    "DnaAlphabet",
    "DnaRecord",
    "DnaValidationError",
    "DuplicateKeyError",
    "EmptyDnaError",
    "InvalidShapeError",
    "InvalidSymbolError",
    "MutantDetector",
    "MutantDnaError",
    "MutantService",
    "Stats",
    "StatsService",
    "StorageConfig",
    "StoreUnavailableError",
    "compute_dna_hash",
    "create_record_store",
    "validate_dna",
]
