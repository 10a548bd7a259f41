# mutant_dna/core/exceptions.py
"""
Exception hierarchy for mutant-dna.

Validation errors subclass ValueError so that callers which only know
about builtin exceptions (the API error decorator, for one) still treat
them as bad input. Store errors are a separate branch: they are server
side and may be retried by the caller.
"""

from __future__ import annotations

from typing import Optional


class MutantDnaError(Exception):
    """Base error for mutant-dna."""


# =============================================================================
# Validation
# =============================================================================


class DnaValidationError(MutantDnaError, ValueError):
    """Base for malformed DNA input. Never retried."""


class InvalidShapeError(DnaValidationError):
    """The DNA matrix is not square (NxN)."""

    def __init__(self, message: str, row: Optional[int] = None):
        self.row = row
        super().__init__(message)


class InvalidSymbolError(DnaValidationError):
    """A base outside the allowed alphabet was found."""

    def __init__(self, message: str, row: int, column: int, symbol: str):
        self.row = row
        self.column = column
        self.symbol = symbol
        super().__init__(message)


class EmptyDnaError(DnaValidationError):
    """
    The DNA sequence list is null or empty.

    Only raised by request validation. The detector itself classifies an
    empty sequence as human instead.
    """


# =============================================================================
# Storage
# =============================================================================


class StoreError(MutantDnaError):
    """Base for record store failures."""


class DuplicateKeyError(StoreError):
    """A record with the same DNA hash already exists."""

    def __init__(self, dna_hash: str):
        self.dna_hash = dna_hash
        super().__init__(f"Record already exists for hash {dna_hash}")


class StoreUnavailableError(StoreError):
    """The persistence backend failed. The caller may retry the request."""


__all__ = [
    "MutantDnaError",
    "DnaValidationError",
    "InvalidShapeError",
    "InvalidSymbolError",
    "EmptyDnaError",
    "StoreError",
    "DuplicateKeyError",
    "StoreUnavailableError",
]
