# mutant_dna/core/dna.py
"""
DNA matrix primitives: the base alphabet and input validation.

A DNA sample is an NxN matrix given as N strings of length N. Each
character is one nitrogenous base from a fixed alphabet (A, T, C, G by
default).

Validation is a pure function returning a tagged result, so the API
layer can turn failures into 400 responses without try/except, while
the detector raises the same error objects directly.

Usage:
    from mutant_dna.core.dna import validate_dna

    result = validate_dna(["ATGC", "CAGT", "TTAT", "AGAA"])
    if result.is_ok:
        grid = result.value
    else:
        raise result.error
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Generic, Optional, Sequence, TypeVar

from mutant_dna.core.exceptions import (
    DnaValidationError,
    EmptyDnaError,
    InvalidShapeError,
    InvalidSymbolError,
)

# A DNA matrix: N rows, each a string of N bases
Dna = Sequence[str]

T = TypeVar("T")


# =============================================================================
# Alphabet
# =============================================================================


@dataclass(frozen=True)
class DnaAlphabet:
    """Immutable set of allowed bases."""

    symbols: FrozenSet[str]

    @classmethod
    def of(cls, symbols: str) -> "DnaAlphabet":
        return cls(symbols=frozenset(symbols))

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.symbols

    def describe(self) -> str:
        """Human-readable listing, e.g. 'A, C, G, T'."""
        return ", ".join(sorted(self.symbols))


DNA_BASES = DnaAlphabet.of("ATCG")


# =============================================================================
# Validation
# =============================================================================


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Either a validated value or the error that rejected it."""

    value: Optional[T] = None
    error: Optional[DnaValidationError] = None

    @classmethod
    def ok(cls, value: T) -> "ValidationResult[T]":
        return cls(value=value)

    @classmethod
    def err(cls, error: DnaValidationError) -> "ValidationResult[T]":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def find_dna_error(dna: Dna, alphabet: DnaAlphabet = DNA_BASES) -> Optional[DnaValidationError]:
    """
    Check a non-empty DNA matrix for shape and symbol problems.

    All rows are checked for length before any symbol is inspected, so a
    matrix that is both ragged and has bad symbols reports the shape error.

    Returns:
        The first error found, or None if the matrix is valid.
    """
    n = len(dna)

    for i, row in enumerate(dna):
        if row is None:
            return InvalidShapeError(f"Row {i} must not be null", row=i)
        if len(row) != n:
            return InvalidShapeError(
                f"DNA matrix must be square (NxN). Expected {n}x{n}, "
                f"but row {i} has length {len(row)}",
                row=i,
            )

    for i, row in enumerate(dna):
        for j, base in enumerate(row):
            if base not in alphabet:
                return InvalidSymbolError(
                    f"Invalid base at [{i}][{j}]: '{base}'. "
                    f"Only {alphabet.describe()} are allowed",
                    row=i,
                    column=j,
                    symbol=base,
                )

    return None


def validate_dna(
    dna: Optional[Dna], alphabet: DnaAlphabet = DNA_BASES
) -> ValidationResult[tuple[str, ...]]:
    """
    Validate a DNA request payload.

    Unlike the detector, an empty or missing matrix is rejected here.

    Returns:
        ValidationResult holding the rows as a tuple, or the error.
    """
    if not dna:
        return ValidationResult.err(EmptyDnaError("DNA sequence must not be null or empty"))

    error = find_dna_error(dna, alphabet)
    if error is not None:
        return ValidationResult.err(error)

    return ValidationResult.ok(tuple(dna))


__all__ = [
    "Dna",
    "DnaAlphabet",
    "DNA_BASES",
    "ValidationResult",
    "find_dna_error",
    "validate_dna",
]
