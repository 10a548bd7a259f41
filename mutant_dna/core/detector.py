# mutant_dna/core/detector.py
"""
Mutant detection over a square DNA matrix.

A DNA sample belongs to a mutant when it contains more than one sequence
of four identical bases, read horizontally, vertically or along either
diagonal. Overlapping sequences are counted separately: "AAAAA" in a row
holds two.

The scan is a single pass over the N*N cells. From each cell only the
directions whose four-cell span fits inside the matrix are checked, and
is_mutant() stops at the second sequence found. count_sequences() runs
the same scan to completion and is used for diagnostics and tests.

Invariant: is_mutant(dna) == (count_sequences(dna) >= MUTANT_THRESHOLD)
for every valid matrix.
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from mutant_dna.core.dna import DNA_BASES, Dna, DnaAlphabet, find_dna_error
from mutant_dna.logging.logger import get_logger
from mutant_dna.logging.tags import DETECTOR

logger = get_logger(__name__)

SEQUENCE_LENGTH = 4
MUTANT_THRESHOLD = 2

# (row step, column step)
RIGHT = (0, 1)
DOWN = (1, 0)
DOWN_RIGHT = (1, 1)
DOWN_LEFT = (1, -1)

SequenceHit = Tuple[int, int, Tuple[int, int]]


class MutantDetector:
    """
    Stateless mutant detector.

    Safe to share between threads.
    """

    def __init__(self, alphabet: DnaAlphabet = DNA_BASES):
        self.alphabet = alphabet

    def is_mutant(self, dna: Optional[Dna]) -> bool:
        """
        Classify a DNA matrix.

        Args:
            dna: N strings of length N.

        Returns:
            True if more than one sequence is found. A null or empty
            matrix is human (False), not an error.

        Raises:
            InvalidShapeError: If the matrix is not square.
            InvalidSymbolError: If a base is outside the alphabet.
        """
        if not dna:
            return False

        self._check(dna)

        found = 0
        for _ in self._iter_sequences(dna):
            found += 1
            if found >= MUTANT_THRESHOLD:
                return True
        return False

    def count_sequences(self, dna: Optional[Dna]) -> int:
        """Count every sequence in the matrix, without early exit."""
        if not dna:
            return 0

        self._check(dna)

        count = sum(1 for _ in self._iter_sequences(dna))
        logger.debug(f"{DETECTOR} Counted {count} sequences in {len(dna)}x{len(dna)} matrix")
        return count

    def _check(self, dna: Dna) -> None:
        error = find_dna_error(dna, self.alphabet)
        if error is not None:
            raise error

    @staticmethod
    def _iter_sequences(dna: Dna) -> Iterator[SequenceHit]:
        """Yield (row, column, direction) for every sequence start, row-major."""
        n = len(dna)
        last_start = n - SEQUENCE_LENGTH

        for i in range(n):
            row = dna[i]
            fits_down = i <= last_start

            for j in range(n):
                base = row[j]

                if j <= last_start and row[j + 1] == base and row[j + 2] == base and row[j + 3] == base:
                    yield i, j, RIGHT

                if not fits_down:
                    continue

                if dna[i + 1][j] == base and dna[i + 2][j] == base and dna[i + 3][j] == base:
                    yield i, j, DOWN

                if (
                    j <= last_start
                    and dna[i + 1][j + 1] == base
                    and dna[i + 2][j + 2] == base
                    and dna[i + 3][j + 3] == base
                ):
                    yield i, j, DOWN_RIGHT

                if (
                    j >= SEQUENCE_LENGTH - 1
                    and dna[i + 1][j - 1] == base
                    and dna[i + 2][j - 2] == base
                    and dna[i + 3][j - 3] == base
                ):
                    yield i, j, DOWN_LEFT


__all__ = [
    "MutantDetector",
    "SEQUENCE_LENGTH",
    "MUTANT_THRESHOLD",
]
