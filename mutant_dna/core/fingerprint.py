# mutant_dna/core/fingerprint.py
"""
Canonical identity for a DNA matrix.

The identity is the SHA-256 digest (64 lowercase hex chars) of the rows
joined into one string. By default the rows are sorted first, so two
matrices that contain the same rows in a different order share one
identity and therefore one stored classification. This is a dedup rule,
not a property of the detector: reordering rows can change the columns
and diagonals and with them the classification. Set sort_rows=False to
make the identity order-sensitive.
"""

from __future__ import annotations

import hashlib

from mutant_dna.core.dna import Dna

HASH_LENGTH = 64


def compute_dna_hash(dna: Dna, sort_rows: bool = True) -> str:
    """
    Compute the identity hash of a DNA matrix.

    Args:
        dna: Validated DNA rows.
        sort_rows: Sort rows lexicographically before hashing.

    Returns:
        64-character lowercase hex SHA-256 digest.
    """
    rows = sorted(dna) if sort_rows else list(dna)
    return hashlib.sha256("".join(rows).encode("utf-8")).hexdigest()


class DnaFingerprinter:
    """Configured fingerprint function, injected into MutantService."""

    def __init__(self, sort_rows: bool = True):
        self.sort_rows = sort_rows

    def __call__(self, dna: Dna) -> str:
        return compute_dna_hash(dna, sort_rows=self.sort_rows)


__all__ = ["compute_dna_hash", "DnaFingerprinter", "HASH_LENGTH"]
