# mutant_dna/storage/base.py
"""RecordStore protocol and the DnaRecord value type."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Protocol, runtime_checkable

TABLE_NAME = "dna_records"


@dataclass(frozen=True)
class DnaRecord:
    """
    One stored classification.

    Created once, at the first analysis of a DNA hash, and never updated.
    The store assigns `id` on insert.
    """

    dna_hash: str
    is_mutant: bool
    created_at: datetime
    id: Optional[int] = None

    @classmethod
    def create(cls, dna_hash: str, is_mutant: bool) -> "DnaRecord":
        """New unsaved record stamped with the current UTC time."""
        return cls(dna_hash=dna_hash, is_mutant=is_mutant, created_at=datetime.now(timezone.utc))


@runtime_checkable
class RecordStore(Protocol):
    """
    Protocol for classification record backends.

    The store owns the record set and enforces one record per dna_hash
    as a durable constraint, independent of any in-process locking.
    """

    def find_by_hash(self, dna_hash: str) -> DnaRecord | None:
        """
        Look up a record by DNA hash.

        Raises:
            StoreUnavailableError: On backend failure
        """
        ...

    def insert(self, record: DnaRecord) -> DnaRecord:
        """
        Persist a new record.

        Returns:
            The record with its assigned id

        Raises:
            DuplicateKeyError: If a record with the same hash exists
            StoreUnavailableError: On backend failure
        """
        ...

    def count_by_mutant(self, is_mutant: bool) -> int:
        """Number of records with the given classification."""
        ...

    def count(self) -> int:
        """Total number of records."""
        ...

    def is_healthy(self) -> tuple[bool, str]:
        """Check connectivity. Returns (is_healthy, message)."""
        ...

    def close(self) -> None:
        """Release connections."""
        ...


__all__ = ["DnaRecord", "RecordStore", "TABLE_NAME"]
