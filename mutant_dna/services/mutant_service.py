# mutant_dna/services/mutant_service.py
"""
DNA analysis with a persistent result cache.

Flow for analyze_dna():
    1. Hash the DNA matrix (row-order-invariant by default)
    2. Look the hash up in the record store; a hit returns the stored
       classification without running the detector
    3. On a miss, run the detector, store a new record, return the result

Steps 2-3 run while holding the fingerprint's shard lock, so within one
process the same DNA is detected and inserted at most once. Across
processes the store's unique constraint decides: a DuplicateKeyError on
insert means another writer won, and the stored record is returned.
"""

from __future__ import annotations

from typing import Callable, Optional

from mutant_dna.core.detector import MutantDetector
from mutant_dna.core.dna import Dna, find_dna_error
from mutant_dna.core.exceptions import DuplicateKeyError, StoreUnavailableError
from mutant_dna.core.fingerprint import DnaFingerprinter
from mutant_dna.logging.logger import get_logger
from mutant_dna.logging.tags import SERVICE
from mutant_dna.services.locks import FingerprintLocks
from mutant_dna.storage.base import DnaRecord, RecordStore

logger = get_logger(__name__)


class MutantService:
    """Cache-or-compute classification service."""

    def __init__(
        self,
        store: RecordStore,
        detector: Optional[MutantDetector] = None,
        fingerprinter: Optional[Callable[[Dna], str]] = None,
        locks: Optional[FingerprintLocks] = None,
    ):
        self.store = store
        self.detector = detector or MutantDetector()
        self.fingerprinter = fingerprinter or DnaFingerprinter()
        self.locks = locks or FingerprintLocks()

    def analyze_dna(self, dna: Optional[Dna]) -> bool:
        """
        Classify a DNA matrix, reusing a stored result when one exists.

        Args:
            dna: N strings of length N over the detector's alphabet.

        Returns:
            True for mutant, False for human.

        Raises:
            InvalidShapeError: If the matrix is not square.
            InvalidSymbolError: If a base is outside the alphabet.
            StoreUnavailableError: If the record store fails.
        """
        # Empty input is human and is not recorded
        if not dna:
            return self.detector.is_mutant(dna)

        dna = tuple(dna)
        error = find_dna_error(dna, self.detector.alphabet)
        if error is not None:
            raise error

        dna_hash = self.get_dna_hash(dna)

        with self.locks.hold(dna_hash):
            existing = self.store.find_by_hash(dna_hash)
            if existing is not None:
                logger.debug(f"{SERVICE} Cache hit {dna_hash[:12]} (mutant={existing.is_mutant})")
                return existing.is_mutant

            is_mutant = self.detector.is_mutant(dna)
            logger.debug(f"{SERVICE} Cache miss {dna_hash[:12]}, detected mutant={is_mutant}")

            try:
                self.store.insert(DnaRecord.create(dna_hash, is_mutant))
            except DuplicateKeyError:
                return self._recover_duplicate(dna_hash)

        return is_mutant

    def _recover_duplicate(self, dna_hash: str) -> bool:
        """Another writer stored this hash first; its record is authoritative."""
        winner = self.store.find_by_hash(dna_hash)
        if winner is None:
            raise StoreUnavailableError(
                f"Record {dna_hash} reported as duplicate but could not be read back"
            )
        logger.info(f"{SERVICE} Concurrent insert for {dna_hash[:12]}, using stored result")
        return winner.is_mutant

    def get_dna_hash(self, dna: Dna) -> str:
        """Identity hash under which the classification of `dna` is stored."""
        return self.fingerprinter(dna)


__all__ = ["MutantService"]
