# tests/unit/test_mutant_service.py
"""
Tests for MutantService.

Covers the cache-or-compute flow, concurrent analysis of one sample and
recovery when another writer inserts the same hash first.
"""

from __future__ import annotations

import threading
from unittest.mock import MagicMock, patch

import pytest

from mutant_dna.core.exceptions import (
    DuplicateKeyError,
    InvalidShapeError,
    InvalidSymbolError,
    StoreUnavailableError,
)
from mutant_dna.core.fingerprint import DnaFingerprinter, compute_dna_hash
from mutant_dna.services.locks import FingerprintLocks
from mutant_dna.services.mutant_service import MutantService
from mutant_dna.storage.base import DnaRecord

# Column 0 and main diagonal are AAAA (mutant); swapping the first two
# rows leaves only the column (human). Both share a sorted-row hash.
ORDERED = ["ACGT", "AAGC", "AGAT", "ACTA"]
SWAPPED = ["AAGC", "ACGT", "AGAT", "ACTA"]


# =============================================================================
# Cache-or-compute
# =============================================================================


class TestAnalyzeDna:
    def test_mutant(self, service, mutant_dna):
        assert service.analyze_dna(mutant_dna) is True

    def test_human(self, service, human_dna):
        assert service.analyze_dna(human_dna) is False

    def test_first_analysis_stores_record(self, service, sqlite_store, mutant_dna):
        service.analyze_dna(mutant_dna)

        record = sqlite_store.find_by_hash(compute_dna_hash(mutant_dna))
        assert record is not None
        assert record.is_mutant is True

    def test_repeat_analysis_uses_stored_result(self, service, sqlite_store, mutant_dna):
        with patch.object(
            service.detector, "is_mutant", wraps=service.detector.is_mutant
        ) as spy:
            first = service.analyze_dna(mutant_dna)
            second = service.analyze_dna(mutant_dna)

        assert first is second is True
        assert spy.call_count == 1
        assert sqlite_store.count() == 1

    def test_stats_count_each_sample_once(self, service, sqlite_store, mutant_dna, human_dna):
        for _ in range(3):
            service.analyze_dna(mutant_dna)
            service.analyze_dna(human_dna)

        assert sqlite_store.count_by_mutant(True) == 1
        assert sqlite_store.count_by_mutant(False) == 1

    def test_reordered_rows_share_cached_result(self, service, sqlite_store):
        assert service.analyze_dna(ORDERED) is True
        # Same sorted-row identity, so the stored mutant result wins
        assert service.analyze_dna(SWAPPED) is True
        assert sqlite_store.count() == 1

    def test_order_sensitive_fingerprint(self, sqlite_store):
        service = MutantService(sqlite_store, fingerprinter=DnaFingerprinter(sort_rows=False))

        assert service.analyze_dna(ORDERED) is True
        assert service.analyze_dna(SWAPPED) is False
        assert sqlite_store.count() == 2

    @pytest.mark.parametrize("dna", [None, []])
    def test_empty_is_human_and_not_stored(self, service, sqlite_store, dna):
        assert service.analyze_dna(dna) is False
        assert sqlite_store.count() == 0

    def test_invalid_symbols_not_stored(self, service, sqlite_store):
        with pytest.raises(InvalidSymbolError):
            service.analyze_dna(["atgc", "cagt", "ttat", "agaa"])

        assert sqlite_store.count() == 0

    def test_non_square_not_stored(self, service, sqlite_store):
        with pytest.raises(InvalidShapeError):
            service.analyze_dna(["ATGC", "CAGT"])

        assert sqlite_store.count() == 0

    def test_get_dna_hash_uses_fingerprinter(self, service, mutant_dna):
        assert service.get_dna_hash(mutant_dna) == compute_dna_hash(mutant_dna)


# =============================================================================
# Store failures and duplicate recovery
# =============================================================================


class TestStoreInteraction:
    def test_duplicate_insert_returns_winner(self, mutant_dna):
        dna_hash = compute_dna_hash(mutant_dna)
        winner = DnaRecord.create(dna_hash, True)

        store = MagicMock()
        store.find_by_hash.side_effect = [None, winner]
        store.insert.side_effect = DuplicateKeyError(dna_hash)

        assert MutantService(store).analyze_dna(mutant_dna) is True
        assert store.find_by_hash.call_count == 2

    def test_winner_result_overrides_local_detection(self, human_dna):
        dna_hash = compute_dna_hash(human_dna)

        store = MagicMock()
        store.find_by_hash.side_effect = [None, DnaRecord.create(dna_hash, True)]
        store.insert.side_effect = DuplicateKeyError(dna_hash)

        assert MutantService(store).analyze_dna(human_dna) is True

    def test_duplicate_without_readable_winner(self, mutant_dna):
        store = MagicMock()
        store.find_by_hash.return_value = None
        store.insert.side_effect = DuplicateKeyError(compute_dna_hash(mutant_dna))

        with pytest.raises(StoreUnavailableError):
            MutantService(store).analyze_dna(mutant_dna)

    def test_find_failure_propagates(self, mutant_dna):
        store = MagicMock()
        store.find_by_hash.side_effect = StoreUnavailableError("down")

        with pytest.raises(StoreUnavailableError):
            MutantService(store).analyze_dna(mutant_dna)

        store.insert.assert_not_called()

    def test_insert_failure_propagates(self, mutant_dna):
        store = MagicMock()
        store.find_by_hash.return_value = None
        store.insert.side_effect = StoreUnavailableError("disk full")

        with pytest.raises(StoreUnavailableError):
            MutantService(store).analyze_dna(mutant_dna)

    @pytest.mark.parametrize("dna", [None, []])
    def test_empty_input_skips_store(self, dna):
        store = MagicMock()

        assert MutantService(store).analyze_dna(dna) is False
        store.find_by_hash.assert_not_called()
        store.insert.assert_not_called()

    def test_lock_released_after_failure(self, mutant_dna):
        store = MagicMock()
        store.find_by_hash.side_effect = [StoreUnavailableError("down"), None]
        service = MutantService(store, locks=FingerprintLocks(1))

        with pytest.raises(StoreUnavailableError):
            service.analyze_dna(mutant_dna)

        assert service.analyze_dna(mutant_dna) is True


# =============================================================================
# Concurrency
# =============================================================================


def _run_concurrently(target, count: int) -> list:
    barrier = threading.Barrier(count)
    results = [None] * count
    errors = []

    def worker(index):
        barrier.wait()
        try:
            results[index] = target()
        except Exception as e:  # collected and asserted below
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    assert errors == []
    return results


class TestConcurrency:
    def test_same_sample_detected_once(self, service, sqlite_store, mutant_dna):
        with patch.object(
            service.detector, "is_mutant", wraps=service.detector.is_mutant
        ) as spy:
            results = _run_concurrently(lambda: service.analyze_dna(mutant_dna), 16)

        assert results == [True] * 16
        assert spy.call_count == 1
        assert sqlite_store.count() == 1

    def test_independent_services_share_one_record(self, sqlite_store, human_dna):
        # Separate lock tables, like two processes on one database
        services = [MutantService(sqlite_store) for _ in range(8)]
        counter = iter(range(8))
        lock = threading.Lock()

        def analyze():
            with lock:
                index = next(counter)
            return services[index].analyze_dna(human_dna)

        results = _run_concurrently(analyze, 8)

        assert results == [False] * 8
        assert sqlite_store.count() == 1

    def test_different_samples_all_stored(self, service, sqlite_store):
        samples = [
            ["AAAA", "TTTT", "CCCC", "GGGG"],
            ["ATCG", "TGCA", "CGTA", "GATC"],
            ["AAAA", "TGCA", "CGTC", "CGTA"],
            ["AAAA", "AAAA", "TGCA", "CGTA"],
        ]
        counter = iter(range(len(samples)))
        lock = threading.Lock()

        def analyze():
            with lock:
                index = next(counter)
            return service.analyze_dna(samples[index])

        _run_concurrently(analyze, len(samples))

        assert sqlite_store.count() == 4
        assert sqlite_store.count_by_mutant(True) == 2
