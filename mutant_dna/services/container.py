# mutant_dna/services/container.py
"""Wire the record store and services from AppConfig."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from mutant_dna.config.schema import AppConfig
from mutant_dna.core.detector import MutantDetector
from mutant_dna.core.fingerprint import DnaFingerprinter
from mutant_dna.services.locks import FingerprintLocks
from mutant_dna.services.mutant_service import MutantService
from mutant_dna.services.stats_service import StatsService
from mutant_dna.storage.base import RecordStore
from mutant_dna.storage.factory import create_record_store


@dataclass
class Services:
    """Everything a request handler or CLI command needs, built once."""

    config: AppConfig
    store: RecordStore
    mutant_service: MutantService
    stats_service: StatsService

    def close(self) -> None:
        self.store.close()


def build_services(config: AppConfig, store: Optional[RecordStore] = None) -> Services:
    """
    Build the store and services.

    Args:
        config: Application config.
        store: Pre-built store (tests). None = create from config.storage.
    """
    store = store or create_record_store(config.storage)
    mutant_service = MutantService(
        store=store,
        detector=MutantDetector(),
        fingerprinter=DnaFingerprinter(sort_rows=config.fingerprint.sort_rows),
        locks=FingerprintLocks(config.service.lock_shards),
    )
    return Services(
        config=config,
        store=store,
        mutant_service=mutant_service,
        stats_service=StatsService(store),
    )


__all__ = ["Services", "build_services"]
