# mutant_dna/storage/__init__.py
"""
Persistent storage for DNA classification records.

Usage:
    from mutant_dna.storage import create_record_store, StorageConfig

    store = create_record_store(StorageConfig())
    record = store.find_by_hash(dna_hash)
"""

from mutant_dna.storage.base import DnaRecord, RecordStore
from mutant_dna.storage.config import StorageConfig, StorageMode
from mutant_dna.storage.factory import create_record_store

__all__ = [
    "DnaRecord",
    "RecordStore",
    "StorageConfig",
    "StorageMode",
    "create_record_store",
]
