# mutant_dna/storage/factory.py
"""Build a RecordStore from StorageConfig."""

from __future__ import annotations

from typing import Optional

from mutant_dna.logging.logger import get_logger
from mutant_dna.logging.tags import STORAGE
from mutant_dna.storage.base import RecordStore
from mutant_dna.storage.config import StorageConfig, StorageMode

logger = get_logger(__name__)


def create_record_store(config: Optional[StorageConfig] = None) -> RecordStore:
    """
    Create the record store selected by config.mode.

    Raises:
        ValueError: If the config is incomplete for its mode
    """
    config = config or StorageConfig()
    config.validate_mode()

    if config.mode == StorageMode.POSTGRES:
        from mutant_dna.storage.postgres import PostgresRecordStore

        logger.info(f"{STORAGE} Using PostgreSQL record store")
        return PostgresRecordStore(config)

    from mutant_dna.storage.sqlite import SqliteRecordStore

    store = SqliteRecordStore(config.path, busy_timeout=config.busy_timeout)
    logger.info(f"{STORAGE} Using SQLite record store at {store.db_path}")
    return store


__all__ = ["create_record_store"]
