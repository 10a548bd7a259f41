# mutant_dna/storage/postgres.py
"""
PostgreSQL record store for shared deployments.

Handles:
- Connection pooling via psycopg_pool with health checks
- Schema creation on first use
- Mapping unique violations to DuplicateKeyError and every other
  driver failure to StoreUnavailableError
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Generator, Optional

from mutant_dna.core.exceptions import DuplicateKeyError, StoreUnavailableError
from mutant_dna.logging.logger import get_logger
from mutant_dna.logging.tags import STORAGE
from mutant_dna.storage.base import TABLE_NAME, DnaRecord
from mutant_dna.storage.config import StorageConfig

if TYPE_CHECKING:
    from psycopg import Connection
    from psycopg_pool import ConnectionPool

# Lazy imports for psycopg (done once at module level when first needed)
_psycopg = None
_psycopg_pool = None


def _get_psycopg():
    """Lazy import psycopg once."""
    global _psycopg
    if _psycopg is None:
        import psycopg

        _psycopg = psycopg
    return _psycopg


def _get_psycopg_pool():
    """Lazy import psycopg_pool once."""
    global _psycopg_pool
    if _psycopg_pool is None:
        from psycopg_pool import ConnectionPool

        _psycopg_pool = ConnectionPool
    return _psycopg_pool


logger = get_logger(__name__)

SCHEMA_SQL = f"""
    CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
        id BIGSERIAL PRIMARY KEY,
        dna_hash CHAR(64) NOT NULL UNIQUE,
        is_mutant BOOLEAN NOT NULL,
        created_at TIMESTAMPTZ NOT NULL
    )
"""

INDEX_SQL = f"CREATE INDEX IF NOT EXISTS idx_{TABLE_NAME}_is_mutant ON {TABLE_NAME} (is_mutant)"


class PostgresConnectionManager:
    """
    Owns the connection pool for one PostgreSQL database.

    The pool is opened lazily on first use and closed by stop().
    """

    def __init__(self, config: StorageConfig):
        if not config.connection_string:
            raise ValueError("connection_string required for postgres mode")
        self.config = config
        self._pool: Optional["ConnectionPool"] = None
        self._lock = threading.Lock()

    def get_pool(self) -> "ConnectionPool":
        """
        Get the connection pool, creating it on first call.

        check= verifies connections before handing them out, so stale
        connections are replaced without manual verification.
        """
        if self._pool is None:
            with self._lock:
                if self._pool is None:
                    ConnectionPool = _get_psycopg_pool()
                    self._pool = ConnectionPool(
                        self.config.connection_string,
                        min_size=self.config.pool_min_size,
                        max_size=self.config.pool_max_size,
                        open=True,
                        check=ConnectionPool.check_connection,
                        reconnect_timeout=30.0,
                        timeout=30.0,
                    )
                    logger.debug(f"{STORAGE} Created connection pool")
        return self._pool

    @contextmanager
    def connection(self) -> Generator["Connection", None, None]:
        """
        Get a pooled connection.

        The pool context commits on success and rolls back on error.
        """
        with self.get_pool().connection() as conn:
            yield conn

    def is_healthy(self) -> tuple[bool, str]:
        """
        Check if PostgreSQL connection is healthy.

        Returns:
            Tuple of (is_healthy, message)
        """
        try:
            with self.connection() as conn:
                result = conn.execute("SELECT version()").fetchone()
                version = result[0] if result else "unknown"
                return True, f"Connected to {version[:50]}..."
        except Exception as e:
            return False, f"Connection failed: {e}"

    def stop(self) -> None:
        """Close the pool."""
        with self._lock:
            if self._pool is not None:
                try:
                    self._pool.close()
                    logger.debug(f"{STORAGE} Closed connection pool")
                except Exception as e:
                    logger.warning(f"{STORAGE} Error closing pool: {e}")
                self._pool = None


class PostgresRecordStore:
    """
    Record storage in a PostgreSQL table.

    Schema:
    - `dna_records`: id, dna_hash (UNIQUE), is_mutant, created_at
    """

    def __init__(self, config: StorageConfig, manager: Optional[PostgresConnectionManager] = None):
        self._manager = manager or PostgresConnectionManager(config)
        self._schema_initialized = False
        self._schema_lock = threading.Lock()

    @contextmanager
    def _translate_errors(self, dna_hash: Optional[str] = None) -> Generator[None, None, None]:
        psycopg = _get_psycopg()
        try:
            yield
        except psycopg.errors.UniqueViolation as e:
            if dna_hash is None:
                raise StoreUnavailableError(f"PostgreSQL integrity error: {e}") from e
            raise DuplicateKeyError(dna_hash) from e
        except psycopg.Error as e:
            # Also covers psycopg_pool.PoolTimeout (an OperationalError)
            logger.error(f"{STORAGE} PostgreSQL failure: {e}")
            raise StoreUnavailableError(f"PostgreSQL store unavailable: {e}") from e

    def _ensure_schema(self) -> None:
        """Create records table if not exists."""
        if self._schema_initialized:
            return

        with self._schema_lock:
            if self._schema_initialized:
                return
            with self._translate_errors(), self._manager.connection() as conn:
                conn.execute(SCHEMA_SQL)
                conn.execute(INDEX_SQL)
            self._schema_initialized = True
            logger.debug(f"{STORAGE} Record schema initialized")

    def find_by_hash(self, dna_hash: str) -> DnaRecord | None:
        self._ensure_schema()
        with self._translate_errors(), self._manager.connection() as conn:
            row = conn.execute(
                f"SELECT id, dna_hash, is_mutant, created_at FROM {TABLE_NAME} WHERE dna_hash = %s",
                (dna_hash,),
            ).fetchone()

        if not row:
            return None

        record_id, hash_, is_mutant, created_at = row
        return DnaRecord(id=record_id, dna_hash=hash_, is_mutant=is_mutant, created_at=created_at)

    def insert(self, record: DnaRecord) -> DnaRecord:
        self._ensure_schema()
        with self._translate_errors(dna_hash=record.dna_hash), self._manager.connection() as conn:
            row = conn.execute(
                f"INSERT INTO {TABLE_NAME} (dna_hash, is_mutant, created_at) "
                "VALUES (%s, %s, %s) RETURNING id",
                (record.dna_hash, record.is_mutant, record.created_at),
            ).fetchone()

        logger.debug(f"{STORAGE} Inserted record {record.dna_hash[:12]} (mutant={record.is_mutant})")
        return DnaRecord(
            id=row[0],
            dna_hash=record.dna_hash,
            is_mutant=record.is_mutant,
            created_at=record.created_at,
        )

    def count_by_mutant(self, is_mutant: bool) -> int:
        self._ensure_schema()
        with self._translate_errors(), self._manager.connection() as conn:
            row = conn.execute(
                f"SELECT COUNT(*) FROM {TABLE_NAME} WHERE is_mutant = %s", (is_mutant,)
            ).fetchone()
        return int(row[0])

    def count(self) -> int:
        self._ensure_schema()
        with self._translate_errors(), self._manager.connection() as conn:
            row = conn.execute(f"SELECT COUNT(*) FROM {TABLE_NAME}").fetchone()
        return int(row[0])

    def is_healthy(self) -> tuple[bool, str]:
        return self._manager.is_healthy()

    def close(self) -> None:
        self._manager.stop()


__all__ = ["PostgresConnectionManager", "PostgresRecordStore"]
