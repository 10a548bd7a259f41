# mutant_dna/storage/sqlite.py
"""SQLite-based record store for local mode."""

from __future__ import annotations

import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Generator, Optional

from mutant_dna.core.exceptions import DuplicateKeyError, StoreUnavailableError
from mutant_dna.core.paths import MutantPaths
from mutant_dna.logging.logger import get_logger
from mutant_dna.logging.tags import STORAGE
from mutant_dna.storage.base import TABLE_NAME, DnaRecord

logger = get_logger(__name__)

SCHEMA_SQL = f"""
    CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        dna_hash CHAR(64) NOT NULL UNIQUE,
        is_mutant INTEGER NOT NULL,
        created_at TEXT NOT NULL
    )
"""

INDEX_SQL = f"CREATE INDEX IF NOT EXISTS idx_{TABLE_NAME}_is_mutant ON {TABLE_NAME} (is_mutant)"


class SqliteRecordStore:
    """
    Local record storage using SQLite.

    Each thread gets its own connection to the same database file, so
    the store can be shared by a threaded server. The UNIQUE constraint
    on dna_hash is what guarantees one record per DNA hash.
    """

    def __init__(self, path: Optional[str | Path] = None, busy_timeout: float = 30.0):
        self._path = Path(path) if path is not None else None
        self.busy_timeout = busy_timeout
        self._local = threading.local()
        self._connections: list[sqlite3.Connection] = []
        self._lock = threading.Lock()
        self._schema_ready = False

    @property
    def db_path(self) -> Path:
        """Path to the SQLite database file."""
        return self._path if self._path is not None else MutantPaths.database()

    @property
    def conn(self) -> sqlite3.Connection:
        """Get or create this thread's database connection."""
        conn = getattr(self._local, "conn", None)
        if conn is None:
            with self._translate_errors():
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
                conn = sqlite3.connect(
                    str(self.db_path), timeout=self.busy_timeout, check_same_thread=False
                )
            with self._lock:
                if not self._schema_ready:
                    try:
                        self._ensure_schema(conn)
                    except StoreUnavailableError:
                        # Not cached, so the next call retries the schema
                        conn.close()
                        raise
                    self._schema_ready = True
                self._connections.append(conn)
            self._local.conn = conn
        return conn

    def _ensure_schema(self, conn: sqlite3.Connection) -> None:
        """Create records table if not exists."""
        with self._translate_errors():
            conn.execute(SCHEMA_SQL)
            conn.execute(INDEX_SQL)
            conn.commit()
        logger.debug(f"{STORAGE} SQLite schema ready at {self.db_path}")

    @contextmanager
    def _translate_errors(self, dna_hash: Optional[str] = None) -> Generator[None, None, None]:
        try:
            yield
        except sqlite3.IntegrityError as e:
            if dna_hash is None:
                raise StoreUnavailableError(f"SQLite integrity error: {e}") from e
            raise DuplicateKeyError(dna_hash) from e
        except (sqlite3.Error, OSError) as e:
            logger.error(f"{STORAGE} SQLite failure on {self.db_path}: {e}")
            raise StoreUnavailableError(f"SQLite store unavailable: {e}") from e

    def find_by_hash(self, dna_hash: str) -> DnaRecord | None:
        """
        Retrieve record by DNA hash.

        Returns:
            DnaRecord if found, None otherwise
        """
        with self._translate_errors():
            row = self.conn.execute(
                f"SELECT id, dna_hash, is_mutant, created_at FROM {TABLE_NAME} WHERE dna_hash = ?",
                (dna_hash,),
            ).fetchone()

        if not row:
            return None

        record_id, hash_, is_mutant, created_at = row
        return DnaRecord(
            id=record_id,
            dna_hash=hash_,
            is_mutant=bool(is_mutant),
            created_at=datetime.fromisoformat(created_at),
        )

    def insert(self, record: DnaRecord) -> DnaRecord:
        """
        Insert a new record.

        Raises:
            DuplicateKeyError: If the hash is already stored
        """
        conn = self.conn
        with self._translate_errors(dna_hash=record.dna_hash):
            try:
                cursor = conn.execute(
                    f"INSERT INTO {TABLE_NAME} (dna_hash, is_mutant, created_at) VALUES (?, ?, ?)",
                    (record.dna_hash, int(record.is_mutant), record.created_at.isoformat()),
                )
                conn.commit()
            except sqlite3.Error:
                conn.rollback()
                raise

        logger.debug(f"{STORAGE} Inserted record {record.dna_hash[:12]} (mutant={record.is_mutant})")
        return DnaRecord(
            id=cursor.lastrowid,
            dna_hash=record.dna_hash,
            is_mutant=record.is_mutant,
            created_at=record.created_at,
        )

    def count_by_mutant(self, is_mutant: bool) -> int:
        with self._translate_errors():
            row = self.conn.execute(
                f"SELECT COUNT(*) FROM {TABLE_NAME} WHERE is_mutant = ?",
                (int(is_mutant),),
            ).fetchone()
        return int(row[0])

    def count(self) -> int:
        with self._translate_errors():
            row = self.conn.execute(f"SELECT COUNT(*) FROM {TABLE_NAME}").fetchone()
        return int(row[0])

    def is_healthy(self) -> tuple[bool, str]:
        try:
            self.conn.execute("SELECT 1").fetchone()
        except StoreUnavailableError as e:
            return False, str(e)
        except sqlite3.Error as e:
            return False, f"SQLite check failed: {e}"
        return True, f"SQLite at {self.db_path}"

    def close(self) -> None:
        """Close every connection opened by this store."""
        with self._lock:
            for conn in self._connections:
                try:
                    conn.close()
                except sqlite3.Error as e:
                    logger.warning(f"{STORAGE} Error closing SQLite connection: {e}")
            self._connections.clear()
        self._local = threading.local()


__all__ = ["SqliteRecordStore"]
