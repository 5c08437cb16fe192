"""
SQLite-backed snapshot store.

Keeps the raw bytes of every uploaded snapshot, keyed by an integer id and
unique per (address, timestamp). Diff reports are never stored.
"""

import logging
import sqlite3
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from ..errors import ConflictError

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS snapshots (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    address TEXT NOT NULL,
    timestamp TEXT NOT NULL,
    data BLOB NOT NULL,
    UNIQUE(address, timestamp)
);
CREATE INDEX IF NOT EXISTS idx_address_timestamp
ON snapshots(address, timestamp DESC);
"""

PRAGMAS = (
    "PRAGMA journal_mode=WAL",
    "PRAGMA synchronous=NORMAL",
    "PRAGMA busy_timeout=5000",
)

MEMORY_DB = ":memory:"


@dataclass(frozen=True)
class StoredSnapshot:
    """A snapshot row as stored."""
    id: str
    address: str
    timestamp: str
    data: bytes

    def to_dict(self) -> dict:
        """Convert to dictionary (without the raw data)."""
        return {
            "id": self.id,
            "address": self.address,
            "timestamp": self.timestamp
        }


class SnapshotStore:
    """
    Persists host snapshots in SQLite.

    One connection is shared between threads and guarded by a lock.
    """

    def __init__(self, db_path: Union[str, Path] = MEMORY_DB):
        self.db_path = str(db_path)
        if self.db_path != MEMORY_DB:
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

        self._lock = threading.Lock()
        self._conn = sqlite3.connect(self.db_path, check_same_thread=False)
        if self.db_path != MEMORY_DB:
            for pragma in PRAGMAS:
                self._conn.execute(pragma)
        self._conn.executescript(SCHEMA)
        self._conn.commit()

        logger.info(f"SnapshotStore initialized at {self.db_path}")

    def insert(self, address: str, timestamp: str, data: bytes) -> str:
        """
        Insert a snapshot.

        Returns:
            The new snapshot id

        Raises:
            ConflictError: if (address, timestamp) is already stored
        """
        with self._lock:
            try:
                with self._conn:
                    cursor = self._conn.execute(
                        "INSERT INTO snapshots (address, timestamp, data) VALUES (?, ?, ?)",
                        (address, timestamp, sqlite3.Binary(data))
                    )
            except sqlite3.IntegrityError as e:
                raise ConflictError(address, timestamp) from e

        snapshot_id = str(cursor.lastrowid)
        logger.info(f"Stored snapshot {snapshot_id} for {address} at {timestamp}")
        return snapshot_id

    def get_by_id(self, snapshot_id: str) -> Optional[StoredSnapshot]:
        """Fetch one snapshot, or None if no such id exists."""
        try:
            row_id = int(snapshot_id)
        except (TypeError, ValueError):
            return None

        with self._lock:
            row = self._conn.execute(
                "SELECT id, address, timestamp, data FROM snapshots WHERE id = ?",
                (row_id,)
            ).fetchone()

        return self._to_snapshot(row) if row else None

    def list_by_address(self, address: str) -> List[StoredSnapshot]:
        """All snapshots for an address, newest first."""
        with self._lock:
            rows = self._conn.execute(
                "SELECT id, address, timestamp, data FROM snapshots "
                "WHERE address = ? ORDER BY timestamp DESC, id DESC",
                (address,)
            ).fetchall()

        return [self._to_snapshot(row) for row in rows]

    def count(self) -> int:
        """Number of stored snapshots."""
        with self._lock:
            return self._conn.execute("SELECT COUNT(*) FROM snapshots").fetchone()[0]

    def close(self):
        """Close the database connection."""
        with self._lock:
            self._conn.close()
        logger.info(f"SnapshotStore at {self.db_path} closed")

    def __enter__(self) -> "SnapshotStore":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @staticmethod
    def _to_snapshot(row) -> StoredSnapshot:
        snapshot_id, address, timestamp, data = row
        if isinstance(data, str):
            data = data.encode('utf-8')
        return StoredSnapshot(
            id=str(snapshot_id),
            address=address,
            timestamp=timestamp,
            data=bytes(data)
        )
