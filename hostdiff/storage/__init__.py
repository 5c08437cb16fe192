"""Snapshot persistence."""

from .snapshot_store import SnapshotStore, StoredSnapshot

__all__ = ["SnapshotStore", "StoredSnapshot"]
