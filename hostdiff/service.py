"""
Host history service.

Implements the three operations exposed to end users:
1. Upload a snapshot (validated filename + decodable content)
2. List a host's snapshot history
3. Compare two stored snapshots of the same host
"""

import logging
from dataclasses import dataclass
from typing import List

from .diff import diff_snapshots
from .errors import AddressMismatchError, DecodeError, NotFoundError
from .models import DiffReport
from .parsers import decode_snapshot
from .storage import SnapshotStore, StoredSnapshot
from .validation import parse_filename

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnapshotInfo:
    """Identity of a stored snapshot."""
    id: str
    address: str
    timestamp: str

    @classmethod
    def from_stored(cls, stored: StoredSnapshot) -> "SnapshotInfo":
        return cls(id=stored.id, address=stored.address, timestamp=stored.timestamp)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"id": self.id, "address": self.address, "timestamp": self.timestamp}


class HostDiffService:
    """
    Upload, history and comparison operations over a snapshot store.

    Errors from the validator, decoder and store propagate unchanged.
    """

    def __init__(self, store: SnapshotStore):
        self.store = store

    def upload_snapshot(self, filename: str, content: bytes) -> SnapshotInfo:
        """
        Validate and store an uploaded snapshot.

        Raises:
            ValidationError: malformed filename
            DecodeError: content is not a decodable snapshot
            ConflictError: same address and timestamp already stored
        """
        parsed = parse_filename(filename)

        if not content:
            raise DecodeError("snapshot content is empty")
        decode_snapshot(content)

        snapshot_id = self.store.insert(parsed.address, parsed.timestamp, content)
        return SnapshotInfo(id=snapshot_id, address=parsed.address, timestamp=parsed.timestamp)

    def get_host_history(self, address: str) -> List[SnapshotInfo]:
        """Snapshots stored for an address, newest first."""
        return [SnapshotInfo.from_stored(s) for s in self.store.list_by_address(address)]

    def compare_snapshots(self, snapshot_id_a: str, snapshot_id_b: str) -> DiffReport:
        """
        Compare two stored snapshots of the same host.

        Raises:
            NotFoundError: either id is unknown
            AddressMismatchError: the snapshots belong to different hosts
            DecodeError: stored content no longer decodes
        """
        snapshot_a = self._get(snapshot_id_a)
        snapshot_b = self._get(snapshot_id_b)

        if snapshot_a.address != snapshot_b.address:
            raise AddressMismatchError(snapshot_a.address, snapshot_b.address)

        logger.info(
            f"Comparing snapshots {snapshot_a.id} ({snapshot_a.timestamp}) and "
            f"{snapshot_b.id} ({snapshot_b.timestamp}) for {snapshot_a.address}"
        )
        return diff_snapshots(snapshot_a.data, snapshot_b.data)

    def _get(self, snapshot_id: str) -> StoredSnapshot:
        snapshot = self.store.get_by_id(snapshot_id)
        if snapshot is None:
            raise NotFoundError("Snapshot", snapshot_id)
        return snapshot
