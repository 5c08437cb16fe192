"""Host snapshot comparison: track how a host's exposed surface changes."""

from .diff import diff_snapshots, compare_snapshots
from .errors import (
    HostDiffError,
    DecodeError,
    NotFoundError,
    AddressMismatchError,
    ValidationError,
    ConflictError
)
from .models import DiffReport, ServiceChange, VulnerabilityChange, Snapshot
from .service import HostDiffService, SnapshotInfo

__version__ = "1.0.0"

__all__ = [
    "diff_snapshots",
    "compare_snapshots",
    "HostDiffError",
    "DecodeError",
    "NotFoundError",
    "AddressMismatchError",
    "ValidationError",
    "ConflictError",
    "DiffReport",
    "ServiceChange",
    "VulnerabilityChange",
    "Snapshot",
    "HostDiffService",
    "SnapshotInfo"
]
