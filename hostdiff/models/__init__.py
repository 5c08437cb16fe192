"""Data models for host snapshots and their differences."""

from .snapshot import Snapshot, Service, SoftwareInfo, TLSInfo, ServiceKey
from .diff_report import DiffReport, ServiceChange, VulnerabilityChange

__all__ = [
    "Snapshot",
    "Service",
    "SoftwareInfo",
    "TLSInfo",
    "ServiceKey",
    "DiffReport",
    "ServiceChange",
    "VulnerabilityChange"
]
