"""Snapshot comparison engine."""

from .engine import diff_snapshots, compare_snapshots
from .services import index_services, compare_service, compare_services
from .vulnerabilities import index_vulnerabilities, compare_vulnerabilities

__all__ = [
    "diff_snapshots",
    "compare_snapshots",
    "index_services",
    "compare_service",
    "compare_services",
    "index_vulnerabilities",
    "compare_vulnerabilities"
]
