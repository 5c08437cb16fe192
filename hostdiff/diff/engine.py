"""Snapshot comparison entry points."""

import logging
from typing import Union

from ..models import DiffReport, Snapshot
from ..parsers import decode_pair
from ..reports import render_summary
from .services import compare_services
from .vulnerabilities import compare_vulnerabilities

logger = logging.getLogger(__name__)


def compare_snapshots(snapshot_a: Snapshot, snapshot_b: Snapshot) -> DiffReport:
    """Compare two decoded snapshots. Never fails."""
    added, removed, changed = compare_services(snapshot_a.services, snapshot_b.services)
    added_cves, removed_cves = compare_vulnerabilities(
        snapshot_a.services, snapshot_b.services
    )

    report = DiffReport(
        added_services=added,
        removed_services=removed,
        changed_services=changed,
        added_vulnerabilities=added_cves,
        removed_vulnerabilities=removed_cves
    )
    report.summary = render_summary(report)

    logger.debug(
        f"Compared {snapshot_a.address or 'unknown'}: "
        f"+{len(added)} -{len(removed)} ~{len(changed)} services, "
        f"+{len(added_cves)} -{len(removed_cves)} CVEs"
    )
    return report


def diff_snapshots(
        snapshot_a: Union[bytes, str],
        snapshot_b: Union[bytes, str]
) -> DiffReport:
    """
    Decode two raw snapshots and compare them.

    Args:
        snapshot_a: Earlier snapshot bytes
        snapshot_b: Later snapshot bytes

    Returns:
        DiffReport describing what changed from A to B

    Raises:
        DecodeError: if either input is malformed
    """
    decoded_a, decoded_b = decode_pair(snapshot_a, snapshot_b)
    return compare_snapshots(decoded_a, decoded_b)
