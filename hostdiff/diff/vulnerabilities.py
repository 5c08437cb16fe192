"""Vulnerability matching between snapshots."""

from typing import Dict, Iterable, List, Tuple

from ..models import Service, VulnerabilityChange

VulnerabilityKey = Tuple[str, int]


def index_vulnerabilities(
        services: Iterable[Service]
) -> Dict[VulnerabilityKey, VulnerabilityChange]:
    """
    Flatten every service's CVEs into a (cve_id, port) index.

    The same CVE on two ports gives two entries. When two records share
    a key, the protocol of the last one is kept.
    """
    index: Dict[VulnerabilityKey, VulnerabilityChange] = {}
    for service in services:
        for cve_id in service.vulnerabilities:
            index[(cve_id, service.port)] = VulnerabilityChange(
                cve_id=cve_id,
                port=service.port,
                protocol=service.protocol
            )
    return index


def _sort_key(change: VulnerabilityChange):
    return (change.port, change.cve_id, change.protocol)


def compare_vulnerabilities(
        services_a: Iterable[Service],
        services_b: Iterable[Service]
) -> Tuple[List[VulnerabilityChange], List[VulnerabilityChange]]:
    """
    Symmetric difference of the two snapshots' vulnerability records.

    Returns:
        (added, removed), each sorted by port then CVE id
    """
    index_a = index_vulnerabilities(services_a)
    index_b = index_vulnerabilities(services_b)

    added = sorted(
        (index_b[key] for key in index_b.keys() - index_a.keys()),
        key=_sort_key
    )
    removed = sorted(
        (index_a[key] for key in index_a.keys() - index_b.keys()),
        key=_sort_key
    )
    return added, removed
