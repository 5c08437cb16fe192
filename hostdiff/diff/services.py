"""Service matching and attribute comparison."""

import logging
from typing import Dict, Iterable, List, Tuple

from ..models import Service, ServiceChange, ServiceKey

logger = logging.getLogger(__name__)

ARROW = "->"
TLS_ADDED = "TLS added"
TLS_REMOVED = "TLS removed"


def _describe(old, new) -> str:
    return f"{old} {ARROW} {new}"


def index_services(services: Iterable[Service]) -> Dict[ServiceKey, Service]:
    """
    Index services by their (port, protocol) identity key.

    Duplicate keys within one snapshot are ambiguous input; the last
    occurrence in document order wins and earlier ones are dropped.
    """
    index: Dict[ServiceKey, Service] = {}
    for service in services:
        if service.key in index:
            logger.warning(
                f"Duplicate service {service.port}/{service.protocol}, "
                f"keeping last occurrence"
            )
        index[service.key] = service
    return index


def compare_service(service_a: Service, service_b: Service) -> Dict[str, str]:
    """
    Compare the attributes of two services sharing an identity key.

    Every attribute is checked independently. The certificate
    fingerprint is not compared.

    Returns:
        Mapping of attribute name to an "old -> new" description,
        sorted by attribute name. Empty when nothing differs.
    """
    changes: Dict[str, str] = {}

    # Unreachable while protocol is part of the identity key
    if service_a.protocol != service_b.protocol:
        changes["protocol"] = _describe(service_a.protocol, service_b.protocol)

    # 0 means not reported, so 0 vs 0 never counts
    if service_a.status != service_b.status and (service_a.status or service_b.status):
        changes["status"] = _describe(service_a.status, service_b.status)

    software_a, software_b = service_a.software, service_b.software
    if software_a.product != software_b.product:
        changes["software_product"] = _describe(software_a.product, software_b.product)
    if software_a.version != software_b.version:
        changes["software_version"] = _describe(software_a.version, software_b.version)
    if software_a.vendor != software_b.vendor:
        changes["software_vendor"] = _describe(software_a.vendor, software_b.vendor)

    tls_a, tls_b = service_a.tls, service_b.tls
    if tls_a is None and tls_b is not None:
        changes["tls"] = TLS_ADDED
    elif tls_a is not None and tls_b is None:
        changes["tls"] = TLS_REMOVED
    elif tls_a is not None and tls_b is not None:
        if tls_a.version != tls_b.version:
            changes["tls_version"] = _describe(tls_a.version, tls_b.version)
        if tls_a.cipher != tls_b.cipher:
            changes["tls_cipher"] = _describe(tls_a.cipher, tls_b.cipher)

    return dict(sorted(changes.items()))


def compare_services(
        services_a: Iterable[Service],
        services_b: Iterable[Service]
) -> Tuple[List[Service], List[Service], List[ServiceChange]]:
    """
    Align two service lists by identity key and detect differences.

    Returns:
        (added, removed, changed), each sorted by (port, protocol)
    """
    index_a = index_services(services_a)
    index_b = index_services(services_b)

    added = [index_b[key] for key in sorted(index_b.keys() - index_a.keys())]
    removed = [index_a[key] for key in sorted(index_a.keys() - index_b.keys())]

    changed = []
    for key in sorted(index_a.keys() & index_b.keys()):
        service_a, service_b = index_a[key], index_b[key]
        changes = compare_service(service_a, service_b)
        if changes:
            changed.append(ServiceChange(
                port=service_a.port,
                protocol=service_b.protocol,
                changes=changes
            ))

    return added, removed, changed
