"""Shared fixtures for host diff tests."""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hostdiff.storage import SnapshotStore


def make_snapshot(services, address="125.199.235.74", timestamp="2025-09-10T03:00:00Z") -> bytes:
    """Build raw snapshot bytes from a list of service dicts."""
    return json.dumps({
        "address": address,
        "capture_timestamp": timestamp,
        "services": services
    }).encode("utf-8")


@pytest.fixture
def store():
    """In-memory snapshot store."""
    snapshot_store = SnapshotStore(":memory:")
    yield snapshot_store
    snapshot_store.close()


@pytest.fixture
def censys_pair():
    """Two real-world style snapshots of the same host."""
    snapshot_a = {
        "timestamp": "2025-09-10T03:00:00Z",
        "ip": "125.199.235.74",
        "services": [
            {
                "port": 80,
                "protocol": "HTTP",
                "status": 200,
                "software": {
                    "vendor": "microsoft",
                    "product": "internet_information_services",
                    "version": "8.5"
                }
            }
        ],
        "service_count": 1
    }
    snapshot_b = {
        "timestamp": "2025-09-15T08:49:45Z",
        "ip": "125.199.235.74",
        "services": [
            {
                "port": 80,
                "protocol": "HTTP",
                "status": 301,
                "software": {
                    "vendor": "microsoft",
                    "product": "internet_information_services",
                    "version": "8.5"
                }
            },
            {
                "port": 443,
                "protocol": "HTTPS",
                "status": 200,
                "software": {"vendor": "microsoft", "product": "asp.net"},
                "tls": {
                    "version": "tlsv1_2",
                    "cipher": "TLS_ECDHE_RSA_WITH_AES_256_GCM_SHA384"
                },
                "vulnerabilities": ["CVE-2023-99999"]
            }
        ],
        "service_count": 2
    }
    return json.dumps(snapshot_a).encode(), json.dumps(snapshot_b).encode()
