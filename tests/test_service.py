"""Tests for the upload, history and compare operations."""

import pytest

from hostdiff.errors import (
    AddressMismatchError,
    ConflictError,
    DecodeError,
    NotFoundError,
    ValidationError
)
from hostdiff.reports import NO_DIFFERENCES
from hostdiff.service import HostDiffService

from conftest import make_snapshot

FILENAME_A = "host_125.199.235.74_2025-09-10T03-00-00Z.json"
FILENAME_B = "host_125.199.235.74_2025-09-15T08-49-45Z.json"


@pytest.fixture
def service(store):
    return HostDiffService(store)


def test_upload_snapshot(service):
    info = service.upload_snapshot(FILENAME_A, make_snapshot([]))

    assert info.id
    assert info.address == "125.199.235.74"
    assert info.timestamp == "2025-09-10T03:00:00Z"


def test_upload_rejects_bad_filename(service, store):
    with pytest.raises(ValidationError):
        service.upload_snapshot("snapshot.json", make_snapshot([]))
    assert store.count() == 0


def test_upload_rejects_undecodable_content(service, store):
    with pytest.raises(DecodeError):
        service.upload_snapshot(FILENAME_A, b"{invalid json}")
    with pytest.raises(DecodeError):
        service.upload_snapshot(FILENAME_A, b"")
    assert store.count() == 0


def test_upload_duplicate_conflicts(service):
    service.upload_snapshot(FILENAME_A, make_snapshot([]))

    with pytest.raises(ConflictError):
        service.upload_snapshot(FILENAME_A, make_snapshot([{"port": 80}]))


def test_host_history(service):
    service.upload_snapshot(FILENAME_A, make_snapshot([]))
    service.upload_snapshot(FILENAME_B, make_snapshot([]))
    service.upload_snapshot("host_10.0.0.1_2025-09-10T03-00-00Z.json", make_snapshot([]))

    history = service.get_host_history("125.199.235.74")

    assert [s.timestamp for s in history] == ["2025-09-15T08:49:45Z", "2025-09-10T03:00:00Z"]
    assert service.get_host_history("1.1.1.1") == []


def test_compare_snapshots(service, censys_pair):
    snapshot_a, snapshot_b = censys_pair
    id_a = service.upload_snapshot(FILENAME_A, snapshot_a).id
    id_b = service.upload_snapshot(FILENAME_B, snapshot_b).id

    report = service.compare_snapshots(id_a, id_b)

    assert [(s.port, s.protocol) for s in report.added_services] == [(443, "HTTPS")]
    assert report.changed_services[0].changes == {"status": "200 -> 301"}


def test_compare_same_snapshot(service):
    snapshot_id = service.upload_snapshot(FILENAME_A, make_snapshot([{"port": 80, "protocol": "HTTP"}])).id

    report = service.compare_snapshots(snapshot_id, snapshot_id)

    assert report.summary == NO_DIFFERENCES


def test_compare_unknown_id(service):
    snapshot_id = service.upload_snapshot(FILENAME_A, make_snapshot([])).id

    with pytest.raises(NotFoundError):
        service.compare_snapshots(snapshot_id, "999")
    with pytest.raises(NotFoundError):
        service.compare_snapshots("", snapshot_id)


def test_compare_different_addresses(service):
    id_a = service.upload_snapshot(FILENAME_A, make_snapshot([])).id
    id_b = service.upload_snapshot("host_10.0.0.1_2025-09-10T03-00-00Z.json", make_snapshot([])).id

    with pytest.raises(AddressMismatchError):
        service.compare_snapshots(id_a, id_b)
