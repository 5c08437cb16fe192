"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

import api.main as api_main

from conftest import make_snapshot

FILENAME_A = "host_125.199.235.74_2025-09-10T03-00-00Z.json"
FILENAME_B = "host_125.199.235.74_2025-09-15T08-49-45Z.json"


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(api_main.settings.storage, "db_path", str(tmp_path / "api.db"))
    with TestClient(api_main.app) as test_client:
        yield test_client


def _upload(client, filename, content):
    return client.post(
        "/api/snapshots",
        files={"file": (filename, content, "application/json")}
    )


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["snapshots_count"] == 0


def test_upload_and_history(client):
    response = _upload(client, FILENAME_A, make_snapshot([]))

    assert response.status_code == 201
    body = response.json()
    assert body["address"] == "125.199.235.74"
    assert body["timestamp"] == "2025-09-10T03:00:00Z"

    _upload(client, FILENAME_B, make_snapshot([]))
    history = client.get("/api/hosts/125.199.235.74/snapshots").json()

    assert history["address"] == "125.199.235.74"
    assert [s["timestamp"] for s in history["snapshots"]] == [
        "2025-09-15T08:49:45Z",
        "2025-09-10T03:00:00Z"
    ]


def test_upload_errors(client):
    bad_name = _upload(client, "snapshot.json", make_snapshot([]))
    assert bad_name.status_code == 400
    assert bad_name.json()["error_code"] == "VALIDATION_ERROR"

    bad_json = _upload(client, FILENAME_A, b"{invalid json}")
    assert bad_json.status_code == 400
    assert bad_json.json()["error_code"] == "DECODE_ERROR"

    assert _upload(client, FILENAME_A, make_snapshot([])).status_code == 201
    duplicate = _upload(client, FILENAME_A, make_snapshot([]))
    assert duplicate.status_code == 409
    assert duplicate.json()["error_code"] == "CONFLICT"


def test_compare(client, censys_pair):
    snapshot_a, snapshot_b = censys_pair
    id_a = _upload(client, FILENAME_A, snapshot_a).json()["id"]
    id_b = _upload(client, FILENAME_B, snapshot_b).json()["id"]

    response = client.get("/api/compare", params={"snapshot_a": id_a, "snapshot_b": id_b})

    assert response.status_code == 200
    report = response.json()
    assert [s["port"] for s in report["added_services"]] == [443]
    assert report["added_services"][0]["tls"]["version"] == "tlsv1_2"
    assert report["removed_services"] == []
    assert report["changed_services"] == [
        {"port": 80, "protocol": "HTTP", "changes": {"status": "200 -> 301"}}
    ]
    assert report["added_vulnerabilities"] == [
        {"cve_id": "CVE-2023-99999", "port": 443, "protocol": "HTTPS"}
    ]
    assert report["removed_vulnerabilities"] == []
    assert report["summary"].startswith("Diff Report:")


def test_compare_errors(client):
    id_a = _upload(client, FILENAME_A, make_snapshot([])).json()["id"]
    id_other = _upload(client, "host_10.0.0.1_2025-09-10T03-00-00Z.json", make_snapshot([])).json()["id"]

    not_found = client.get("/api/compare", params={"snapshot_a": id_a, "snapshot_b": "999"})
    assert not_found.status_code == 404
    assert not_found.json()["error_code"] == "NOT_FOUND"

    mismatch = client.get("/api/compare", params={"snapshot_a": id_a, "snapshot_b": id_other})
    assert mismatch.status_code == 422
    assert mismatch.json()["error_code"] == "ADDRESS_MISMATCH"

    missing = client.get("/api/compare", params={"snapshot_a": id_a})
    assert missing.status_code == 422


def test_upload_too_large(client, monkeypatch):
    monkeypatch.setattr(api_main.settings.server, "max_upload_mb", 0)

    response = _upload(client, FILENAME_A, make_snapshot([]))

    assert response.status_code == 413
    assert client.get("/api/health").json()["snapshots_count"] == 0
