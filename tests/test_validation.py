"""Tests for upload filename validation."""

import pytest

from hostdiff.errors import ValidationError
from hostdiff.validation import parse_filename, validate_ip_address


def test_parse_valid_filenames():
    """Address is extracted and the time portion normalized."""
    test_cases = [
        ("host_127.0.0.1_2025-10-16T12-00-00Z.json", "127.0.0.1", "2025-10-16T12:00:00Z"),
        ("host_192.168.1.100_2025-09-10T03-00-00Z.json", "192.168.1.100", "2025-09-10T03:00:00Z"),
        ("host_0.0.0.0_2025-01-01T23-59-59Z.json", "0.0.0.0", "2025-01-01T23:59:59Z"),
        ("host_255.255.255.255_2024-02-29T00-00-00Z.json", "255.255.255.255", "2024-02-29T00:00:00Z"),
    ]

    for filename, address, timestamp in test_cases:
        parsed = parse_filename(filename)
        assert parsed.address == address, filename
        assert parsed.timestamp == timestamp, filename


def test_reject_invalid_filenames():
    invalid = [
        "",
        "snapshot_127.0.0.1_2025-10-16T12-00-00Z.json",
        "host_127.0.0.1_2025-10-16T12-00-00Z",
        "host_127.0.0.1_2025-10-16T12-00-00Z.json.bak",
        "uploads/host_127.0.0.1_2025-10-16T12-00-00Z.json",
        "host_127.0.0.1_2025-10-16T12:00:00Z.json",
        "host_256.0.0.1_2025-10-16T12-00-00Z.json",
        "host_-1.0.0.1_2025-10-16T12-00-00Z.json",
        "host_999.999.999.999_2025-10-16T12-00-00Z.json",
        "host_127.0.0_2025-10-16T12-00-00Z.json",
        "host_127.0.0.1_2025-13-16T12-00-00Z.json",
        "host_127.0.0.1_2025-00-16T12-00-00Z.json",
        "host_127.0.0.1_2025-10-32T12-00-00Z.json",
        "host_127.0.0.1_2025-10-00T12-00-00Z.json",
        "host_127.0.0.1_2025-02-29T12-00-00Z.json",
        "host_127.0.0.1_2025-04-31T12-00-00Z.json",
        "host_127.0.0.1_2025-10-16T24-00-00Z.json",
        "host_127.0.0.1_2025-10-16T12-60-00Z.json",
        "host_127.0.0.1_2025-10-16T12-00-60Z.json",
        "host_127.0.0.1'; DROP TABLE snapshots;--_2025-01-01T00-00-00Z.json",
        "host_127.0.0.1<script>alert('xss')</script>_2025-01-01T00-00-00Z.json",
        "host_../../etc/passwd_2025-01-01T00-00-00Z.json",
        "host_١٢٧.0.0.1_2025-10-16T12-00-00Z.json",
    ]

    for filename in invalid:
        with pytest.raises(ValidationError):
            parse_filename(filename)


def test_error_names_the_bad_component():
    with pytest.raises(ValidationError) as exc_info:
        parse_filename("host_127.0.0.1_2025-13-16T12-00-00Z.json")
    assert "month" in exc_info.value.detail
    assert exc_info.value.field == "timestamp"

    with pytest.raises(ValidationError) as exc_info:
        parse_filename("host_300.0.0.1_2025-10-16T12-00-00Z.json")
    assert exc_info.value.field == "address"


def test_validate_ip_address():
    assert validate_ip_address("192.168.1.1") == "192.168.1.1"
    for bad in ["256.0.0.1", "192.168.1", "a.b.c.d", "1.2.3.4.5"]:
        with pytest.raises(ValidationError):
            validate_ip_address(bad)
