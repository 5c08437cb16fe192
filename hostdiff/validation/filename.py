"""Upload filename validation."""

import calendar
import re
from dataclasses import dataclass

from ..errors import ValidationError

# host_<ipv4>_<YYYY-MM-DDTHH-MM-SSZ>.json
FILENAME_PATTERN = re.compile(
    r"host_(\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})"
    r"_((\d{4})-(\d{2})-(\d{2})T(\d{2})-(\d{2})-(\d{2})Z)\.json",
    re.ASCII
)


@dataclass(frozen=True)
class ParsedFilename:
    """Metadata extracted from a snapshot filename."""
    address: str
    timestamp: str  # ISO-8601


def validate_ip_address(address: str) -> str:
    """Check that a dotted-quad address has four octets in 0-255."""
    octets = address.split(".")
    if len(octets) != 4 or not all(o.isascii() and o.isdigit() for o in octets):
        raise ValidationError(f"invalid IP address format: {address}", field="address")

    for i, octet in enumerate(octets):
        value = int(octet)
        if value > 255:
            raise ValidationError(
                f"invalid IP address octet [{i}]: {value} (must be 0-255)",
                field="address"
            )
    return address


def validate_timestamp(
        year: int, month: int, day: int,
        hour: int, minute: int, second: int
) -> None:
    """Check each timestamp component against its calendar range."""
    if not 1 <= month <= 12:
        raise ValidationError(f"invalid month: {month} (must be 1-12)", field="timestamp")
    days_in_month = calendar.mdays[month]
    if month == 2 and calendar.isleap(year):
        days_in_month = 29
    if not 1 <= day <= days_in_month:
        raise ValidationError(
            f"invalid day: {day} (must be 1-{days_in_month})", field="timestamp"
        )
    if not 0 <= hour <= 23:
        raise ValidationError(f"invalid hour: {hour} (must be 0-23)", field="timestamp")
    if not 0 <= minute <= 59:
        raise ValidationError(f"invalid minute: {minute} (must be 0-59)", field="timestamp")
    if not 0 <= second <= 59:
        raise ValidationError(f"invalid second: {second} (must be 0-59)", field="timestamp")


def normalize_timestamp(timestamp: str) -> str:
    """Turn "2025-10-16T12-00-00Z" into "2025-10-16T12:00:00Z"."""
    date_part, _, time_part = timestamp.partition("T")
    return f"{date_part}T{time_part.replace('-', ':')}"


def parse_filename(filename: str) -> ParsedFilename:
    """
    Extract and validate the address and timestamp of a snapshot filename.

    Args:
        filename: e.g. "host_127.0.0.1_2025-10-16T12-00-00Z.json"

    Returns:
        ParsedFilename with an ISO-8601 timestamp

    Raises:
        ValidationError: if the name, address or timestamp is malformed
    """
    match = FILENAME_PATTERN.fullmatch(filename or "")
    if not match:
        raise ValidationError(
            f"filename does not match expected format "
            f"'host_<ip>_<timestamp>.json': {filename}",
            field="filename"
        )

    address = validate_ip_address(match.group(1))
    year, month, day, hour, minute, second = (int(g) for g in match.groups()[2:])
    validate_timestamp(year, month, day, hour, minute, second)

    return ParsedFilename(
        address=address,
        timestamp=normalize_timestamp(match.group(2))
    )
