"""Exceptions raised by the host diff engine and its collaborators."""

from typing import Optional, Tuple


class HostDiffError(Exception):
    """Base exception for host diff errors."""

    error_code = "HOSTDIFF_ERROR"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class DecodeError(HostDiffError):
    """Snapshot bytes are not well-formed structured data."""

    error_code = "DECODE_ERROR"

    def __init__(self, detail: str, sides: Tuple[str, ...] = ()):
        super().__init__(detail)
        self.sides = tuple(sides)


class NotFoundError(HostDiffError):
    """Referenced snapshot does not exist."""

    error_code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: Optional[str] = None):
        detail = f"{resource} not found"
        if identifier is not None:
            detail = f"{resource} '{identifier}' not found"
        super().__init__(detail)
        self.resource = resource
        self.identifier = identifier


class AddressMismatchError(HostDiffError):
    """Two snapshots were captured for different hosts."""

    error_code = "ADDRESS_MISMATCH"

    def __init__(self, address_a: str, address_b: str):
        super().__init__(
            f"cannot compare snapshots from different addresses: "
            f"{address_a} vs {address_b}"
        )
        self.address_a = address_a
        self.address_b = address_b


class ValidationError(HostDiffError):
    """Malformed upload filename, address or timestamp."""

    error_code = "VALIDATION_ERROR"

    def __init__(self, detail: str, field: Optional[str] = None):
        super().__init__(detail)
        self.field = field


class ConflictError(HostDiffError):
    """A snapshot for the same address and timestamp already exists."""

    error_code = "CONFLICT"

    def __init__(self, address: str, timestamp: str):
        super().__init__(
            f"snapshot for {address} at {timestamp} already exists"
        )
        self.address = address
        self.timestamp = timestamp
