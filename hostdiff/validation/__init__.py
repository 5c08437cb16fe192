"""Input validation for snapshot uploads."""

from .filename import ParsedFilename, parse_filename, validate_ip_address, FILENAME_PATTERN

__all__ = ["ParsedFilename", "parse_filename", "validate_ip_address", "FILENAME_PATTERN"]
