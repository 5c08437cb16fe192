"""Parsers for host snapshot documents."""

from .base_parser import BaseParser
from .snapshot_parser import SnapshotParser, decode_snapshot, decode_pair

__all__ = ["BaseParser", "SnapshotParser", "decode_snapshot", "decode_pair"]
