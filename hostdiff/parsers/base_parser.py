"""Base parser interface for snapshot documents."""

from abc import ABC, abstractmethod
from typing import Union
from pathlib import Path

from ..models import Snapshot


class BaseParser(ABC):
    """Abstract base class for snapshot parsers."""

    def parse_file(self, file_path: Union[str, Path]) -> Snapshot:
        """
        Parse a snapshot file.

        Args:
            file_path: Path to the snapshot file

        Returns:
            Snapshot object containing parsed data
        """
        with open(file_path, 'rb') as f:
            return self.parse_bytes(f.read())

    @abstractmethod
    def parse_bytes(self, content: bytes) -> Snapshot:
        """
        Parse a snapshot from a raw byte buffer.

        Args:
            content: Raw snapshot bytes

        Returns:
            Snapshot object containing parsed data
        """
        pass

    def parse_string(self, content: str) -> Snapshot:
        """Parse a snapshot from a string."""
        return self.parse_bytes(content.encode('utf-8'))
