"""Base report generator interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Any, Optional
from pathlib import Path
from datetime import datetime
import json
import logging

from ..models import DiffReport

logger = logging.getLogger(__name__)


class ReportFormat(Enum):
    """Supported report formats."""
    TEXT = "txt"
    JSON = "json"


class BaseReportGenerator(ABC):
    """Abstract base class for diff report generators."""

    format = ReportFormat.TEXT

    def __init__(self, output_dir: str = "data/reports"):
        """
        Initialize report generator.

        Args:
            output_dir: Directory for saved reports
        """
        self.output_dir = Path(output_dir)

    @abstractmethod
    def generate(
            self,
            report: DiffReport,
            metadata: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Generate report content.

        Args:
            report: Diff report to render
            metadata: Optional report metadata (addresses, timestamps)

        Returns:
            Generated report content as string
        """
        pass

    def save(
            self,
            content: str,
            filename: str,
            format: Optional[ReportFormat] = None
    ) -> Path:
        """
        Save report to file.

        Args:
            content: Report content
            filename: Base filename (without extension)
            format: Output format, defaults to the generator's own

        Returns:
            Path to saved file
        """
        format = format or self.format
        self.output_dir.mkdir(parents=True, exist_ok=True)
        file_path = self.output_dir / f"{filename}.{format.value}"

        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(content)

        logger.info(f"Saved {format.name.lower()} report to {file_path}")
        return file_path

    def _format_timestamp(self, dt: Optional[datetime] = None) -> str:
        """Format timestamp for reports."""
        if dt is None:
            dt = datetime.now()
        return dt.strftime("%Y-%m-%d %H:%M:%S")


class JsonReportGenerator(BaseReportGenerator):
    """Serialize a diff report and its metadata as JSON."""

    format = ReportFormat.JSON

    def generate(
            self,
            report: DiffReport,
            metadata: Optional[Dict[str, Any]] = None
    ) -> str:
        data = {
            "generated_at": self._format_timestamp(),
            "metadata": metadata or {},
            "report": report.to_dict()
        }
        return json.dumps(data, indent=2)
