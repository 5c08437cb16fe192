"""Report rendering modules."""

from .base_report import BaseReportGenerator, JsonReportGenerator, ReportFormat
from .summary_report import TextReportGenerator, render_summary, NO_DIFFERENCES

__all__ = [
    "BaseReportGenerator",
    "JsonReportGenerator",
    "TextReportGenerator",
    "ReportFormat",
    "render_summary",
    "NO_DIFFERENCES"
]
