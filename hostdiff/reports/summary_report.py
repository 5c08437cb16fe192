"""Human-readable diff summary."""

from typing import Dict, Any, List, Optional

from .base_report import BaseReportGenerator, ReportFormat
from ..models import DiffReport, Service

NO_DIFFERENCES = "No meaningful differences found."


def _service_line(marker: str, service: Service) -> str:
    line = f"    {marker} Port {service.port} ({service.protocol})"
    if service.software.product:
        line += f" - {service.software.product}"
        if service.software.version:
            line += f" {service.software.version}"
    count = len(service.vulnerabilities)
    if count:
        line += f" [{count} CVE{'s' if count != 1 else ''}]"
    return line


def render_summary(report: DiffReport) -> str:
    """
    Render the summary text for a diff report.

    Sections appear in a fixed order and only when non-empty. A report
    with no changes renders as a single sentence.
    """
    if not report.has_changes:
        return NO_DIFFERENCES

    lines: List[str] = ["Diff Report:"]

    if report.added_services:
        lines.append("")
        lines.append(f"  Added Services ({len(report.added_services)}):")
        lines.extend(_service_line("+", s) for s in report.added_services)

    if report.removed_services:
        lines.append("")
        lines.append(f"  Removed Services ({len(report.removed_services)}):")
        lines.extend(_service_line("-", s) for s in report.removed_services)

    if report.changed_services:
        lines.append("")
        lines.append(f"  Changed Services ({len(report.changed_services)}):")
        for change in report.changed_services:
            lines.append(f"    ~ Port {change.port} ({change.protocol}):")
            for attribute in sorted(change.changes):
                lines.append(f"        {attribute}: {change.changes[attribute]}")

    if report.added_vulnerabilities:
        lines.append("")
        lines.append(f"  Added Vulnerabilities ({len(report.added_vulnerabilities)}):")
        for cve in report.added_vulnerabilities:
            lines.append(f"    + {cve.cve_id} on port {cve.port} ({cve.protocol})")

    if report.removed_vulnerabilities:
        lines.append("")
        lines.append(f"  Removed Vulnerabilities ({len(report.removed_vulnerabilities)}):")
        for cve in report.removed_vulnerabilities:
            lines.append(f"    - {cve.cve_id} from port {cve.port} ({cve.protocol})")

    return "\n".join(lines) + "\n"


class TextReportGenerator(BaseReportGenerator):
    """Plain-text diff report with a metadata header."""

    format = ReportFormat.TEXT

    def generate(
            self,
            report: DiffReport,
            metadata: Optional[Dict[str, Any]] = None
    ) -> str:
        metadata = metadata or {}
        header = [f"Host Diff Report - {self._format_timestamp()}"]
        if metadata.get("address"):
            header.append(f"Address: {metadata['address']}")
        if metadata.get("timestamp_a") or metadata.get("timestamp_b"):
            header.append(
                f"Snapshots: {metadata.get('timestamp_a', '?')} -> "
                f"{metadata.get('timestamp_b', '?')}"
            )
        body = report.summary or render_summary(report)
        return "\n".join(header) + "\n\n" + body.rstrip("\n") + "\n"
