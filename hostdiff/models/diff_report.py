"""Diff report data models."""

from dataclasses import dataclass, field
from typing import Dict, List

from .snapshot import Service


@dataclass(frozen=True)
class ServiceChange:
    """Attribute differences for a service present in both snapshots."""
    port: int
    protocol: str
    changes: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "port": self.port,
            "protocol": self.protocol,
            "changes": dict(self.changes)
        }


@dataclass(frozen=True)
class VulnerabilityChange:
    """A CVE that appeared on or disappeared from a port."""
    cve_id: str
    port: int
    protocol: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "cve_id": self.cve_id,
            "port": self.port,
            "protocol": self.protocol
        }


@dataclass
class DiffReport:
    """Structured differences between two snapshots of one host."""
    summary: str = ""
    added_services: List[Service] = field(default_factory=list)
    removed_services: List[Service] = field(default_factory=list)
    changed_services: List[ServiceChange] = field(default_factory=list)
    added_vulnerabilities: List[VulnerabilityChange] = field(default_factory=list)
    removed_vulnerabilities: List[VulnerabilityChange] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        """Whether any of the change lists is non-empty."""
        return bool(
            self.added_services
            or self.removed_services
            or self.changed_services
            or self.added_vulnerabilities
            or self.removed_vulnerabilities
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "summary": self.summary,
            "added_services": [s.to_dict() for s in self.added_services],
            "removed_services": [s.to_dict() for s in self.removed_services],
            "changed_services": [c.to_dict() for c in self.changed_services],
            "added_vulnerabilities": [v.to_dict() for v in self.added_vulnerabilities],
            "removed_vulnerabilities": [v.to_dict() for v in self.removed_vulnerabilities]
        }
