"""Host snapshot data models."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


ServiceKey = Tuple[int, str]


@dataclass(frozen=True)
class SoftwareInfo:
    """Software advertised by a service."""
    vendor: str = ""
    product: str = ""
    version: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "vendor": self.vendor,
            "product": self.product,
            "version": self.version
        }


@dataclass(frozen=True)
class TLSInfo:
    """TLS configuration advertised by a service."""
    version: str = ""
    cipher: str = ""
    cert_fingerprint: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "version": self.version,
            "cipher": self.cipher,
            "cert_fingerprint": self.cert_fingerprint
        }


@dataclass(frozen=True)
class Service:
    """Represents one network-exposed service on a host."""
    port: int
    protocol: str = ""
    status: int = 0  # 0 means not reported
    software: SoftwareInfo = field(default_factory=SoftwareInfo)
    tls: Optional[TLSInfo] = None
    vulnerabilities: Tuple[str, ...] = ()

    @property
    def key(self) -> ServiceKey:
        """Identity key used to align services between snapshots."""
        return (self.port, self.protocol)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "port": self.port,
            "protocol": self.protocol,
            "status": self.status,
            "software": self.software.to_dict(),
            "tls": self.tls.to_dict() if self.tls else None,
            "vulnerabilities": list(self.vulnerabilities)
        }


@dataclass(frozen=True)
class Snapshot:
    """A host's exposed services captured at one point in time."""
    address: str = ""
    capture_timestamp: str = ""
    services: Tuple[Service, ...] = ()

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "address": self.address,
            "capture_timestamp": self.capture_timestamp,
            "services": [s.to_dict() for s in self.services]
        }

    def summary(self) -> str:
        """Generate a brief summary of the snapshot."""
        cve_count = sum(len(s.vulnerabilities) for s in self.services)
        return (
            f"Snapshot {self.address or 'unknown'} "
            f"({self.capture_timestamp or 'no timestamp'}): "
            f"{len(self.services)} services, "
            f"{cve_count} vulnerabilities"
        )
