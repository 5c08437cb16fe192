"""JSON host snapshot parser."""

import json
import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from .base_parser import BaseParser
from ..errors import DecodeError
from ..models import Snapshot, Service, SoftwareInfo, TLSInfo

logger = logging.getLogger(__name__)


class SnapshotParser(BaseParser):
    """
    Parser for host snapshot JSON documents.

    Missing or null fields fall back to their zero values. Only
    malformed JSON or a field of the wrong JSON type is an error.
    """

    # Older Censys-style exports use these names
    FIELD_ALIASES = {
        "address": "ip",
        "capture_timestamp": "timestamp",
        "cert_fingerprint": "cert_fingerprint_sha256",
    }

    def parse_bytes(self, content: Union[bytes, str]) -> Snapshot:
        """Decode raw snapshot bytes into a Snapshot."""
        if isinstance(content, str):
            content = content.encode('utf-8')

        try:
            data = json.loads(content.decode('utf-8'))
        except UnicodeDecodeError as e:
            raise DecodeError(f"snapshot is not valid UTF-8: {e}") from e
        except (ValueError, RecursionError) as e:
            # JSONDecodeError, oversized integer literals, excessive nesting
            raise DecodeError(f"snapshot is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError(
                f"snapshot must be a JSON object, got {type(data).__name__}"
            )

        services = tuple(
            self._parse_service(item, index)
            for index, item in enumerate(self._get_list(data, "services", "snapshot"))
        )

        snapshot = Snapshot(
            address=self._get_str(data, "address", "snapshot"),
            capture_timestamp=self._get_str(data, "capture_timestamp", "snapshot"),
            services=services
        )
        logger.debug(snapshot.summary())
        return snapshot

    def _parse_service(self, item: Any, index: int) -> Service:
        """Parse a single service record."""
        where = f"services[{index}]"
        if not isinstance(item, dict):
            raise DecodeError(f"{where} must be a JSON object")

        software = self._get_object(item, "software", where) or {}
        software_where = f"{where}.software"

        tls_data = self._get_object(item, "tls", where)
        tls = None
        if tls_data is not None:
            tls_where = f"{where}.tls"
            tls = TLSInfo(
                version=self._get_str(tls_data, "version", tls_where),
                cipher=self._get_str(tls_data, "cipher", tls_where),
                cert_fingerprint=self._get_str(tls_data, "cert_fingerprint", tls_where)
            )

        vulnerabilities = []
        for cve in self._get_list(item, "vulnerabilities", where):
            if not isinstance(cve, str):
                raise DecodeError(f"{where}.vulnerabilities must contain strings")
            if cve not in vulnerabilities:
                vulnerabilities.append(cve)

        return Service(
            port=self._get_int(item, "port", where),
            protocol=self._get_str(item, "protocol", where),
            status=self._get_int(item, "status", where),
            software=SoftwareInfo(
                vendor=self._get_str(software, "vendor", software_where),
                product=self._get_str(software, "product", software_where),
                version=self._get_str(software, "version", software_where)
            ),
            tls=tls,
            vulnerabilities=tuple(vulnerabilities)
        )

    def _lookup(self, data: Dict[str, Any], key: str) -> Any:
        """Return a field value, falling back to its legacy alias."""
        value = data.get(key)
        if value is None and key in self.FIELD_ALIASES:
            value = data.get(self.FIELD_ALIASES[key])
        return value

    def _get_str(self, data: Dict[str, Any], key: str, where: str) -> str:
        value = self._lookup(data, key)
        if value is None:
            return ""
        if not isinstance(value, str):
            raise DecodeError(f"{where}.{key} must be a string")
        return value

    def _get_int(self, data: Dict[str, Any], key: str, where: str) -> int:
        value = self._lookup(data, key)
        if value is None:
            return 0
        # bool is a subclass of int
        if isinstance(value, bool) or not isinstance(value, int):
            raise DecodeError(f"{where}.{key} must be an integer")
        return value

    def _get_list(self, data: Dict[str, Any], key: str, where: str) -> List[Any]:
        value = self._lookup(data, key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise DecodeError(f"{where}.{key} must be an array")
        return value

    def _get_object(
            self, data: Dict[str, Any], key: str, where: str
    ) -> Optional[Dict[str, Any]]:
        value = self._lookup(data, key)
        if value is None:
            return None
        if not isinstance(value, dict):
            raise DecodeError(f"{where}.{key} must be a JSON object")
        return value


_default_parser = SnapshotParser()


def decode_snapshot(content: Union[bytes, str]) -> Snapshot:
    """Decode raw snapshot bytes with the shared parser."""
    return _default_parser.parse_bytes(content)


def decode_pair(
        content_a: Union[bytes, str],
        content_b: Union[bytes, str]
) -> Tuple[Snapshot, Snapshot]:
    """
    Decode two snapshots independently.

    Both sides are always attempted so that a failure on one side does
    not hide a failure on the other.

    Raises:
        DecodeError: with ``sides`` naming every side that failed
    """
    results = {}
    failures = {}
    for side, content in (("A", content_a), ("B", content_b)):
        try:
            results[side] = decode_snapshot(content)
        except DecodeError as e:
            failures[side] = e

    if failures:
        sides = tuple(sorted(failures))
        detail = "; ".join(
            f"failed to decode snapshot {side}: {failures[side].detail}"
            for side in sides
        )
        raise DecodeError(detail, sides=sides)

    return results["A"], results["B"]
