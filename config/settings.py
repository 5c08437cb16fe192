"""
Configuration settings for the host diff service.
"""

from dataclasses import dataclass, field
import os
import json


@dataclass
class StorageSettings:
    """Snapshot store settings."""
    db_path: str = "data/snapshots.db"


@dataclass
class ServerSettings:
    """HTTP API settings."""
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    cors_origins: list = field(default_factory=lambda: ["*"])
    max_upload_mb: int = 20


@dataclass
class ReportSettings:
    """Report output settings."""
    output_dir: str = "data/reports"
    default_format: str = "text"


@dataclass
class HostDiffSettings:
    """Main settings."""
    storage: StorageSettings = field(default_factory=StorageSettings)
    server: ServerSettings = field(default_factory=ServerSettings)
    report: ReportSettings = field(default_factory=ReportSettings)

    log_level: str = "INFO"

    @classmethod
    def from_file(cls, file_path: str) -> "HostDiffSettings":
        """Load settings from JSON file."""
        with open(file_path, 'r') as f:
            data = json.load(f)

        settings = cls()

        for section in ('storage', 'server', 'report'):
            if section in data:
                target = getattr(settings, section)
                for k, v in data[section].items():
                    if hasattr(target, k):
                        setattr(target, k, v)

        if 'log_level' in data:
            settings.log_level = data['log_level']

        return settings

    @classmethod
    def from_env(cls) -> "HostDiffSettings":
        """Load settings from environment variables."""
        settings = cls()

        if os.getenv('HOSTDIFF_DB_PATH'):
            settings.storage.db_path = os.getenv('HOSTDIFF_DB_PATH')

        if os.getenv('HOSTDIFF_HOST'):
            settings.server.host = os.getenv('HOSTDIFF_HOST')
        if os.getenv('HOSTDIFF_PORT'):
            settings.server.port = int(os.getenv('HOSTDIFF_PORT'))

        if os.getenv('HOSTDIFF_REPORT_DIR'):
            settings.report.output_dir = os.getenv('HOSTDIFF_REPORT_DIR')

        if os.getenv('HOSTDIFF_LOG_LEVEL'):
            settings.log_level = os.getenv('HOSTDIFF_LOG_LEVEL').upper()

        return settings

    def to_dict(self) -> dict:
        """Convert settings to dictionary."""
        return {
            "storage": {
                "db_path": self.storage.db_path
            },
            "server": {
                "host": self.server.host,
                "port": self.server.port,
                "reload": self.server.reload,
                "cors_origins": self.server.cors_origins,
                "max_upload_mb": self.server.max_upload_mb
            },
            "report": {
                "output_dir": self.report.output_dir,
                "default_format": self.report.default_format
            },
            "log_level": self.log_level
        }

    def save(self, file_path: str):
        """Save settings to JSON file."""
        with open(file_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)


# Default settings instance
DEFAULT_SETTINGS = HostDiffSettings()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
