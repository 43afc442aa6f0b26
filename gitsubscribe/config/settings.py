from dataclasses import dataclass, field
from typing import Optional
import os

APP_NAME = "git_subscribe"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_data_dir() -> str:
    """Per-user data directory, following the XDG base directory layout."""
    base = os.environ.get("XDG_DATA_HOME") or os.path.expanduser("~/.local/share")
    return os.path.join(base, APP_NAME)


def default_config_path() -> str:
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")
    return os.path.join(base, APP_NAME, "config.json")


@dataclass
class Settings:
    """Application settings with default values."""

    data_dir: str = field(default_factory=default_data_dir)
    data_file_name: str = "data.json"
    log_file: Optional[str] = None  # Defaults to a file next to the registry
    log_level: str = "WARNING"
    path_column_width: int = 30

    @property
    def data_file(self) -> str:
        """Location of the persisted registry."""
        return os.path.join(os.path.expanduser(self.data_dir), self.data_file_name)

    @property
    def log_path(self) -> str:
        if self.log_file:
            return os.path.expanduser(self.log_file)
        return os.path.join(os.path.expanduser(self.data_dir), f"{APP_NAME}.log")
