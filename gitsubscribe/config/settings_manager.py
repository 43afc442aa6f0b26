import os
import json
import logging
from dataclasses import fields
from typing import Dict, Optional

from .settings import Settings, LOG_LEVELS, default_config_path
from ..errors import ConfigError

logger = logging.getLogger(__name__)

# Environment variables take precedence over the config file
ENV_OVERRIDES = {
    "GIT_SUBSCRIBE_DATA_DIR": "data_dir",
    "GIT_SUBSCRIBE_LOG_FILE": "log_file",
    "GIT_SUBSCRIBE_LOG_LEVEL": "log_level",
}


class SettingsManager:
    """Builds the settings for one run from defaults, config file and environment."""

    def __init__(self, config_path: Optional[str] = None, environ=None):
        self.environ = os.environ if environ is None else environ
        self.config_path = (
            config_path
            or self.environ.get("GIT_SUBSCRIBE_CONFIG")
            or default_config_path()
        )
        self.settings = Settings()  # Start with defaults from Settings class
        self.load_settings()

    def load_settings(self) -> None:
        """Load settings from file and environment, overriding defaults where specified."""
        config_data = self._read_config_file()

        known = {f.name for f in fields(Settings)}
        for key, value in config_data.items():
            if key not in known:
                logger.warning(f"Ignoring unknown setting '{key}' in {self.config_path}")
                continue
            setattr(self.settings, key, value)

        for env_name, key in ENV_OVERRIDES.items():
            value = self.environ.get(env_name)
            if value:
                setattr(self.settings, key, value)

        for key in ("data_dir", "data_file_name"):
            value = getattr(self.settings, key)
            if not isinstance(value, str) or not value:
                raise ConfigError(
                    f"{key} must be a non-empty string, got {value!r}",
                    path=self.config_path,
                )

        if self.settings.log_file is not None and (
            not isinstance(self.settings.log_file, str) or not self.settings.log_file
        ):
            raise ConfigError(
                f"log_file must be a non-empty string, got {self.settings.log_file!r}",
                path=self.config_path,
            )

        if not isinstance(self.settings.log_level, str):
            raise ConfigError(
                f"log_level must be a string, got {self.settings.log_level!r}",
                path=self.config_path,
            )
        self.settings.log_level = self.settings.log_level.upper()
        if self.settings.log_level not in LOG_LEVELS:
            raise ConfigError(
                f"Unknown log level '{self.settings.log_level}' "
                f"(valid: {', '.join(LOG_LEVELS)})",
                path=self.config_path,
            )

        width = self.settings.path_column_width
        if isinstance(width, bool) or not isinstance(width, int) or width < 0:
            raise ConfigError(
                f"path_column_width must be a non-negative integer, got {width!r}",
                path=self.config_path,
            )

    def _read_config_file(self) -> Dict:
        if not os.path.exists(self.config_path):
            return {}

        try:
            with open(self.config_path, "r") as f:
                config_data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid config file {self.config_path}: {e}", path=self.config_path
            ) from e
        except OSError as e:
            raise ConfigError(
                f"Unable to read config file {self.config_path}: {e.strerror}",
                path=self.config_path,
            ) from e

        if not isinstance(config_data, dict):
            raise ConfigError(
                f"Invalid config file {self.config_path}: expected a JSON object",
                path=self.config_path,
            )

        logger.debug(f"Settings loaded from {self.config_path}")
        return config_data
