import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from ..config.settings import Settings

LOGGER_NAME = "gitsubscribe"

LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3


class LogManager:
    """Configures the package logger: full detail to a file, the rest to stderr.

    An unwritable log file only costs the file output; commands still run.
    """

    def __init__(self, settings: Settings):
        self.LOG_FILE = settings.log_path
        self.level = getattr(logging, settings.log_level)
        self._configure_logger()

    def _configure_logger(self):
        """Configure the logger with proper formatting."""
        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(logging.DEBUG)

        # Remove any existing handlers
        if self.logger.hasHandlers():
            for handler in list(self.logger.handlers):
                handler.close()
            self.logger.handlers.clear()

        console_handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
        )
        console_handler.setLevel(self.level)
        self.logger.addHandler(console_handler)

        file_handler = self._open_log_file()
        if file_handler is not None:
            self.logger.addHandler(file_handler)

    def _open_log_file(self) -> Optional[logging.Handler]:
        try:
            os.makedirs(os.path.dirname(self.LOG_FILE), exist_ok=True)
            file_handler = RotatingFileHandler(
                self.LOG_FILE, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
            )
        except OSError as e:
            self.logger.warning(
                f"Unable to open log file {self.LOG_FILE}: {e.strerror or e}"
            )
            return None

        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        )
        return file_handler

    def close(self):
        """Detach and close every handler installed by this manager."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
