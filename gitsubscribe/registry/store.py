"""Load and save the registry of tracked repositories.

The whole registry is read and rewritten on every invocation. There is no
locking: two invocations running at the same time race and the last writer
wins.
"""

import json
import logging
import os

from .models import Registry
from ..errors import (
    SerializationError,
    StoreFormatError,
    StorePermissionError,
    StoreReadError,
    StoreWriteError,
)

logger = logging.getLogger(__name__)


class RegistryStore:
    """Reads and writes the registry file at a fixed location."""

    def __init__(self, data_file: str):
        self.data_file = os.fspath(data_file)

    def load(self) -> Registry:
        """Load the registry from disk.

        Returns:
            The stored registry, or an empty one when no file exists yet.
            Nothing is created on disk.

        Raises:
            StorePermissionError: the file cannot be opened for reading.
            StoreFormatError: the contents are not a valid registry.
            StoreReadError: any other I/O failure.
        """
        logger.debug(f"Loading registry from {self.data_file}")
        try:
            with open(self.data_file, "rb") as f:
                raw = f.read()
        except FileNotFoundError:
            logger.debug("No registry file yet, starting empty")
            return Registry()
        except PermissionError as e:
            raise StorePermissionError(
                f"unable to open registry file {self.data_file}", path=self.data_file
            ) from e
        except OSError as e:
            raise StoreReadError(
                f"error reading registry file {self.data_file}: {e}",
                path=self.data_file,
            ) from e

        try:
            registry = Registry.from_dict(json.loads(raw.decode("utf-8")))
        except (UnicodeDecodeError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise StoreFormatError(
                f"error reading registry file {self.data_file}: {_describe(e)}",
                path=self.data_file,
            ) from e

        logger.debug(f"Loaded {len(registry)} tracked repositories")
        return registry

    def save(self, registry: Registry) -> None:
        """Overwrite the registry file with the full registry.

        The document is serialized before the file is opened, so a
        serialization failure leaves the previous file untouched.
        """
        try:
            document = json.dumps(registry.to_dict(), indent=2) + "\n"
        except (TypeError, ValueError, AttributeError) as e:
            raise SerializationError(
                f"registry could not be serialized: {e}", path=self.data_file
            ) from e

        try:
            parent = os.path.dirname(self.data_file)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.data_file, "w", encoding="utf-8") as f:
                f.write(document)
        except OSError as e:
            if isinstance(e, PermissionError):
                raise StorePermissionError(
                    f"unable to write registry file {self.data_file}",
                    path=self.data_file,
                ) from e
            raise StoreWriteError(
                f"unexpected error writing to {self.data_file}: {e.strerror or e}",
                path=self.data_file,
            ) from e

        logger.info(f"Saved {len(registry)} tracked repositories to {self.data_file}")


def _describe(error: Exception) -> str:
    if isinstance(error, KeyError):
        return f"missing field {error}"
    return str(error)
