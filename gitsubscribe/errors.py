from enum import Enum, auto
from typing import Optional


class ErrorKind(Enum):
    """Failure categories surfaced to the command line."""

    PERMISSION = auto()
    FORMAT = auto()
    READ = auto()
    REPOSITORY = auto()
    SERIALIZATION = auto()
    WRITE = auto()
    CONFIG = auto()


class GitSubscribeError(Exception):
    """Base class for every fatal error the CLI reports."""

    kind: ErrorKind

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        match self.kind:
            case ErrorKind.PERMISSION:
                return f"permission denied: {self.message}"
            case ErrorKind.SERIALIZATION:
                return f"internal error: {self.message}"
            case _:
                return self.message


class StorePermissionError(GitSubscribeError):
    kind = ErrorKind.PERMISSION


class StoreFormatError(GitSubscribeError):
    kind = ErrorKind.FORMAT


class StoreReadError(GitSubscribeError):
    kind = ErrorKind.READ


class RepositoryResolutionError(GitSubscribeError):
    kind = ErrorKind.REPOSITORY


class SerializationError(GitSubscribeError):
    kind = ErrorKind.SERIALIZATION


class StoreWriteError(GitSubscribeError):
    kind = ErrorKind.WRITE


class ConfigError(GitSubscribeError):
    kind = ErrorKind.CONFIG
