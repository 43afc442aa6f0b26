from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass
class TrackedRepo:
    """A repository the user asked to keep track of."""

    path: str
    last_fetch: datetime = EPOCH  # Reserved for fetching, never moved past the epoch

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "last_fetch": self.last_fetch.isoformat()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TrackedRepo":
        """Build an entry from its stored form.

        Raises:
            KeyError, TypeError or ValueError when the record is malformed.
        """
        path = data["path"]
        if not isinstance(path, str):
            raise TypeError(f"path must be a string, got {type(path).__name__}")

        last_fetch = datetime.fromisoformat(data["last_fetch"])
        if last_fetch.tzinfo is None:
            last_fetch = last_fetch.replace(tzinfo=timezone.utc)
        return cls(path=path, last_fetch=last_fetch)


@dataclass
class Registry:
    """Ordered collection of tracked repositories, persisted as one unit."""

    tracked_repos: List[TrackedRepo] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"tracked_repos": [repo.to_dict() for repo in self.tracked_repos]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Registry":
        entries = data["tracked_repos"]
        if not isinstance(entries, list):
            raise TypeError("tracked_repos must be a list")
        return cls(tracked_repos=[TrackedRepo.from_dict(entry) for entry in entries])

    def __len__(self) -> int:
        return len(self.tracked_repos)
