"""The list, add and remove commands, each a single load/mutate/save pass."""

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from .models import EPOCH, TrackedRepo
from .store import RegistryStore
from ..git_tasks.repo_identity import is_same_repository, resolve_repository_root

logger = logging.getLogger(__name__)


@dataclass
class ListedRepo:
    """A tracked repository together with the time since it was last fetched."""

    repo: TrackedRepo
    since_fetch: timedelta


@dataclass
class RemoveOutcome:
    target: str
    removed: Optional[TrackedRepo] = None


def list_repos(store: RegistryStore, now: Optional[datetime] = None) -> List[ListedRepo]:
    """List tracked repositories in registry order.

    Args:
        store: Where the registry lives.
        now: Reference time, defaults to the current UTC time.

    Returns:
        One ListedRepo per entry. A ``last_fetch`` later than ``now`` gives a
        zero duration rather than a negative one.
    """
    registry = store.load()
    now = now or datetime.now(timezone.utc)

    listed = []
    for repo in registry.tracked_repos:
        elapsed = now - repo.last_fetch
        if elapsed < timedelta(0):
            logger.warning(
                f"Last fetch of {repo.path} is in the future ({repo.last_fetch.isoformat()})"
            )
            elapsed = timedelta(0)
        listed.append(ListedRepo(repo=repo, since_fetch=elapsed))
    return listed


def add_repo(store: RegistryStore, path: Optional[str] = None) -> TrackedRepo:
    """Start tracking the repository at ``path`` (default: current directory).

    The same repository can be added more than once; every add appends a new
    entry.
    """
    registry = store.load()

    root = resolve_repository_root(path)
    new_entry = TrackedRepo(path=root, last_fetch=EPOCH)
    registry.tracked_repos.append(new_entry)

    store.save(registry)
    logger.info(f"Now tracking {root}")
    return new_entry


def remove_repo(store: RegistryStore, path: Optional[str] = None) -> RemoveOutcome:
    """Stop tracking the first entry at the same physical location as ``path``.

    Unlike add_repo, the target is not opened as a repository: it is compared
    as given against each tracked path. The registry is saved even when
    nothing matched.
    """
    registry = store.load()
    target = os.fspath(path) if path is not None else os.getcwd()

    outcome = RemoveOutcome(target=target)
    for index, repo in enumerate(registry.tracked_repos):
        if is_same_repository(target, repo.path):
            outcome.removed = registry.tracked_repos.pop(index)
            logger.info(f"Stopped tracking {repo.path}")
            break
    else:
        logger.info(f"There were no tracked repositories at {target}")

    store.save(registry)
    return outcome
