"""Registry module: load, save, list, add and remove tracked repositories."""

from .models import Registry, TrackedRepo
from .operations import add_repo, list_repos, remove_repo
from .store import RegistryStore

__all__ = [
    "Registry",
    "TrackedRepo",
    "RegistryStore",
    "list_repos",
    "add_repo",
    "remove_repo",
]
