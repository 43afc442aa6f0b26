import logging
import os
from typing import Optional

from git import Repo, InvalidGitRepositoryError, NoSuchPathError

from ..errors import RepositoryResolutionError

logger = logging.getLogger(__name__)

GIT_DIR_NAME = ".git"


def resolve_repository_root(path: Optional[str] = None) -> str:
    """
    Resolve a location to the working-directory root of the repository there.

    The location has to be either the working tree root or the metadata
    directory itself; parent directories are not searched.

    Args:
        path: Location to open. ``None`` means the current working directory.

    Returns:
        Absolute path of the working-directory root. For a bare repository this
        is the repository directory.

    Raises:
        RepositoryResolutionError: the location does not exist or is not a
            git repository.
    """
    location = os.fspath(path) if path is not None else os.getcwd()

    try:
        with Repo(location) as repo:
            git_dir = repo.git_dir
            working_tree_dir = repo.working_tree_dir
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise RepositoryResolutionError(
            f"Invalid git repository at {location}", path=location
        ) from e
    except OSError as e:
        raise RepositoryResolutionError(
            f"Unable to open git repository at {location}: {e.strerror or e}",
            path=location,
        ) from e

    if working_tree_dir is not None:
        # Linked worktrees and submodules keep their metadata elsewhere
        root = os.path.normpath(os.path.abspath(working_tree_dir))
    else:
        root = os.path.normpath(os.path.abspath(git_dir))
        if os.path.basename(root) == GIT_DIR_NAME:
            root = os.path.dirname(root)

    logger.debug(f"Resolved {location} to repository root {root}")
    return root


def is_same_repository(candidate_path: str, tracked_path: str) -> bool:
    """Check whether both paths name the same file-system object."""
    try:
        return os.path.samefile(candidate_path, tracked_path)
    except OSError:
        return False
