#!/usr/bin/env python3
"""
git-subscribe - keep a list of local git repositories

Usage:
    git-subscribe list
    git-subscribe add [<path>]
    git-subscribe remove [<path>]
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from .config.settings_manager import SettingsManager
from .errors import GitSubscribeError
from .git_tasks.log_manager import LogManager
from .registry.operations import add_repo, list_repos, remove_repo
from .registry.store import RegistryStore
from .ui.repo_list import print_added, print_removed, print_repo_list

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-subscribe",
        description="Keep track of local git repositories",
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("list", help="list out the tracked repositories")

    add = sub.add_parser("add", help="start tracking a repository")
    add.add_argument("repo", nargs="?", default=None, help="defaults to the current directory")

    remove = sub.add_parser("remove", help="stop tracking a repository")
    remove.add_argument("repo", nargs="?", default=None, help="defaults to the current directory")

    return parser


def cmd_list(args: argparse.Namespace, store: RegistryStore, width: int) -> int:
    print_repo_list(list_repos(store), width=width)
    return 0


def cmd_add(args: argparse.Namespace, store: RegistryStore, width: int) -> int:
    print_added(add_repo(store, args.repo))
    return 0


def cmd_remove(args: argparse.Namespace, store: RegistryStore, width: int) -> int:
    print_removed(remove_repo(store, args.repo))
    return 0


COMMANDS = {
    "list": cmd_list,
    "add": cmd_add,
    "remove": cmd_remove,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Run one command. Every fatal error ends up here as a non-zero status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    log_manager = None
    try:
        settings = SettingsManager().settings
        log_manager = LogManager(settings)
        logger.debug(f"Using registry file {settings.data_file}")

        store = RegistryStore(settings.data_file)
        return COMMANDS[args.command](args, store, settings.path_column_width)
    except GitSubscribeError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        Console(stderr=True, highlight=False, soft_wrap=True).print(
            f"error: {e}", markup=False
        )
        return 1
    finally:
        if log_manager:
            log_manager.close()


if __name__ == "__main__":
    sys.exit(main())
