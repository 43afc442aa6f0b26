from typing import List, Optional

from rich.console import Console
from rich.text import Text

from ..registry.models import TrackedRepo
from ..registry.operations import ListedRepo, RemoveOutcome
from ..utils import format_duration

PATH_STYLE = "cyan"
DURATION_STYLE = "dim"
INFO_STYLE = "yellow"


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


def format_listed_repo(listed: ListedRepo, width: int = 30) -> Text:
    """Render one entry as ``<path padded to width> | <time since fetch>``."""
    text = Text()
    text.append(f"{listed.repo.path:<{width}}", style=PATH_STYLE)
    text.append(" | ")
    text.append(format_duration(listed.since_fetch), style=DURATION_STYLE)
    return text


def print_repo_list(
    listed: List[ListedRepo], width: int = 30, console: Optional[Console] = None
) -> None:
    console = console or _console()
    if not listed:
        console.print(Text("no tracked repositories", style=INFO_STYLE))
        return
    for entry in listed:
        console.print(format_listed_repo(entry, width))


def print_added(repo: TrackedRepo, console: Optional[Console] = None) -> None:
    console = console or _console()
    text = Text("tracking ")
    text.append(repo.path, style=PATH_STYLE)
    console.print(text)


def print_removed(outcome: RemoveOutcome, console: Optional[Console] = None) -> None:
    console = console or _console()
    if outcome.removed is None:
        console.print(
            Text(
                f"there were no tracked repositories at {outcome.target}",
                style=INFO_STYLE,
            )
        )
        return
    text = Text("no longer tracking ")
    text.append(outcome.removed.path, style=PATH_STYLE)
    console.print(text)
