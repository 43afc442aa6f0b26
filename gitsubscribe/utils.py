from datetime import timedelta
from typing import List

# Unit lengths in nanoseconds, largest first. A year is 365.25 days and a
# month 30.44 days, as in the humantime crate.
_DURATION_UNITS = [
    ("year", 31_557_600 * 10**9, True),
    ("month", 2_630_016 * 10**9, True),
    ("day", 86_400 * 10**9, True),
    ("h", 3_600 * 10**9, False),
    ("m", 60 * 10**9, False),
    ("s", 10**9, False),
    ("ms", 10**6, False),
    ("us", 10**3, False),
    ("ns", 1, False),
]


def format_duration(duration: timedelta) -> str:
    """Format a duration the way humantime does, e.g. ``"2days 3h 5m 1s"``.

    Negative durations are treated as zero.
    """
    remaining = (
        (duration.days * 86_400 + duration.seconds) * 10**9
        + duration.microseconds * 10**3
    )
    if remaining <= 0:
        return "0s"

    parts: List[str] = []
    for name, size, pluralize in _DURATION_UNITS:
        count, remaining = divmod(remaining, size)
        if not count:
            continue
        if pluralize:
            parts.append(f"{count}{name}{'s' if count != 1 else ''}")
        else:
            parts.append(f"{count}{name}")
    return " ".join(parts)
