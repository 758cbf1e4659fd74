"""Pretty-print helpers for digit sequences and search progress."""

from __future__ import annotations

import sys
import time
from typing import Callable, Iterable, Optional, Sequence

from ..core.constants import DIGIT_ALPHABET, PROGRESS_REFRESH_SECONDS, UNKNOWN_DIGIT

RemainingProjection = Callable[[float, float], Optional[float]]


def format_digit(value: int) -> str:
    """Render one digit value; values without a symbol degrade to ``?``."""

    if 0 <= value < len(DIGIT_ALPHABET):
        return DIGIT_ALPHABET[value]
    return UNKNOWN_DIGIT


def format_number(digits: Iterable[int]) -> str:
    return "".join(format_digit(value) for value in digits)


def format_timespan(seconds: float) -> str:
    """Render a duration as e.g. ``2d 03h``, ``1h 05m``, ``4m 09s`` or ``12s``."""

    total = max(0, int(round(seconds)))
    days, rest = divmod(total, 86_400)
    hours, rest = divmod(rest, 3_600)
    minutes, secs = divmod(rest, 60)
    if days:
        return f"{days}d {hours:02d}h"
    if hours:
        return f"{hours}h {minutes:02d}m"
    if minutes:
        return f"{minutes}m {secs:02d}s"
    return f"{secs}s"


def format_solutions(solutions: Sequence[str]) -> str:
    return ", ".join(solutions) if solutions else "None"


class ProgressPrinter:
    """Progress callback that prints at most once per refresh interval.

    ``project_remaining(elapsed, fraction)`` turns the elapsed seconds and the
    fraction of the search space already walked into the remaining seconds,
    or ``None`` when no projection is possible yet.
    """

    def __init__(
        self,
        project_remaining: RemainingProjection,
        refresh_seconds: float = PROGRESS_REFRESH_SECONDS,
        *,
        stream=None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.project_remaining = project_remaining
        self.refresh_seconds = refresh_seconds
        self.stream = stream or sys.stdout
        self.clock = clock
        self.start = clock()
        self._last_print: Optional[float] = None

    def __call__(self, fraction: float) -> None:
        now = self.clock()
        if self._last_print is not None and now - self._last_print < self.refresh_seconds:
            return
        self._last_print = now
        remaining = self.project_remaining(now - self.start, fraction)
        eta = format_timespan(remaining) if remaining is not None else "unknown"
        line = f"   Progress: {fraction * 100:6.2f}% (EST: {eta})"
        print(line, file=self.stream)
