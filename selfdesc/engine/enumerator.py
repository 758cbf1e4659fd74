"""Exhaustive counting-order enumeration of digit sequences.

The walk starts at all zeros and increments the rightmost digit, carrying to
the left whenever a digit wraps past ``base - 1``. It visits every one of the
``base ** base`` sequences exactly once and ends when the carry falls off the
leftmost position.
"""

from __future__ import annotations

from typing import Callable, Iterator, MutableSequence, Optional, Sequence

from ..core.constants import PROGRESS_INTERVAL
from ..core.models import new_sequence
from ..utils.logger import get_logger
from ..utils.pretty import format_number
from .validator import is_valid


LOGGER = get_logger(__name__)

ProgressCallback = Callable[[float], None]


def increment_digits(digits: MutableSequence[int]) -> bool:
    """Advance ``digits`` by one in counting order.

    Returns ``True`` when the increment overflowed past the leftmost position
    (the sequence has wrapped back to all zeros). An empty sequence always
    overflows.
    """

    if not digits:
        return True
    max_digit = len(digits) - 1
    pos = len(digits) - 1
    while pos >= 0:
        value = digits[pos] + 1
        if value <= max_digit:
            digits[pos] = value
            return False
        digits[pos] = 0
        pos -= 1
    return True


def estimate_progress(digits: Sequence[int]) -> float:
    """Fraction of the counting-order walk already passed, in ``[0, 1)``.

    Position ``i`` (counted from the left) contributes
    ``digits[i] / (n * n ** i)``.
    """

    length = len(digits)
    progress = 0.0
    for index, value in enumerate(digits):
        progress += value / length / length ** index
    return progress


def estimate_remaining(elapsed: float, fraction: float) -> Optional[float]:
    """Project the remaining seconds from ``elapsed`` and the progress fraction."""

    if fraction <= 0:
        return None
    return elapsed * (1 - fraction) / fraction


def enumerate_exhaustive(
    base: int,
    on_progress: Optional[ProgressCallback] = None,
    progress_interval: int = PROGRESS_INTERVAL,
) -> Iterator[str]:
    """Yield every self-descriptive number of ``base`` in counting order.

    Args:
        base: Number of digits and radix of each digit.
        on_progress: Called inline with :func:`estimate_progress` once every
            ``progress_interval`` visited sequences.
        progress_interval: Visits between two progress callbacks.

    Each call walks a fresh buffer; the generator is single pass.
    """

    digits = new_sequence(base)
    visited = 0
    found = 0
    LOGGER.debug("Exhaustive walk over %d^%d sequences", base, base)

    while True:
        if is_valid(digits):
            found += 1
            yield format_number(digits)

        if on_progress is not None:
            visited += 1
            if visited >= progress_interval:
                visited = 0
                on_progress(estimate_progress(digits))

        if increment_digits(digits):
            break

    LOGGER.debug("Exhaustive walk for base %d finished with %d solution(s)", base, found)
