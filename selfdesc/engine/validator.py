"""Deterministic checks of the self-descriptive rule.

A sequence of length ``n`` is self-descriptive when ``digits[i]`` equals the
number of positions holding ``i`` for every ``i`` in ``[0, n)``. Digits outside
``[0, n)`` can never satisfy the rule and are reported before anything else.
"""

from __future__ import annotations

from typing import Iterator, List, Sequence


def is_valid(digits: Sequence[int]) -> bool:
    """Return ``True`` when ``digits`` is a self-descriptive number.

    Same answer as ``next(violating_positions(digits), None) is None`` but
    roughly twice as fast, which matters inside the exhaustive walk.
    """

    length = len(digits)
    tally: List[int] = [0] * length
    for value in digits:
        if not 0 <= value < length:
            return False
        tally[value] += 1

    for index in range(length):
        if digits[index] != tally[index]:
            return False
    return True


def violating_positions(digits: Sequence[int]) -> Iterator[int]:
    """Yield every position that breaks the self-descriptive rule.

    Out-of-range positions come first in ascending order and are left out of
    the tally. Mismatched in-range positions follow, also ascending. No
    position is yielded twice.
    """

    length = len(digits)
    tally: List[int] = [0] * length
    reported = [False] * length

    for index, value in enumerate(digits):
        if not 0 <= value < length:
            reported[index] = True
            yield index
        else:
            tally[value] += 1

    for index in range(length):
        if not reported[index] and digits[index] != tally[index]:
            yield index
