"""Randomised local-repair search for self-descriptive numbers.

Starting from all zeros, each step picks one violating position at random and
rewrites it with the number of positions currently holding that position's
index. When the rewrite would not change anything the search is stuck in a
cycle, so a uniformly random digit is written instead.

The search is incomplete: it may miss an existing solution within its step
budget, and different random draws give different outcomes.
"""

from __future__ import annotations

import random
from typing import MutableSequence, Optional

from ..core.constants import DEFAULT_MAX_STEPS, FAILED_STEPS
from ..core.models import HeuristicResult, new_sequence
from ..utils.logger import get_logger
from .validator import is_valid, violating_positions


LOGGER = get_logger(__name__)


def repair_step(digits: MutableSequence[int], rng: random.Random) -> bool:
    """Repair one random violation in place.

    Returns ``False`` when there was nothing to repair.
    """

    violations = list(violating_positions(digits))
    if not violations:
        return False

    position = violations[rng.randrange(len(violations))]
    candidate = sum(1 for value in digits if value == position)
    if candidate == digits[position]:
        candidate = rng.randrange(len(digits))
    digits[position] = candidate
    return True


def search_heuristic(
    base: int,
    max_steps: int = DEFAULT_MAX_STEPS,
    rng: Optional[random.Random] = None,
) -> HeuristicResult:
    """Search one self-descriptive number of ``base`` by iterative repair.

    ``rng`` is used for every random draw of this call; pass a seeded
    :class:`random.Random` for reproducible runs. Failure is reported as
    ``steps == -1``.
    """

    rng = rng or random.Random()
    digits = new_sequence(base)
    steps = 0
    while steps < max_steps:
        if not repair_step(digits, rng):
            break
        steps += 1

    if not is_valid(digits):
        LOGGER.debug("Heuristic search for base %d gave up after %d steps", base, steps)
        return HeuristicResult(steps=FAILED_STEPS, digits=digits)

    LOGGER.debug("Heuristic search for base %d converged in %d steps", base, steps)
    return HeuristicResult(steps=steps, digits=digits)
