"""Search orchestration: picks a strategy for a base and runs it.

Exhaustive enumeration is complete but costs ``base ** base`` checks, so the
automatic policy hands larger bases to the heuristic repair search.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import List, Optional

from ..core.constants import (CP_SAT_TIMEOUT_SECONDS, DEFAULT_MAX_STEPS,
                              HEURISTIC_BASE_THRESHOLD, MAX_BASE, MIN_BASE,
                              PROGRESS_INTERVAL, Strategy)
from ..core.exceptions import InvalidBaseError
from ..core.models import HeuristicResult, SearchResult
from ..utils.logger import get_logger
from .enumerator import ProgressCallback, enumerate_exhaustive
from .heuristic import search_heuristic
from .solver import solve_cp_sat


LOGGER = get_logger(__name__)


@dataclass
class SearchConfig:
    base: int
    strategy: Strategy = Strategy.AUTO
    seed: Optional[int] = None
    max_steps: int = DEFAULT_MAX_STEPS
    heuristic_threshold: int = HEURISTIC_BASE_THRESHOLD
    progress_interval: int = PROGRESS_INTERVAL
    cp_sat_timeout: float = CP_SAT_TIMEOUT_SECONDS
    min_base: int = MIN_BASE
    max_base: int = MAX_BASE

    def validate(self) -> None:
        if not self.min_base <= self.base <= self.max_base:
            raise InvalidBaseError(
                f"Base {self.base} outside supported range {self.min_base}-{self.max_base}"
            )

    def resolve_strategy(self) -> Strategy:
        if self.strategy != Strategy.AUTO:
            return self.strategy
        if self.base < self.heuristic_threshold:
            return Strategy.EXHAUSTIVE
        return Strategy.HEURISTIC


def find_solutions_autoselect(
    base: int,
    rng: Optional[random.Random] = None,
    heuristic_threshold: int = HEURISTIC_BASE_THRESHOLD,
) -> List[str]:
    """Return solutions for ``base``: all of them below the threshold, at most one above."""

    if base < heuristic_threshold:
        return list(enumerate_exhaustive(base))
    result = search_heuristic(base, rng=rng or random.Random())
    return [result.number] if result.ok else []


class SolutionFinder:
    """Runs one configured search; owns the random generator for its calls."""

    def __init__(
        self,
        config: SearchConfig,
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        config.validate()
        self.config = config
        self.on_progress = on_progress
        self.rng = random.Random(config.seed)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def find(self) -> SearchResult:
        strategy = self.config.resolve_strategy()
        LOGGER.info("Searching base %d with %s strategy", self.config.base, strategy.value)
        started = time.perf_counter()

        if strategy == Strategy.EXHAUSTIVE:
            result = SearchResult(self.config.base, strategy, self.find_all())
        elif strategy == Strategy.CP_SAT:
            result = SearchResult(self.config.base, strategy, self.solve_exact())
        else:
            outcome = self.quick_solve()
            solutions = [outcome.number] if outcome.ok else []
            result = SearchResult(self.config.base, strategy, solutions, steps=outcome.steps)

        result.elapsed = time.perf_counter() - started
        LOGGER.info(
            "Base %d: %d solution(s) in %.2fs",
            self.config.base, len(result.solutions), result.elapsed,
        )
        return result

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------
    def find_all(self) -> List[str]:
        return list(
            enumerate_exhaustive(
                self.config.base,
                on_progress=self.on_progress,
                progress_interval=self.config.progress_interval,
            )
        )

    def quick_solve(self) -> HeuristicResult:
        result = search_heuristic(self.config.base, self.config.max_steps, self.rng)
        if not result.ok:
            LOGGER.warning(
                "Heuristic search for base %d exhausted %d steps",
                self.config.base, self.config.max_steps,
            )
        return result

    def solve_exact(self) -> List[str]:
        return solve_cp_sat(self.config.base, timeout=self.config.cp_sat_timeout)
