"""Data models shared by the search strategies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .constants import FAILED_STEPS, Strategy
from ..utils.pretty import format_number

# Fixed-length buffer of digits, owned by one search call at a time.
DigitSequence = List[int]


def new_sequence(base: int) -> DigitSequence:
    """Return a zero-initialised digit sequence of length ``base``."""

    return [0] * base


@dataclass
class HeuristicResult:
    """Outcome of one heuristic repair search."""

    steps: int
    digits: DigitSequence = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.steps != FAILED_STEPS

    @property
    def number(self) -> Optional[str]:
        if not self.ok:
            return None
        return format_number(self.digits)


@dataclass
class SearchResult:
    """Solutions found for one base by one strategy."""

    base: int
    strategy: Strategy
    solutions: List[str] = field(default_factory=list)
    steps: Optional[int] = None
    elapsed: float = 0.0

    @property
    def found(self) -> bool:
        return bool(self.solutions)
