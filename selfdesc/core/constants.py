"""Shared constants and enumerations for the self-descriptive number search."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class Strategy(str, Enum):
    """Search strategies understood by the finder."""

    AUTO = "AUTO"
    EXHAUSTIVE = "EXHAUSTIVE"
    HEURISTIC = "HEURISTIC"
    CP_SAT = "CP_SAT"


DIGIT_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
UNKNOWN_DIGIT = "?"

FAILED_STEPS = -1
DEFAULT_MAX_STEPS = 10_000
PROGRESS_INTERVAL = 100_000

# Exhaustive search is too slow from this base upwards.
HEURISTIC_BASE_THRESHOLD = 8

MIN_BASE = 2
MAX_BASE = 39
DEMO_BASES: Tuple[int, int] = (MIN_BASE, MAX_BASE)

PROGRESS_REFRESH_SECONDS = 2.0
CP_SAT_TIMEOUT_SECONDS = 30.0
