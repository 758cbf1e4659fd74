"""Search for self-descriptive numbers in a given base.

This package exposes the public API surface via:

- ``selfdesc.engine.enumerator.enumerate_exhaustive``: complete counting-order walk.
- ``selfdesc.engine.heuristic.search_heuristic``: randomised local-repair search.
- ``selfdesc.engine.solver.solve_cp_sat``: exact CP-SAT model.
- ``selfdesc.engine.finder.SolutionFinder``: strategy selection for one base.
"""

from .engine.enumerator import enumerate_exhaustive, estimate_progress
from .engine.finder import SearchConfig, SolutionFinder, find_solutions_autoselect
from .engine.heuristic import search_heuristic
from .engine.solver import solve_cp_sat
from .engine.validator import is_valid, violating_positions
from .utils.pretty import format_number

__all__ = [
    "enumerate_exhaustive",
    "estimate_progress",
    "SearchConfig",
    "SolutionFinder",
    "find_solutions_autoselect",
    "search_heuristic",
    "solve_cp_sat",
    "is_valid",
    "violating_positions",
    "format_number",
]

__version__ = "0.1.0"
