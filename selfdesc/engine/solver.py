"""Exact CP-SAT model for self-descriptive numbers using OR-Tools."""

from __future__ import annotations

from typing import List, Optional

from ortools.sat.python import cp_model

from ..core.constants import CP_SAT_TIMEOUT_SECONDS
from ..core.exceptions import SolverError
from ..utils.logger import get_logger
from ..utils.pretty import format_number

LOGGER = get_logger(__name__)


class _SolutionCollector(cp_model.CpSolverSolutionCallback):
    """Records every solution reported by the solver, up to ``limit``."""

    def __init__(self, digit_vars: List[cp_model.IntVar], limit: Optional[int]) -> None:
        super().__init__()
        self._digit_vars = digit_vars
        self._limit = limit
        self.solutions: List[List[int]] = []

    def on_solution_callback(self) -> None:
        self.solutions.append([self.value(var) for var in self._digit_vars])
        if self._limit is not None and len(self.solutions) >= self._limit:
            self.stop_search()


def build_model(base: int):
    """Return ``(model, digit_vars)`` encoding the self-descriptive rule."""

    model = cp_model.CpModel()

    # ------------------------------------------------------------------
    # Step 1: One digit variable per position
    # ------------------------------------------------------------------
    digit_vars = [model.new_int_var(0, base - 1, f"d_{i}") for i in range(base)]

    # ------------------------------------------------------------------
    # Step 2: occurs[i][j] <=> digit j holds value i
    # ------------------------------------------------------------------
    for i in range(base):
        occurs = []
        for j, var in enumerate(digit_vars):
            b = model.new_bool_var(f"o_{i}_{j}")
            model.add(var == i).only_enforce_if(b)
            model.add(var != i).only_enforce_if(~b)
            occurs.append(b)
        # Digit i counts the occurrences of value i.
        model.add(digit_vars[i] == sum(occurs))

    # ------------------------------------------------------------------
    # Step 3: Redundant constraint, the counts cover every position once
    # ------------------------------------------------------------------
    model.add(sum(digit_vars) == base)

    return model, digit_vars


def solve_cp_sat(
    base: int,
    timeout: float = CP_SAT_TIMEOUT_SECONDS,
    limit: Optional[int] = None,
) -> List[str]:
    """Enumerate self-descriptive numbers of ``base`` via CP-SAT.

    Args:
        base: Number of digits and radix of each digit.
        timeout: Solver time limit in seconds.
        limit: Stop after this many solutions; ``None`` enumerates all.

    Returns:
        Formatted solutions in counting order. When the time limit hits
        before the search completes, the solutions found so far.
    """
    if base <= 0:
        # No variables to model; the empty sequence is vacuously self-descriptive.
        return [format_number([])]

    model, digit_vars = build_model(base)

    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.enumerate_all_solutions = True
    solver.parameters.num_workers = 1

    collector = _SolutionCollector(digit_vars, limit)

    LOGGER.info("CP-SAT: base %d, %d digit vars, solving (timeout=%0.1fs)...", base, base, timeout)

    status = solver.solve(model, collector)

    if status == cp_model.MODEL_INVALID:
        raise SolverError(f"CP-SAT rejected the model for base {base}")
    stopped_at_limit = limit is not None and len(collector.solutions) >= limit
    if status not in (cp_model.OPTIMAL, cp_model.INFEASIBLE) and not stopped_at_limit:
        LOGGER.warning(
            "CP-SAT: search for base %d incomplete after %.2fs (%d solution(s) so far)",
            base, solver.wall_time, len(collector.solutions),
        )
    else:
        LOGGER.info(
            "CP-SAT: %d solution(s) in %.2fs (status=%s)",
            len(collector.solutions), solver.wall_time, solver.status_name(status),
        )

    return [format_number(digits) for digits in sorted(collector.solutions)]
