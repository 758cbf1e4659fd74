import unittest

from selfdesc.engine.enumerator import enumerate_exhaustive
from selfdesc.engine.solver import build_model, solve_cp_sat


class CpSatSolverTests(unittest.TestCase):
    def test_base_four(self) -> None:
        self.assertEqual(solve_cp_sat(4), ["1210", "2020"])

    def test_base_five(self) -> None:
        self.assertEqual(solve_cp_sat(5), ["21200"])

    def test_agrees_with_exhaustive_walk(self) -> None:
        for base in range(1, 7):
            self.assertEqual(solve_cp_sat(base), list(enumerate_exhaustive(base)), base)

    def test_large_base_has_unique_solution(self) -> None:
        self.assertEqual(solve_cp_sat(7), ["3211000"])
        self.assertEqual(solve_cp_sat(10), ["6210001000"])

    def test_limit_stops_enumeration(self) -> None:
        solutions = solve_cp_sat(4, limit=1)
        self.assertEqual(len(solutions), 1)
        self.assertIn(solutions[0], {"1210", "2020"})

    def test_empty_base_matches_walk(self) -> None:
        self.assertEqual(solve_cp_sat(0), [""])
        self.assertEqual(solve_cp_sat(0), list(enumerate_exhaustive(0)))

    def test_model_has_one_variable_per_digit(self) -> None:
        _, digit_vars = build_model(6)
        self.assertEqual(len(digit_vars), 6)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
