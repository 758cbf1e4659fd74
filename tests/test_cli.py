import io
import unittest
from contextlib import redirect_stderr
from unittest.mock import patch

import main


class CliTests(unittest.TestCase):
    def run_cli(self, *argv: str) -> str:
        stream = io.StringIO()
        main.main(list(argv), stream=stream)
        return stream.getvalue()

    def test_brute_force_lists_solutions(self) -> None:
        output = self.run_cli("--brute-force", "4")
        self.assertIn("====== Test base 4", output)
        self.assertIn("Matching numbers:", output)
        self.assertIn("   1210\n   2020\n", output)

    def test_brute_force_accepts_equals_form(self) -> None:
        output = self.run_cli("--brute-force=5")
        self.assertIn("   21200", output)

    def test_brute_force_without_results(self) -> None:
        output = self.run_cli("--brute-force=3")
        self.assertIn("   No results found.", output)

    def test_quick_solve_failure_message(self) -> None:
        output = self.run_cli("--quick-solve=3", "--max-steps", "50", "--seed", "1")
        self.assertEqual(output.strip(), "No solution for base 3 within 50 step(s)")

    def test_quick_solve_is_reproducible(self) -> None:
        first = self.run_cli("--quick-solve", "12", "--seed", "42")
        second = self.run_cli("--quick-solve", "12", "--seed", "42")
        self.assertEqual(first, second)
        self.assertEqual(first.strip(), "Solution in 21 step(s) for base 12: 821000001000")

    def test_cp_sat_mode(self) -> None:
        output = self.run_cli("--cp-sat", "4")
        self.assertIn("1210, 2020", output)

    def test_rejects_out_of_range_base(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                self.run_cli("--brute-force=1")
            with self.assertRaises(SystemExit):
                self.run_cli("--quick-solve=40")

    def test_rejects_multiple_modes(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                self.run_cli("--brute-force=4", "--quick-solve=4")

    def test_demo_lists_each_base(self) -> None:
        with patch.object(main, "DEMO_BASES", (2, 5)):
            output = self.run_cli()
        self.assertEqual(
            output.splitlines(),
            [
                "Solution(s) for base  2: None",
                "Solution(s) for base  3: None",
                "Solution(s) for base  4: 1210, 2020",
                "Solution(s) for base  5: 21200",
            ],
        )


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
