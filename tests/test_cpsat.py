import unittest

from crossword_engine.core.constants import Bounds, GenerationMode
from crossword_engine.data.levels import level_words
from crossword_engine.engine.cpsat import solve_layout
from crossword_engine.engine.grid import CrosswordGrid
from crossword_engine.engine.puzzle import CrosswordPuzzle, PuzzleConfig
from crossword_engine.engine.solver import order_by_length
from crossword_engine.engine.validator import GridValidator


class SolveLayoutTests(unittest.TestCase):
    def test_layout_places_words_in_order_and_validates(self) -> None:
        words = ["STACK", "TREE", "HEAP"]
        layout = solve_layout(words, Bounds(18, 18), timeout=20.0, workers=1, seed=0)
        self.assertIsNotNone(layout)
        self.assertEqual([p.word for p in layout], words)

        grid = CrosswordGrid()
        for placement in layout:
            self.assertEqual(grid.apply_placement(placement), [])
        self.assertTrue(GridValidator().validate(grid, layout).ok)

        for index in range(1, len(layout)):
            with self.subTest(word=layout[index].word):
                self.assertTrue(
                    any(
                        earlier.covers_cell(r, c)
                        for earlier in layout[:index]
                        for r, c in layout[index].cells
                    )
                )

    def test_empty_word_list(self) -> None:
        self.assertEqual(solve_layout([], Bounds(18, 18)), [])

    def test_word_longer_than_grid(self) -> None:
        self.assertIsNone(solve_layout(["ABCDEFGHIJKLMNOPQRST"], Bounds(18, 18)))

    def test_words_without_shared_letters_are_infeasible(self) -> None:
        self.assertIsNone(solve_layout(["ABC", "XYZ"], Bounds(5, 5), timeout=20.0, workers=1))


class SolveStatusLoggingTests(unittest.TestCase):
    def test_infeasible_model_is_reported_as_such(self) -> None:
        with self.assertLogs("crossword_engine.engine.cpsat", level="WARNING") as logs:
            self.assertIsNone(solve_layout(["ABC", "XYZ"], Bounds(5, 5), timeout=20.0, workers=1))
        self.assertTrue(any("no layout exists" in line for line in logs.output))

    def test_time_limit_is_reported_as_timeout(self) -> None:
        words = order_by_length(level_words(4))
        with self.assertLogs("crossword_engine.engine.cpsat", level="WARNING") as logs:
            self.assertIsNone(solve_layout(words, Bounds(18, 18), timeout=0.001, workers=1))
        self.assertTrue(any("timed out" in line for line in logs.output))


class CpsatModeTests(unittest.TestCase):
    def test_default_time_limit_covers_the_hard_levels(self) -> None:
        config = PuzzleConfig()
        self.assertGreaterEqual(config.cpsat_timeout_seconds, 60.0)
        self.assertGreaterEqual(config.cpsat_workers, 8)

    def test_puzzle_generation_in_cpsat_mode(self) -> None:
        puzzle = CrosswordPuzzle(PuzzleConfig(cpsat_timeout_seconds=60.0, cpsat_workers=1))
        self.assertTrue(puzzle.generate(level_words(1), GenerationMode.CPSAT, seed=0))
        self.assertEqual(len(puzzle.placements), 4)
        self.assertEqual(puzzle.placements[0].word, "ARRAY")
        self.assertTrue(puzzle.validate().ok)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
