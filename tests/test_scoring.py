import unittest

from crossword_engine.core.constants import Direction
from crossword_engine.core.models import Placement
from crossword_engine.engine.grid import CrosswordGrid, GridConfig
from crossword_engine.engine.scoring import score_placement


class ScorePlacementTests(unittest.TestCase):
    def test_centrality_length_and_vowels_on_empty_grid(self) -> None:
        grid = CrosswordGrid()
        # 20 centrality + 8 length + 6 for two vowels
        self.assertEqual(score_placement("TREE", 9, 9, Direction.ACROSS, grid, []), 34)
        self.assertEqual(score_placement("TREE", 0, 0, Direction.ACROSS, grid, []), 16)
        self.assertEqual(score_placement("TREE", 14, 17, Direction.DOWN, grid, []), 21)

    def test_centrality_never_goes_negative(self) -> None:
        grid = CrosswordGrid(GridConfig(rows=60, cols=60))
        self.assertEqual(score_placement("TREE", 0, 0, Direction.ACROSS, grid, []), 14)

    def test_intersection_and_balance_bonus(self) -> None:
        stack = Placement("STACK", 9, 9, Direction.ACROSS)
        grid = CrosswordGrid()
        grid.apply_placement(stack)
        # 10 intersection + 19 centrality + 8 length + 6 vowels + 5 balance
        self.assertEqual(score_placement("TREE", 9, 10, Direction.DOWN, grid, [stack]), 48)
        # no intersection, no bonus for the over-represented direction
        self.assertEqual(score_placement("TREE", 11, 9, Direction.ACROSS, grid, [stack]), 32)

    def test_no_bonus_when_directions_are_balanced(self) -> None:
        placed = [
            Placement("STACK", 9, 9, Direction.ACROSS),
            Placement("TREE", 9, 10, Direction.DOWN),
        ]
        grid = CrosswordGrid()
        for placement in placed:
            grid.apply_placement(placement)
        self.assertEqual(score_placement("HEAP", 0, 0, Direction.DOWN, grid, placed), 2 + 8 + 6)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
