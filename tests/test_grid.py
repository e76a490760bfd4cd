import unittest

from crossword_engine.core.constants import BLACK, Direction
from crossword_engine.core.models import Placement
from crossword_engine.engine.grid import CrosswordGrid, GridConfig


class GridConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        grid = CrosswordGrid()
        self.assertEqual((grid.bounds.rows, grid.bounds.cols), (18, 18))
        self.assertEqual(grid.bounds.center, (9, 9))
        self.assertEqual(grid.letter_count(), 0)

    def test_rejects_non_positive_dimensions(self) -> None:
        with self.assertRaises(ValueError):
            GridConfig(rows=0, cols=5)
        with self.assertRaises(ValueError):
            GridConfig(rows=5, cols=-1)


class GridTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = CrosswordGrid(GridConfig(rows=6, cols=8))

    def test_fits_checks_both_ends(self) -> None:
        self.assertTrue(self.grid.fits(8, 0, 0, Direction.ACROSS.step))
        self.assertFalse(self.grid.fits(9, 0, 0, Direction.ACROSS.step))
        self.assertTrue(self.grid.fits(6, 0, 7, Direction.DOWN.step))
        self.assertFalse(self.grid.fits(2, 5, 0, Direction.DOWN.step))
        self.assertFalse(self.grid.fits(1, 6, 0, Direction.DOWN.step))

    def test_is_open_treats_outside_as_black(self) -> None:
        self.assertTrue(self.grid.is_open(-1, 0))
        self.assertTrue(self.grid.is_open(0, 8))
        self.assertTrue(self.grid.is_open(0, 0))
        self.grid.apply_placement(Placement("HEAP", 0, 0, Direction.ACROSS))
        self.assertFalse(self.grid.is_open(0, 0))

    def test_apply_reports_overwritten_letters(self) -> None:
        self.assertEqual(self.grid.apply_placement(Placement("HEAP", 1, 1, Direction.ACROSS)), [])
        with self.assertLogs("crossword_engine.engine.grid", level="WARNING"):
            conflicts = self.grid.apply_placement(Placement("TREE", 1, 1, Direction.DOWN))
        self.assertEqual(conflicts, [(1, 1)])
        self.assertEqual(self.grid.cell(1, 1), "T")

    def test_remove_keeps_cells_covered_by_remaining_words(self) -> None:
        heap = Placement("HEAP", 1, 1, Direction.ACROSS)
        peer = Placement("PEER", 1, 4, Direction.DOWN)
        self.grid.apply_placement(heap)
        self.grid.apply_placement(peer)
        self.grid.remove_placement(peer, [heap])
        self.assertEqual(self.grid.cell(1, 4), "P")
        self.assertEqual(self.grid.cell(2, 4), BLACK)
        self.grid.remove_placement(heap, [])
        self.assertEqual(self.grid.letter_count(), 0)

    def test_snapshot_and_lines(self) -> None:
        self.grid.apply_placement(Placement("HEAP", 0, 2, Direction.ACROSS))
        self.assertEqual(self.grid.to_lines()[0], "##HEAP##")
        self.assertEqual(self.grid.snapshot()[0], "##HEAP##")
        self.grid.clear()
        self.assertEqual(set(self.grid.snapshot()), {"#" * 8})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
