import unittest
from unittest.mock import MagicMock

from crossword_engine.core.constants import BLANK, Direction
from crossword_engine.core.models import Placement
from crossword_engine.data.trie import WordTrie
from crossword_engine.engine.checker import check_words, entered_word, hint_for


def reader(cells: dict):
    return lambda row, col: cells.get((row, col), BLANK)


class HintForTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tree = Placement("TREE", 2, 3, Direction.DOWN)

    def test_trie_is_queried_with_the_hint_prefix(self) -> None:
        trie = MagicMock()
        trie.starts_with.return_value = True
        hint = hint_for(self.tree, reader({(2, 3): "T", (3, 3): "R"}), trie)
        trie.starts_with.assert_called_once_with(hint.entered_prefix)
        self.assertEqual(hint.entered_prefix, "TR")
        self.assertTrue(hint.prefix_valid)

    def test_gap_prefix_is_passed_through_unchanged(self) -> None:
        trie = MagicMock()
        trie.starts_with.return_value = False
        hint = hint_for(self.tree, reader({(2, 3): "T", (4, 3): "E"}), trie)
        trie.starts_with.assert_called_once_with("T_E")
        self.assertFalse(hint.prefix_valid)

    def test_no_input_skips_trie(self) -> None:
        trie = MagicMock()
        hint = hint_for(self.tree, reader({}), trie)
        trie.starts_with.assert_not_called()
        self.assertFalse(hint.has_input)
        self.assertFalse(hint.prefix_valid)


class CheckWordsTests(unittest.TestCase):
    def test_entered_word_uses_placeholder_for_gaps(self) -> None:
        stack = Placement("STACK", 0, 0, Direction.ACROSS)
        self.assertEqual(entered_word(stack, reader({(0, 0): "S", (0, 2): "A"})), "S?A??")

    def test_correct_and_valid_are_counted_independently(self) -> None:
        trie = WordTrie(["STACK", "SORT"])
        stack = Placement("STACK", 0, 0, Direction.ACROSS)
        tree = Placement("TREE", 0, 0, Direction.DOWN)
        cells = {(0, c): ch for c, ch in enumerate("STACK")}
        cells.update({(1, 0): "O", (2, 0): "R", (3, 0): "T"})
        report = check_words([stack, tree], reader(cells), trie)
        self.assertEqual((report.correct_words, report.valid_words), (1, 2))
        self.assertEqual(report.score, 20)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
