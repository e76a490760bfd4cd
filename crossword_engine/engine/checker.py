"""Interactive checking and hints against the player's grid."""

from __future__ import annotations

from typing import Callable, Sequence

from ..core.constants import HINT_GAP, UNFILLED, is_letter
from ..core.models import CheckReport, Hint, Placement, WordFeedback
from ..data.trie import WordTrie

CellReader = Callable[[int, int], str]


def entered_word(placement: Placement, read_cell: CellReader, placeholder: str = UNFILLED) -> str:
    """Rebuild what the player typed along ``placement``, using ``placeholder`` for gaps."""

    chars = []
    for row, col in placement.cells:
        ch = read_cell(row, col)
        chars.append(ch if is_letter(ch) else placeholder)
    return "".join(chars)


def check_words(
    placements: Sequence[Placement], read_cell: CellReader, trie: WordTrie
) -> CheckReport:
    """Mark each placement correct (matches its word) and valid (a dictionary word).

    The two tallies are independent: a correct dictionary word counts in both.
    """

    report = CheckReport()
    for placement in placements:
        entered = entered_word(placement, read_cell)
        correct = entered == placement.word
        valid = trie.contains(entered)
        report.feedback.append(
            WordFeedback(placement=placement, entered=entered, correct=correct, valid=valid)
        )
        report.correct_words += int(correct)
        report.valid_words += int(valid)
    return report


def hint_for(placement: Placement, read_cell: CellReader, trie: WordTrie) -> Hint:
    """Prefix hint for one placement.

    The prefix tested is everything up to the last entered letter, with
    unfilled cells kept as gaps; any gap makes the prefix invalid.
    """

    pattern = entered_word(placement, read_cell, placeholder=HINT_GAP)
    hint = Hint(
        placement=placement,
        pattern=pattern,
        has_input=any(ch != HINT_GAP for ch in pattern),
        prefix_valid=False,
    )
    if hint.has_input:
        hint.prefix_valid = trie.starts_with(hint.entered_prefix)
    return hint
