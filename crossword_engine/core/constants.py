"""Shared constants and enumerations for the crossword engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Tuple


ROWS = 18
COLS = 18

BLACK = "#"
"""Solution-grid marker for a cell that holds no letter."""

BLANK = " "
"""User-grid marker for an editable cell the player has not filled."""

UNFILLED = "?"
"""Placeholder used when reconstructing a word with missing letters."""

HINT_GAP = "_"

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
VOWELS: FrozenSet[str] = frozenset("AEIOU")


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    @property
    def perpendicular(self) -> Tuple[int, int]:
        return (1, 0) if self is Direction.ACROSS else (0, 1)


class GenerationMode(str, Enum):
    """Search strategies available to :meth:`CrosswordPuzzle.generate`."""

    DETERMINISTIC = "DETERMINISTIC"
    RANDOM = "RANDOM"
    CPSAT = "CPSAT"


class WordStatus(str, Enum):
    """Per-word feedback category, in priority order."""

    CORRECT = "CORRECT"
    VALID = "VALID"
    INVALID = "INVALID"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    @property
    def center(self) -> Tuple[int, int]:
        return self.rows // 2, self.cols // 2


def is_letter(char: str) -> bool:
    """Return True for a single uppercase ASCII letter."""

    return len(char) == 1 and "A" <= char <= "Z"
