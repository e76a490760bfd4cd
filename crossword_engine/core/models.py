"""Data models supporting the crossword engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import BLANK, HINT_GAP, Direction, WordStatus, is_letter


@dataclass(frozen=True)
class Placement:
    """A word bound to a fixed start cell and direction on the grid."""

    word: str
    row: int
    col: int
    direction: Direction

    def __post_init__(self) -> None:
        if not self.word or not all(is_letter(ch) for ch in self.word):
            raise ValueError(f"Placement word must be non-empty uppercase A-Z: {self.word!r}")

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def end(self) -> Tuple[int, int]:
        dr, dc = self.direction.step
        return self.row + dr * (self.length - 1), self.col + dc * (self.length - 1)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(self.length)]

    def covers_cell(self, row: int, col: int) -> bool:
        if self.direction == Direction.ACROSS:
            return row == self.row and self.col <= col < self.col + self.length
        return col == self.col and self.row <= row < self.row + self.length

    def letter_at(self, row: int, col: int) -> Optional[str]:
        """Return the letter this placement dictates at ``(row, col)``, if any."""

        if not self.covers_cell(row, col):
            return None
        offset = col - self.col if self.direction == Direction.ACROSS else row - self.row
        return self.word[offset]


@dataclass(frozen=True)
class Candidate:
    """A legal start position for a word, with its heuristic score."""

    row: int
    col: int
    direction: Direction
    score: int = 0


@dataclass(frozen=True)
class UserAction:
    """A single-cell edit made by the player."""

    row: int
    col: int
    previous_char: str = BLANK
    new_char: str = BLANK


@dataclass(frozen=True)
class CellView:
    """Read-only view of a solution cell for rendering."""

    is_black: bool
    solution_letter: str


@dataclass
class WordFeedback:
    placement: Placement
    entered: str
    correct: bool
    valid: bool

    @property
    def status(self) -> WordStatus:
        if self.correct:
            return WordStatus.CORRECT
        if self.valid:
            return WordStatus.VALID
        return WordStatus.INVALID


@dataclass
class CheckReport:
    """Aggregate result of checking every placed word against the user grid."""

    correct_words: int = 0
    valid_words: int = 0
    feedback: List[WordFeedback] = field(default_factory=list)

    @property
    def total_words(self) -> int:
        return len(self.feedback)

    @property
    def score(self) -> int:
        return 10 * self.correct_words + 5 * self.valid_words

    @property
    def message(self) -> str:
        if not self.feedback:
            return "No puzzle loaded."
        return (
            f"Correct: {self.correct_words}/{self.total_words}\n"
            f"Valid: {self.valid_words}/{self.total_words}\n"
            f"Score: {self.score}"
        )


@dataclass
class Hint:
    placement: Placement
    pattern: str
    has_input: bool
    prefix_valid: bool

    @property
    def message(self) -> str:
        p = self.placement
        head = f"{p.direction.value} [{p.row},{p.col}]: "
        if not self.has_input:
            return f"{head}{p.length} letters"
        mark = "✓" if self.prefix_valid else "✗"
        return f"{head}{mark} {self.pattern}"

    @property
    def entered_prefix(self) -> str:
        return self.pattern.rstrip(HINT_GAP)
