"""Puzzle session: the query/command surface offered to a presentation layer.

A :class:`CrosswordPuzzle` owns the solution grid, the placed-set, the
player's grid and the edit log. Callers never receive a mutable reference to
any of them; they read through ``query_*`` methods and write through
``submit_user_edit`` and the generation/loading commands.

Generation and play never overlap: loading or generating a puzzle replaces
all prior state, including the player's grid and edit history, before any
edit is accepted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.constants import BLACK, BLANK, COLS, ROWS, Direction, GenerationMode, is_letter
from ..core.models import CellView, CheckReport, Hint, Placement, UserAction
from ..data.dictionary import WordDictionary
from ..data.normalization import clean_word
from ..utils.logger import get_logger
from .checker import check_words, hint_for
from .cpsat import solve_layout
from .edit_log import EditLog
from .grid import CrosswordGrid, GridConfig
from .solver import BacktrackingSolver, order_by_length
from .validator import GridValidator, ValidationResult


LOGGER = get_logger(__name__)


@dataclass
class PuzzleConfig:
    rows: int = ROWS
    cols: int = COLS
    cpsat_timeout_seconds: float = 60.0
    cpsat_workers: int = 8

    def to_grid_config(self) -> GridConfig:
        return GridConfig(rows=self.rows, cols=self.cols)


class CrosswordPuzzle:
    """Crossword engine facade: generation, loading, play and checking."""

    def __init__(
        self,
        config: Optional[PuzzleConfig] = None,
        dictionary: Optional[WordDictionary] = None,
    ) -> None:
        self.config = config or PuzzleConfig()
        self.dictionary = dictionary or WordDictionary()
        self.grid = CrosswordGrid(self.config.to_grid_config())
        self.bounds = self.grid.bounds
        self.validator = GridValidator()
        self.edits = EditLog()
        self.score = 0
        self._placed: List[Placement] = []
        self._user: List[List[str]] = self._blank_user_grid()

    # ------------------------------------------------------------------
    # Loading & generation
    # ------------------------------------------------------------------
    def load_puzzle(self, placements: Iterable[Placement]) -> None:
        """Replace the puzzle with ``placements``, applied in order.

        Placements that leave the grid are skipped. Letters that disagree are
        overwritten by the later placement, with a warning.
        """

        self.grid.clear()
        self._placed.clear()
        for placement in placements:
            dr, dc = placement.direction.step
            if not self.grid.fits(placement.length, placement.row, placement.col, (dr, dc)):
                LOGGER.warning(
                    "Skipping %s@(%s,%s,%s): outside the %sx%s grid",
                    placement.word,
                    placement.row,
                    placement.col,
                    placement.direction.value,
                    self.bounds.rows,
                    self.bounds.cols,
                )
                continue
            self._placed.append(placement)
            self.grid.apply_placement(placement)
        self._start_play()
        LOGGER.info("Loaded puzzle with %d words", len(self._placed))

    def generate(
        self,
        words: Sequence[str],
        mode: GenerationMode = GenerationMode.DETERMINISTIC,
        seed: Optional[int] = None,
    ) -> bool:
        """Lay out ``words`` from scratch; ``False`` means no arrangement was found.

        ``RANDOM`` needs ``seed``. On failure the grid and placed-set are empty.
        """

        mode = GenerationMode(mode)
        if mode == GenerationMode.RANDOM and seed is None:
            raise ValueError("RANDOM generation requires a seed")

        cleaned = [clean_word(word) for word in words]
        dropped = [word for word, surface in zip(words, cleaned) if not surface]
        if dropped:
            LOGGER.warning("Ignoring words without letters: %s", dropped)
        cleaned = [surface for surface in cleaned if surface]

        if mode == GenerationMode.CPSAT:
            found = self._generate_cpsat(cleaned, seed)
        else:
            solver = BacktrackingSolver(self.grid, self._placed)
            if mode == GenerationMode.RANDOM:
                found = solver.solve_random(cleaned, seed)
            else:
                found = solver.solve(cleaned)

        if found:
            validation = self.validate()
            if not validation.ok:
                LOGGER.error("Generated layout rejected: %s", validation.messages)
                found = False
        if not found:
            self.grid.clear()
            self._placed.clear()
        self._start_play()
        return found

    def _generate_cpsat(self, words: Sequence[str], seed: Optional[int]) -> bool:
        self.grid.clear()
        self._placed.clear()
        layout = solve_layout(
            order_by_length(words),
            self.bounds,
            timeout=self.config.cpsat_timeout_seconds,
            workers=self.config.cpsat_workers,
            seed=seed,
        )
        if layout is None:
            return False
        for placement in layout:
            self._placed.append(placement)
            self.grid.apply_placement(placement)
        return True

    def validate(self) -> ValidationResult:
        return self.validator.validate(self.grid, self._placed)

    # ------------------------------------------------------------------
    # Solution queries
    # ------------------------------------------------------------------
    @property
    def placements(self) -> Tuple[Placement, ...]:
        return tuple(self._placed)

    def query_cell(self, row: int, col: int) -> CellView:
        if not self.bounds.contains(row, col) or self.grid.is_black(row, col):
            return CellView(is_black=True, solution_letter=BLACK)
        return CellView(is_black=False, solution_letter=self.grid.cell(row, col))

    def placements_sorted(self, direction: Direction) -> List[Placement]:
        """Across words by row then column; down words by column then row."""

        direction = Direction(direction)
        selected = [p for p in self._placed if p.direction == direction]
        if direction == Direction.ACROSS:
            return sorted(selected, key=lambda p: (p.row, p.col))
        return sorted(selected, key=lambda p: (p.col, p.row))

    def placement_at(self, row: int, col: int) -> Optional[Placement]:
        """The word covering a cell, preferring ACROSS when two cross there."""

        down = None
        for placement in self._placed:
            if placement.covers_cell(row, col):
                if placement.direction == Direction.ACROSS:
                    return placement
                down = down or placement
        return down

    def clue_for(self, placement: Placement) -> str:
        return self.dictionary.clue_for(placement.word)

    # ------------------------------------------------------------------
    # Player grid & edit log
    # ------------------------------------------------------------------
    def submit_user_edit(self, row: int, col: int, new_char: str) -> bool:
        """Write one character into the player's grid.

        Accepts a single uppercase letter or ``BLANK`` on a non-black cell;
        anything else is refused with ``False``.
        """

        if not (is_letter(new_char) or new_char == BLANK):
            return False
        if not self.bounds.contains(row, col) or self.grid.is_black(row, col):
            return False
        previous = self._user[row][col]
        self._user[row][col] = new_char
        self.edits.record(row, col, previous, new_char)
        return True

    def query_user_cell(self, row: int, col: int) -> str:
        if not self.bounds.contains(row, col):
            return BLANK
        return self._user[row][col]

    def undo(self) -> Optional[UserAction]:
        action = self.edits.undo()
        if action is not None:
            self._user[action.row][action.col] = action.previous_char
        return action

    def redo(self) -> Optional[UserAction]:
        action = self.edits.redo()
        if action is not None:
            self._user[action.row][action.col] = action.new_char
        return action

    def reset_edits(self) -> None:
        self.edits.reset()

    def reset_board(self) -> None:
        """Blank every player cell and forget all edits and score."""

        self._user = self._blank_user_grid()
        self.edits.reset()
        self.score = 0

    def reveal(self) -> int:
        """Copy the solution into the player's grid without recording edits."""

        for r in range(self.bounds.rows):
            for c in range(self.bounds.cols):
                if not self.grid.is_black(r, c):
                    self._user[r][c] = self.grid.cell(r, c)
        self.score = 10 * len(self._placed)
        return self.score

    # ------------------------------------------------------------------
    # Checking & hints
    # ------------------------------------------------------------------
    def check_all(self) -> CheckReport:
        report = check_words(self._placed, self.query_user_cell, self.dictionary.trie)
        if report.feedback:
            self.score = report.score
        return report

    def hint(self, index: int) -> Optional[Hint]:
        if not 0 <= index < len(self._placed):
            return None
        return hint_for(self._placed[index], self.query_user_cell, self.dictionary.trie)

    def hints(self) -> List[Hint]:
        return [hint_for(p, self.query_user_cell, self.dictionary.trie) for p in self._placed]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _blank_user_grid(self) -> List[List[str]]:
        return [[BLANK] * self.bounds.cols for _ in range(self.bounds.rows)]

    def _start_play(self) -> None:
        self._user = self._blank_user_grid()
        self.edits.reset()
        self.score = 0
