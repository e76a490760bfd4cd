"""Grid state: the ground-truth solution matrix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..core.constants import BLACK, COLS, ROWS, Bounds
from ..core.models import Placement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Configuration values driving the grid layout."""

    rows: int = ROWS
    cols: int = COLS

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {self.rows}x{self.cols}")

    def bounds(self) -> Bounds:
        return Bounds(rows=self.rows, cols=self.cols)


class CrosswordGrid:
    """A ``rows x cols`` matrix of cells, each ``BLACK`` or a letter ``A``-``Z``.

    Cells become letters only through :meth:`apply_placement` and go back to
    ``BLACK`` through :meth:`remove_placement` once nothing covers them.
    """

    def __init__(self, config: GridConfig | None = None) -> None:
        self.config = config or GridConfig()
        self.bounds = self.config.bounds()
        self.cells: List[List[str]] = [
            [BLACK] * self.bounds.cols for _ in range(self.bounds.rows)
        ]

    def clear(self) -> None:
        for row in self.cells:
            row[:] = [BLACK] * self.bounds.cols

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> str:
        return self.cells[row][col]

    def is_black(self, row: int, col: int) -> bool:
        return self.cells[row][col] == BLACK

    def is_open(self, row: int, col: int) -> bool:
        """True when ``(row, col)`` is off-grid or black."""

        return not self.bounds.contains(row, col) or self.cells[row][col] == BLACK

    def fits(self, length: int, row: int, col: int, step: Tuple[int, int]) -> bool:
        dr, dc = step
        return self.bounds.contains(row, col) and self.bounds.contains(
            row + dr * (length - 1), col + dc * (length - 1)
        )

    def letter_count(self) -> int:
        return sum(1 for row in self.cells for ch in row if ch != BLACK)

    def snapshot(self) -> Tuple[str, ...]:
        return tuple("".join(row) for row in self.cells)

    # ------------------------------------------------------------------
    # Placement mutation
    # ------------------------------------------------------------------
    def apply_placement(self, placement: Placement) -> List[Tuple[int, int]]:
        """Write ``placement`` into the grid.

        Returns the cells whose existing letter disagreed and was overwritten;
        legal placements (as accepted by ``can_place``) never produce any.
        """

        conflicts: List[Tuple[int, int]] = []
        for letter, (row, col) in zip(placement.word, placement.cells):
            existing = self.cells[row][col]
            if existing != BLACK and existing != letter:
                conflicts.append((row, col))
            self.cells[row][col] = letter
        if conflicts:
            LOGGER.warning(
                "Placement %s@(%s,%s,%s) overwrote letters at %s",
                placement.word,
                placement.row,
                placement.col,
                placement.direction.value,
                conflicts,
            )
        return conflicts

    def remove_placement(self, placement: Placement, remaining: Sequence[Placement]) -> None:
        """Blacken the cells of ``placement`` that no placement in ``remaining`` covers."""

        for row, col in placement.cells:
            if not any(other.covers_cell(row, col) for other in remaining):
                self.cells[row][col] = BLACK

    def to_lines(self) -> List[str]:
        return ["".join(row) for row in self.cells]
