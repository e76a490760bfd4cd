"""Deterministic rule validation for a placed-set and its grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..core.constants import BLACK
from ..core.exceptions import ValidationError
from ..core.models import Placement
from ..utils.logger import get_logger
from .grid import CrosswordGrid


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs deterministic validation over a committed placed-set."""

    def validate(self, grid: CrosswordGrid, placements: Sequence[Placement]) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_bounds(grid, placements)
            self._check_intersections_agree(placements)
            self._check_cells_match(grid, placements)
            self._check_no_orphan_letters(grid, placements)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_bounds(self, grid: CrosswordGrid, placements: Sequence[Placement]) -> None:
        for p in placements:
            for row, col in (p.cells[0], p.cells[-1]):
                if not grid.bounds.contains(row, col):
                    raise ValidationError(
                        f"Word '{p.word}' at ({p.row},{p.col}) {p.direction.value} leaves the grid"
                    )

    def _check_intersections_agree(self, placements: Sequence[Placement]) -> None:
        letters = {}
        for p in placements:
            for letter, cell in zip(p.word, p.cells):
                seen = letters.setdefault(cell, (letter, p.word))
                if seen[0] != letter:
                    raise ValidationError(
                        f"Words '{seen[1]}' and '{p.word}' disagree at {cell}: "
                        f"'{seen[0]}' vs '{letter}'"
                    )

    def _check_cells_match(self, grid: CrosswordGrid, placements: Sequence[Placement]) -> None:
        for p in placements:
            for letter, (row, col) in zip(p.word, p.cells):
                if grid.cell(row, col) != letter:
                    raise ValidationError(
                        f"Cell ({row},{col}) holds '{grid.cell(row, col)}' but '{p.word}' needs '{letter}'"
                    )

    def _check_no_orphan_letters(self, grid: CrosswordGrid, placements: Sequence[Placement]) -> None:
        for r in range(grid.bounds.rows):
            for c in range(grid.bounds.cols):
                if grid.cell(r, c) == BLACK:
                    continue
                if not any(p.covers_cell(r, c) for p in placements):
                    raise ValidationError(f"Letter at ({r},{c}) is not covered by any word")
