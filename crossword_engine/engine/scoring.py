"""Heuristic ranking of legal placements."""

from __future__ import annotations

from typing import Sequence

from ..core.constants import BLACK, VOWELS, Direction
from ..core.models import Placement
from .grid import CrosswordGrid

INTERSECTION_WEIGHT = 10
CENTRALITY_RADIUS = 20
LENGTH_WEIGHT = 2
VOWEL_WEIGHT = 3
BALANCE_BONUS = 5


def score_placement(
    word: str,
    row: int,
    col: int,
    direction: Direction,
    grid: CrosswordGrid,
    placed: Sequence[Placement],
) -> int:
    """Rank a candidate placement; higher is tried first.

    Assumes the span is in bounds. Legality is ``can_place``'s concern.
    """

    dr, dc = direction.step
    intersections = sum(
        1 for i in range(len(word)) if grid.cell(row + dr * i, col + dc * i) != BLACK
    )
    score = intersections * INTERSECTION_WEIGHT

    center_row, center_col = grid.bounds.center
    distance = abs(row - center_row) + abs(col - center_col)
    score += max(0, CENTRALITY_RADIUS - distance)

    score += len(word) * LENGTH_WEIGHT
    score += sum(1 for ch in word if ch in VOWELS) * VOWEL_WEIGHT

    if placed:
        across = sum(1 for p in placed if p.direction == Direction.ACROSS)
        down = len(placed) - across
        if (direction == Direction.ACROSS and across < down) or (
            direction == Direction.DOWN and down < across
        ):
            score += BALANCE_BONUS

    return score
