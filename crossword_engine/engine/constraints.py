"""Placement legality rules and candidate enumeration."""

from __future__ import annotations

from typing import List, Sequence

from ..core.constants import BLACK, Direction
from ..core.models import Candidate, Placement
from .grid import CrosswordGrid
from .scoring import score_placement


def can_place(
    word: str,
    row: int,
    col: int,
    direction: Direction,
    grid: CrosswordGrid,
    placed: Sequence[Placement],
) -> bool:
    """Decide whether ``word`` may start at ``(row, col)`` in ``direction``.

    Rules, checked in order with short-circuit:

    1. the span fits in the grid;
    2. the cells just before and just after the span are black or off-grid;
    3. every span cell is either a matching letter (an intersection) or black
       with both perpendicular neighbours black or off-grid;
    4. at least one intersection, unless ``placed`` is empty.
    """

    if not word:
        return False
    dr, dc = direction.step
    length = len(word)
    if not grid.fits(length, row, col, (dr, dc)):
        return False
    if not grid.is_open(row - dr, col - dc):
        return False
    if not grid.is_open(row + dr * length, col + dc * length):
        return False

    pr, pc = direction.perpendicular
    intersections = 0
    for index, letter in enumerate(word):
        r, c = row + dr * index, col + dc * index
        existing = grid.cell(r, c)
        if existing != BLACK:
            if existing != letter:
                return False
            intersections += 1
        elif not (grid.is_open(r - pr, c - pc) and grid.is_open(r + pr, c + pc)):
            return False

    return not placed or intersections > 0


def find_valid_placements(
    word: str,
    grid: CrosswordGrid,
    placed: Sequence[Placement],
    scored: bool = True,
) -> List[Candidate]:
    """Enumerate every legal start for ``word``, row-major, ACROSS before DOWN.

    With ``scored`` the result is sorted by descending heuristic score; ties
    keep enumeration order.
    """

    candidates: List[Candidate] = []
    for row in range(grid.bounds.rows):
        for col in range(grid.bounds.cols):
            for direction in Direction:
                if not can_place(word, row, col, direction, grid, placed):
                    continue
                score = (
                    score_placement(word, row, col, direction, grid, placed) if scored else 0
                )
                candidates.append(Candidate(row=row, col=col, direction=direction, score=score))
    if scored:
        candidates.sort(key=lambda item: item.score, reverse=True)
    return candidates
