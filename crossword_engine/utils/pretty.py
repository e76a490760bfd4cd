"""Pretty-print helpers for crossword grids and clue lists."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Callable, List

from ..core.constants import Direction

if TYPE_CHECKING:
    from ..engine.puzzle import CrosswordPuzzle


def _render(rows: int, cols: int, symbol: Callable[[int, int], str]) -> str:
    header_cells = [f"{c:>2}" for c in range(cols)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * cols - 1))
    for r in range(rows):
        row_render = " ".join(f"{symbol(r, c):>2}" for c in range(cols))
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_solution(puzzle: CrosswordPuzzle) -> str:
    def symbol(r: int, c: int) -> str:
        view = puzzle.query_cell(r, c)
        return "." if view.is_black else view.solution_letter

    return _render(puzzle.bounds.rows, puzzle.bounds.cols, symbol)


def format_clues(puzzle: CrosswordPuzzle) -> str:
    lines: List[str] = []
    for direction in Direction:
        placements = puzzle.placements_sorted(direction)
        if not placements:
            continue
        lines.append(f"{direction.value}:")
        for number, p in enumerate(placements, start=1):
            lines.append(f"{number}. [{p.row},{p.col}] {puzzle.clue_for(p)}")
        lines.append("")
    return "\n".join(lines).rstrip()


def print_puzzle(puzzle: CrosswordPuzzle, *, label: str | None = None, stream=None) -> None:
    """Print the solution grid followed by the clue lists."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_solution(puzzle), file=stream)
    print(file=stream)
    print(format_clues(puzzle), file=stream)
