"""CP-SAT crossword layout solver using OR-Tools."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Tuple

from ortools.sat.python import cp_model

from ..core.constants import Bounds, Direction
from ..core.models import Placement
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

Cell = Tuple[int, int]


def solve_layout(
    words: Sequence[str],
    bounds: Bounds,
    timeout: float = 60.0,
    workers: int = 8,
    seed: Optional[int] = None,
) -> Optional[List[Placement]]:
    """Lay out ``words`` (in the given order) with a single CP-SAT model.

    The model encodes, simultaneously for all words:

    - each word takes exactly one in-bounds start and direction;
    - the cells flanking a word along its axis stay black;
    - at most one letter per cell, so crossing words agree;
    - two filled neighbours are joined by a word running through both
      (vertical pairs by a DOWN word, horizontal pairs by an ACROSS word);
    - every word after the first shares a cell with an earlier word.

    Returns the placements in word order, or ``None`` on infeasibility or
    timeout.
    """
    if not words:
        return []

    model = cp_model.CpModel()

    # ------------------------------------------------------------------
    # Step 1: Placement variables (one bool per in-bounds start/direction)
    # ------------------------------------------------------------------
    options: List[List[Tuple[Placement, cp_model.IntVar]]] = []
    # cell -> letter -> placement vars writing that letter there
    writers: Dict[Cell, Dict[str, List[cp_model.IntVar]]] = defaultdict(lambda: defaultdict(list))
    # (word index, cell) -> vars of that word covering the cell
    coverage: Dict[Tuple[int, Cell], List[cp_model.IntVar]] = defaultdict(list)
    # (direction, cell) -> placements of that direction covering the cell
    runs: Dict[Tuple[Direction, Cell], List[Tuple[Placement, cp_model.IntVar]]] = defaultdict(list)

    for index, word in enumerate(words):
        word_options: List[Tuple[Placement, cp_model.IntVar]] = []
        for row in range(bounds.rows):
            for col in range(bounds.cols):
                for direction in Direction:
                    dr, dc = direction.step
                    if not bounds.contains(row + dr * (len(word) - 1), col + dc * (len(word) - 1)):
                        continue
                    placement = Placement(word, row, col, direction)
                    var = model.new_bool_var(f"x_{index}_{row}_{col}_{direction.value}")
                    word_options.append((placement, var))
                    for letter, cell in zip(word, placement.cells):
                        writers[cell][letter].append(var)
                        coverage[(index, cell)].append(var)
                        runs[(direction, cell)].append((placement, var))
        if not word_options:
            LOGGER.debug("CP-SAT: word %s does not fit the grid", word)
            return None
        model.add_exactly_one(var for _, var in word_options)
        options.append(word_options)

    # ------------------------------------------------------------------
    # Step 2: Cell letters and fill indicators
    # ------------------------------------------------------------------
    filled: Dict[Cell, cp_model.IntVar] = {}
    for (row, col), by_letter in writers.items():
        letter_vars = []
        for letter, placement_vars in by_letter.items():
            has_letter = model.new_bool_var(f"L_{row}_{col}_{letter}")
            for var in placement_vars:
                model.add_implication(var, has_letter)
            model.add_bool_or(placement_vars).only_enforce_if(has_letter)
            letter_vars.append(has_letter)
        is_filled = model.new_bool_var(f"F_{row}_{col}")
        # At most one letter per cell; is_filled mirrors whether there is one.
        model.add(sum(letter_vars) == is_filled)
        filled[(row, col)] = is_filled

    # ------------------------------------------------------------------
    # Step 3: Flanks stay black
    # ------------------------------------------------------------------
    for word_options in options:
        for placement, var in word_options:
            dr, dc = placement.direction.step
            end_row, end_col = placement.end
            for flank in ((placement.row - dr, placement.col - dc), (end_row + dr, end_col + dc)):
                flank_var = filled.get(flank)
                if flank_var is not None:
                    model.add_implication(var, ~flank_var)

    # ------------------------------------------------------------------
    # Step 4: Adjacent filled cells must belong to a common word
    # ------------------------------------------------------------------
    for (row, col), cell_var in filled.items():
        for direction, (dr, dc) in ((Direction.DOWN, (1, 0)), (Direction.ACROSS, (0, 1))):
            neighbor_var = filled.get((row + dr, col + dc))
            if neighbor_var is None:
                continue
            joining = [
                var
                for placement, var in runs[(direction, (row, col))]
                if placement.covers_cell(row + dr, col + dc)
            ]
            if joining:
                model.add_bool_or(joining).only_enforce_if([cell_var, neighbor_var])
            else:
                model.add_bool_or([~cell_var, ~neighbor_var])

    # ------------------------------------------------------------------
    # Step 5: Each later word intersects an earlier one
    # ------------------------------------------------------------------
    for index in range(1, len(words)):
        hits = []
        for (row, col) in filled:
            own = coverage.get((index, (row, col)))
            if not own:
                continue
            earlier = [
                var for prior in range(index) for var in coverage.get((prior, (row, col)), ())
            ]
            if not earlier:
                continue
            hit = model.new_bool_var(f"H_{index}_{row}_{col}")
            model.add(hit <= sum(own))
            model.add(hit <= sum(earlier))
            hits.append(hit)
        if not hits:
            LOGGER.debug("CP-SAT: word %s can never meet an earlier word", words[index])
            return None
        model.add_bool_or(hits)

    # ------------------------------------------------------------------
    # Step 6: Solve
    # ------------------------------------------------------------------
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.num_workers = workers
    if seed is not None:
        solver.parameters.random_seed = seed

    LOGGER.info(
        "CP-SAT: %d words, %d placement vars, solving (timeout=%0.1fs)...",
        len(words),
        sum(len(word_options) for word_options in options),
        timeout,
    )
    status = solver.solve(model)
    if status == cp_model.UNKNOWN:
        LOGGER.warning(
            "CP-SAT: timed out after %0.1fs without a layout; a longer timeout may find one",
            timeout,
        )
        return None
    if status == cp_model.INFEASIBLE:
        LOGGER.warning("CP-SAT: no layout exists for this word order and grid")
        return None
    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        LOGGER.warning("CP-SAT: no layout found (status=%s)", solver.status_name(status))
        return None
    LOGGER.info("CP-SAT: layout found in %.2fs", solver.wall_time)

    # ------------------------------------------------------------------
    # Step 7: Extract placements in word order
    # ------------------------------------------------------------------
    result: List[Placement] = []
    for word_options in options:
        for placement, var in word_options:
            if solver.boolean_value(var):
                result.append(placement)
                break
    return result
