"""Backtracking placement search, deterministic and seeded-random."""

from __future__ import annotations

import random
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Sequence

from ..core.models import Candidate, Placement
from ..utils.logger import get_logger
from .constraints import find_valid_placements
from .grid import CrosswordGrid

LOGGER = get_logger(__name__)


@dataclass
class SearchStats:
    commits: int = 0
    backtracks: int = 0


def order_by_length(words: Sequence[str]) -> List[str]:
    """Longest first; equal lengths keep their input order."""

    return sorted(words, key=len, reverse=True)


def order_by_length_shuffled(words: Sequence[str], rng: random.Random) -> List[str]:
    """Longest first; equal lengths are shuffled with ``rng``."""

    buckets: Dict[int, List[str]] = defaultdict(list)
    for word in words:
        buckets[len(word)].append(word)
    ordered: List[str] = []
    for length in sorted(buckets, reverse=True):
        bucket = buckets[length]
        rng.shuffle(bucket)
        ordered.extend(bucket)
    return ordered


class BacktrackingSolver:
    """Depth-first search placing each word of an ordering into the grid.

    The solver owns the commit/rollback discipline over a shared
    :class:`CrosswordGrid` and placed-set list. A failed search leaves both
    exactly as they were before the search started (empty).
    """

    def __init__(self, grid: CrosswordGrid, placed: List[Placement]) -> None:
        self.grid = grid
        self.placed = placed
        self.stats = SearchStats()

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def solve(self, words: Sequence[str]) -> bool:
        """Deterministic search: score-ranked candidates, longest words first."""

        ordered = order_by_length(words)
        self._reset()
        LOGGER.info("Deterministic search over %d words: %s", len(ordered), ordered)
        found = self._backtrack(ordered, 0)
        self._log_outcome(found)
        return found

    def solve_random(self, words: Sequence[str], seed: int) -> bool:
        """Seeded search: shuffled ties between equal lengths, shuffled candidates."""

        rng = random.Random(seed)
        ordered = order_by_length_shuffled(words, rng)
        self._reset()
        LOGGER.info("Random search (seed=%s) over %d words: %s", seed, len(ordered), ordered)
        found = self._backtrack_random(ordered, 0, rng)
        self._log_outcome(found)
        return found

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def _backtrack(self, words: Sequence[str], idx: int) -> bool:
        if idx >= len(words):
            return True
        word = words[idx]
        candidates = find_valid_placements(word, self.grid, self.placed, scored=True)
        LOGGER.debug("Word %s (%d/%d): %d candidates", word, idx + 1, len(words), len(candidates))
        return self._try_candidates(word, candidates, lambda: self._backtrack(words, idx + 1))

    def _backtrack_random(self, words: Sequence[str], idx: int, rng: random.Random) -> bool:
        if idx >= len(words):
            return True
        word = words[idx]
        candidates = find_valid_placements(word, self.grid, self.placed, scored=False)
        if not candidates:
            LOGGER.debug("Word %s (%d/%d): no legal placement", word, idx + 1, len(words))
            return False
        rng.shuffle(candidates)
        return self._try_candidates(
            word, candidates, lambda: self._backtrack_random(words, idx + 1, rng)
        )

    def _try_candidates(self, word: str, candidates: List[Candidate], descend) -> bool:
        for candidate in candidates:
            placement = Placement(word, candidate.row, candidate.col, candidate.direction)
            self.commit(placement)
            if descend():
                return True
            self.rollback()
        return False

    # ------------------------------------------------------------------
    # Commit / rollback
    # ------------------------------------------------------------------
    def commit(self, placement: Placement) -> None:
        self.placed.append(placement)
        self.grid.apply_placement(placement)
        self.stats.commits += 1

    def rollback(self) -> Placement:
        """Undo the most recent commit and return its placement."""

        placement = self.placed.pop()
        self.grid.remove_placement(placement, self.placed)
        self.stats.backtracks += 1
        return placement

    def _reset(self) -> None:
        self.grid.clear()
        self.placed.clear()
        self.stats = SearchStats()

    def _log_outcome(self, found: bool) -> None:
        if found:
            LOGGER.info(
                "Search succeeded: %d placements after %d commits, %d backtracks",
                len(self.placed),
                self.stats.commits,
                self.stats.backtracks,
            )
        else:
            LOGGER.warning(
                "Search exhausted after %d commits, %d backtracks",
                self.stats.commits,
                self.stats.backtracks,
            )
