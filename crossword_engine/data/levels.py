"""Built-in difficulty levels drawn from the data-structures word bank."""

from __future__ import annotations

from typing import Dict, List, Tuple

LEVELS: Dict[int, Tuple[str, Tuple[str, ...]]] = {
    # Equal lengths keep this order in the search; STACK before ARRAY has no layout.
    1: ("Easy", ("ARRAY", "STACK", "HEAP", "TREE")),
    2: ("Medium", ("HASH", "HEAP", "SEARCH", "SORT", "LIST")),
    3: ("Hard", ("BINARY", "BACKTRACK", "GRAPH", "TRIE", "QUEUE", "BUBBLE")),
    4: ("Expert", ("ALGORITHM", "BACKTRACK", "QUICKSORT", "MERGESORT", "HEAPSORT", "BUCKETSORT", "SHELLSORT")),
}


def level_words(level: int) -> List[str]:
    """Return the word list for ``level``; unknown levels yield an empty list."""

    entry = LEVELS.get(level)
    return list(entry[1]) if entry else []


def level_title(level: int) -> str:
    entry = LEVELS.get(level)
    return f"Level {level} ({entry[0]})" if entry else f"Level {level}"
