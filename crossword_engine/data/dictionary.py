"""Themed word bank with clue lookup and trie-backed validation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..core.exceptions import DictionaryLoadError
from ..utils.logger import get_logger
from .normalization import clean_word
from .trie import WordTrie


LOGGER = get_logger(__name__)

NO_CLUE = "No clue"

DEFAULT_WORD_BANK: Sequence[Tuple[str, str]] = (
    ("QUEUE", "A linear data structure where elements are processed in First In, First Out (FIFO) order"),
    ("ARRAY", "A fixed-size collection of elements stored in contiguous memory locations"),
    ("LINKEDLIST", "A linear data structure where each element (node) contains a reference to the next node"),
    ("BUBBLESORT", "A simple sorting algorithm that repeatedly swaps adjacent elements if they are in the wrong order"),
    ("STACK", "A linear data structure that follows the Last In, First Out (LIFO) principle"),
    ("TREE", "A hierarchical data structure with nodes connected by edges"),
    ("HASH", "A data structure that maps keys to values for efficient lookup"),
    ("GRAPH", "A non-linear data structure consisting of vertices and edges"),
    ("HEAP", "A complete binary tree that satisfies the heap property"),
    ("SEARCH", "Algorithm to find elements in a data structure"),
    ("SORT", "Algorithm to order elements in a specific sequence"),
    ("LIST", "A linear collection of elements"),
    ("BINARY", "Base-2 number system or tree with two children"),
    ("BACKTRACK", "Algorithm technique that tries solutions and reverts if unsuccessful"),
    ("TRIE", "A tree-like data structure for storing strings with common prefixes"),
    ("BUBBLE", "Simple sorting algorithm that repeatedly swaps adjacent elements"),
    ("ALGORITHM", "A step-by-step procedure for solving a problem"),
    ("QUICKSORT", "Efficient sorting algorithm using divide and conquer"),
    ("MERGESORT", "Stable sorting algorithm using divide and conquer"),
    ("HEAPSORT", "Sorting algorithm using heap data structure"),
    ("BUCKETSORT", "Sorting algorithm that distributes elements into buckets"),
    ("SHELLSORT", "In-place sorting algorithm with gap-based comparisons"),
)


@dataclass
class DictionaryConfig:
    """Configuration for word bank loading and filtering."""

    min_length: int = 2
    include_default_bank: bool = True


@dataclass
class WordEntry:
    surface: str
    clue: str = ""


def parse_word_line(line: str) -> Optional[Tuple[str, str]]:
    """Parse a ``WORD`` or ``WORD:clue`` line; blank lines and ``#`` comments yield None."""

    line = line.strip()
    if not line or line.startswith("#"):
        return None
    word, _, clue = line.partition(":")
    return word.strip(), clue.strip()


class WordDictionary:
    """Holds the themed word list, its clues and the validation trie."""

    def __init__(
        self,
        config: Optional[DictionaryConfig] = None,
        entries: Optional[Iterable[Tuple[str, str]]] = None,
    ) -> None:
        self.config = config or DictionaryConfig()
        self._entries: Dict[str, WordEntry] = {}
        self.trie = WordTrie()
        if self.config.include_default_bank:
            self.extend(DEFAULT_WORD_BANK)
        if entries is not None:
            self.extend(entries)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    @classmethod
    def from_lines(
        cls, lines: Iterable[str], config: Optional[DictionaryConfig] = None
    ) -> "WordDictionary":
        entries = [parsed for parsed in map(parse_word_line, lines) if parsed is not None]
        return cls(config, entries)

    @classmethod
    def from_file(
        cls, path: Path | str, config: Optional[DictionaryConfig] = None
    ) -> "WordDictionary":
        source = Path(path)
        try:
            text = source.read_text(encoding="utf-8")
        except OSError as exc:
            raise DictionaryLoadError(f"Cannot read word list {source}: {exc}") from exc
        dictionary = cls.from_lines(text.splitlines(), config)
        LOGGER.info("Loaded %d words from %s", len(dictionary), source)
        return dictionary

    def add(self, word: str, clue: str = "") -> Optional[WordEntry]:
        surface = clean_word(word)
        if len(surface) < self.config.min_length:
            LOGGER.debug("Skipping short or empty word %r", word)
            return None
        entry = self._entries.get(surface)
        if entry is None:
            entry = self._entries[surface] = WordEntry(surface=surface, clue=clue)
            self.trie.insert(surface)
        elif clue:
            entry.clue = clue
        return entry

    def extend(self, entries: Iterable[Tuple[str, str]]) -> None:
        for word, clue in entries:
            self.add(word, clue)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def contains(self, word: str) -> bool:
        return self.trie.contains(word)

    def starts_with(self, prefix: str) -> bool:
        return self.trie.starts_with(prefix)

    def clue_for(self, word: str) -> str:
        entry = self._entries.get(clean_word(word))
        if entry is None or not entry.clue:
            return NO_CLUE
        return entry.clue

    def words(self) -> List[str]:
        return list(self._entries)

    def __iter__(self) -> Iterator[WordEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
