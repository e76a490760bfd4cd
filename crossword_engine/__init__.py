"""Crossword construction and validation engine.

This package exposes the public API surface via:

- ``crossword_engine.engine.puzzle.CrosswordPuzzle``: generation, loading, play and checking.
- ``crossword_engine.data.dictionary.WordDictionary``: themed word bank with clues.
- ``crossword_engine.data.trie.WordTrie``: prefix tree used for word validation.
"""

from .core.constants import Direction, GenerationMode, WordStatus
from .core.models import Placement
from .data.dictionary import DictionaryConfig, WordDictionary
from .data.trie import WordTrie
from .engine.puzzle import CrosswordPuzzle, PuzzleConfig

__all__ = [
    "CrosswordPuzzle",
    "PuzzleConfig",
    "Direction",
    "GenerationMode",
    "WordStatus",
    "Placement",
    "WordDictionary",
    "DictionaryConfig",
    "WordTrie",
]

__version__ = "0.1.0"
