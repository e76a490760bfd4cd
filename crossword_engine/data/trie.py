"""Prefix tree over uppercase A-Z words."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from ..core.constants import is_letter


class TrieNode:
    __slots__ = ("children", "is_terminal")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_terminal: bool = False


class WordTrie:
    """Answers exact-membership and prefix-membership queries.

    Insertion skips any character outside ``A``-``Z``; queries containing such
    a character (for example the ``?`` placeholder of an unfilled cell) are
    rejected outright.
    """

    def __init__(self, words: Optional[Iterable[str]] = None) -> None:
        self.root = TrieNode()
        self._word_count = 0
        for word in words or ():
            self.insert(word)

    def insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            if not is_letter(ch):
                continue
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        if not node.is_terminal:
            node.is_terminal = True
            self._word_count += 1

    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def starts_with(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def _walk(self, text: str) -> Optional[TrieNode]:
        node = self.root
        for ch in text:
            if not is_letter(ch):
                return None
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self._word_count
