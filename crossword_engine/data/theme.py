"""Theme word sources feeding the generator's word list."""

from __future__ import annotations

import json
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Optional, Protocol, Sequence

from ..utils.logger import get_logger
from .dictionary import DEFAULT_WORD_BANK, parse_word_line
from .normalization import clean_word

if TYPE_CHECKING:
    from ..io.gemini_client import GeminiClient


LOGGER = get_logger(__name__)


@dataclass
class ThemeWord:
    """A candidate word for the puzzle and its clue (possibly empty)."""

    word: str
    clue: str = ""
    source: str = "unknown"


class ThemeWordSource(Protocol):
    """Protocol implemented by all theme word providers."""

    def words(self, theme: str, limit: int = 10) -> List[ThemeWord]:
        ...


class StaticThemeWordSource:
    """Samples the built-in data-structures word bank."""

    def __init__(self, bank: Sequence[tuple] = DEFAULT_WORD_BANK, seed: Optional[int] = None) -> None:
        self.bank = [ThemeWord(word, clue, "bank") for word, clue in bank]
        self.rng = random.Random(seed)

    def words(self, theme: str, limit: int = 10) -> List[ThemeWord]:
        pool = list(self.bank)
        self.rng.shuffle(pool)
        return pool[:limit]


class UserWordListSource:
    """Returns a user-supplied list of ``WORD`` or ``WORD:clue`` strings."""

    def __init__(self, raw_words: Iterable[str]) -> None:
        self._words: List[ThemeWord] = []
        for item in raw_words:
            parsed = parse_word_line(item)
            if parsed is None:
                continue
            word, clue = parsed
            self._words.append(ThemeWord(word.upper(), clue, "user"))

    def words(self, theme: str, limit: int = 10) -> List[ThemeWord]:
        return self._words[:limit]


class GeminiThemeWordSource:
    """Asks Gemini for words on a theme. Clues are never requested."""

    PROMPT = (
        "You are helping build a small English crossword about '{theme}'. "
        "Return between 5 and {limit} JSON lines, one object per line, each with "
        'a single field "word": a single English word of 3 to 12 letters, '
        "uppercase, no spaces or punctuation. Output nothing else."
    )

    def __init__(self, client: "GeminiClient") -> None:
        self.client = client

    def words(self, theme: str, limit: int = 10) -> List[ThemeWord]:
        text = self.client.generate_text(self.PROMPT.format(theme=theme, limit=limit))
        return self.parse_response(text)[:limit]

    @staticmethod
    def parse_response(text: str) -> List[ThemeWord]:
        entries: List[ThemeWord] = []
        for line in (text or "").splitlines():
            line = line.strip().strip(",")
            if not line or line.startswith("```"):
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError:
                continue
            word = data.get("word") if isinstance(data, dict) else None
            if isinstance(word, str) and clean_word(word):
                entries.append(ThemeWord(word=clean_word(word), clue="", source="gemini"))
        return entries


def merge_theme_sources(
    primary: Optional[ThemeWordSource],
    fallbacks: Sequence[ThemeWordSource],
    theme: str,
    target: int,
) -> List[ThemeWord]:
    """Attempt the primary source, then cascade into fallbacks, de-duplicating words."""

    collected: List[ThemeWord] = []
    seen: set[str] = set()

    def extend(entries: Iterable[ThemeWord]) -> None:
        for entry in entries:
            key = clean_word(entry.word)
            if not key or key in seen:
                continue
            collected.append(entry)
            seen.add(key)
            if len(collected) >= target:
                break

    for source in ([primary] if primary else []) + list(fallbacks):
        if len(collected) >= target:
            break
        try:
            extend(source.words(theme, limit=target))
        except Exception as exc:
            LOGGER.warning("Theme word source %s failed: %s", type(source).__name__, exc)

    return collected[:target]
