"""CLI entrypoint for the crossword engine."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from crossword_engine.core.constants import Direction, GenerationMode
from crossword_engine.core.exceptions import CrosswordError, GenerationError, ThemeWordError
from crossword_engine.data.dictionary import WordDictionary
from crossword_engine.data.levels import LEVELS, level_title, level_words
from crossword_engine.data.theme import (
    GeminiThemeWordSource,
    StaticThemeWordSource,
    ThemeWord,
    ThemeWordSource,
    UserWordListSource,
    merge_theme_sources,
)
from crossword_engine.engine.puzzle import CrosswordPuzzle, PuzzleConfig
from crossword_engine.utils.logger import configure_logging, get_logger
from crossword_engine.utils.pretty import print_puzzle

LOGGER = get_logger("crossword_engine.cli")


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate and lay out themed crossword puzzles",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--level",
        type=int,
        choices=sorted(LEVELS),
        help="Lay out one of the built-in levels",
    )
    source.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit words (format: WORD or WORD:Clue)",
    )
    source.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD or WORD:Clue entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--theme", type=str, default="", help="Theme keyword for --llm word suggestions")
    parser.add_argument(
        "--llm",
        action="store_true",
        help="Ask Gemini for theme words (requires --theme and GEMINI_API_KEY)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=6,
        help="Number of words to draw when no explicit word list is given",
    )
    parser.add_argument(
        "--mode",
        type=str.upper,
        choices=[m.value for m in GenerationMode],
        default=GenerationMode.DETERMINISTIC.value,
        help="Layout search strategy",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for RANDOM/CPSAT modes")
    parser.add_argument(
        "--attempts",
        type=int,
        default=5,
        help="RANDOM mode: number of successive seeds to try",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=PuzzleConfig.cpsat_timeout_seconds,
        help="CPSAT mode: solver time limit in seconds (default: %(default)s)",
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON payload instead of text")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_theme_words(args: argparse.Namespace) -> List[ThemeWord]:
    if args.level is not None:
        return [ThemeWord(word, source="level") for word in level_words(args.level)]

    raw: List[str] = list(args.words or [])
    if args.words_file:
        raw.extend(parse_words_file(args.words_file))

    primary: Optional[ThemeWordSource] = UserWordListSource(raw) if raw else None
    fallbacks: List[ThemeWordSource] = []
    if args.llm:
        from crossword_engine.io.gemini_client import GeminiClient

        fallbacks.append(GeminiThemeWordSource(GeminiClient()))
    if primary is None and not args.llm:
        fallbacks.append(StaticThemeWordSource(seed=args.seed))

    target = len(raw) if raw and not args.llm else args.count
    words = merge_theme_sources(primary, fallbacks, args.theme, target)
    if not words:
        raise ThemeWordError("No theme words available")
    return words


def build_puzzle(args: argparse.Namespace, theme_words: List[ThemeWord]) -> CrosswordPuzzle:
    dictionary = WordDictionary(entries=[(tw.word, tw.clue) for tw in theme_words])
    puzzle = CrosswordPuzzle(PuzzleConfig(cpsat_timeout_seconds=args.timeout), dictionary)
    words = [tw.word for tw in theme_words]
    mode = GenerationMode(args.mode)

    if mode == GenerationMode.RANDOM:
        base_seed = args.seed if args.seed is not None else 0
        for attempt in range(args.attempts):
            seed = base_seed + attempt
            LOGGER.info("Random layout attempt %s/%s (seed=%s)", attempt + 1, args.attempts, seed)
            if puzzle.generate(words, mode, seed=seed):
                return puzzle
        raise GenerationError(f"No layout found after {args.attempts} random attempts")

    if not puzzle.generate(words, mode, seed=args.seed):
        raise GenerationError(f"No layout found for {words} in {mode.value} mode")
    return puzzle


def puzzle_payload(puzzle: CrosswordPuzzle, title: str) -> Dict[str, Any]:
    return {
        "title": title,
        "rows": puzzle.bounds.rows,
        "cols": puzzle.bounds.cols,
        "grid": puzzle.grid.to_lines(),
        "placements": [
            {
                "word": p.word,
                "start": [p.row, p.col],
                "direction": p.direction.value,
                "clue": puzzle.clue_for(p),
            }
            for direction in Direction
            for p in puzzle.placements_sorted(direction)
        ],
    }


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.llm and not args.theme:
        parser.error("--llm requires --theme")
    if args.count < 1 or args.attempts < 1:
        parser.error("--count and --attempts must be positive")

    try:
        theme_words = collect_theme_words(args)
        puzzle = build_puzzle(args, theme_words)
    except CrosswordError as exc:
        LOGGER.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    title = level_title(args.level) if args.level is not None else (args.theme or "Crossword")
    if args.json:
        print(json.dumps(puzzle_payload(puzzle, title), indent=2))
    else:
        print_puzzle(puzzle, label=title)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
