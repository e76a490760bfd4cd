"""Logging utilities for the crossword engine."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, Union

ROOT_LOGGER_NAME = "crossword_engine"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def resolve_level(level: Union[int, str]) -> int:
    """Map ``"debug"``/``"INFO"``/``10`` style values to a logging level."""

    if isinstance(level, int):
        return level
    return getattr(logging, level.strip().upper(), logging.INFO)


def configure_logging(level: Union[int, str] = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Install a single formatted handler on the root logger.

    Records go to ``stderr`` by default so that the CLI can print puzzles on
    ``stdout``. Search progress is logged at DEBUG, which is noisy for long
    backtracking runs; callers pick the level before building a
    :class:`CrosswordPuzzle`.
    """

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under ``crossword_engine``; installs the default handler on first use."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or ROOT_LOGGER_NAME)
