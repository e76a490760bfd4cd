"""Custom exception hierarchy for the crossword engine."""


class CrosswordError(Exception):
    """Base exception for engine and CLI failures."""


class DictionaryLoadError(CrosswordError):
    """Raised when a word list file cannot be read."""


class ThemeWordError(CrosswordError):
    """Raised when no theme words are available to build a puzzle from."""


class GenerationError(CrosswordError):
    """Raised by callers that give up after every layout attempt failed."""


class ValidationError(CrosswordError):
    """Raised when the placed-set integrity checks fail."""
