"""Undo/redo log of single-cell user edits."""

from __future__ import annotations

from typing import List, Optional

from ..core.models import UserAction


class EditLog:
    """Two stacks of :class:`UserAction`.

    The log does not know where an edit came from. Its owner must not call
    :meth:`record` for programmatic changes (reveal, reset) or while replaying
    an action returned by :meth:`undo` / :meth:`redo`.
    """

    def __init__(self) -> None:
        self._undo: List[UserAction] = []
        self._redo: List[UserAction] = []

    def record(self, row: int, col: int, previous_char: str, new_char: str) -> Optional[UserAction]:
        """Push a fresh edit and drop the redo history; no-op when nothing changed."""

        if previous_char == new_char:
            return None
        action = UserAction(row=row, col=col, previous_char=previous_char, new_char=new_char)
        self._undo.append(action)
        self._redo.clear()
        return action

    def undo(self) -> Optional[UserAction]:
        """Pop the latest edit; the caller restores ``previous_char`` at its cell."""

        if not self._undo:
            return None
        action = self._undo.pop()
        self._redo.append(action)
        return action

    def redo(self) -> Optional[UserAction]:
        """Pop the latest undone edit; the caller writes ``new_char`` at its cell."""

        if not self._redo:
            return None
        action = self._redo.pop()
        self._undo.append(action)
        return action

    def reset(self) -> None:
        self._undo.clear()
        self._redo.clear()

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)
