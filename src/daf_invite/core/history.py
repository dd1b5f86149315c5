"""Undo/redo history for design documents."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from daf_invite.core.models import DesignDocument


class DesignHistory:
    """Bounded undo/redo stacks of document snapshots.

    Documents are immutable, so the history stores whole values instead of
    reversible commands. ``push`` records the state *before* an edit.

    Attributes:
        max_history: Maximum number of snapshots kept on the undo stack.
    """

    def __init__(self, max_history: int = 100) -> None:
        """Initialize an empty history.

        Args:
            max_history: Maximum number of snapshots to keep.
        """
        self.max_history = max_history
        self._undo_stack: list[DesignDocument] = []
        self._redo_stack: list[DesignDocument] = []

    def push(self, snapshot: DesignDocument) -> None:
        """Record the state preceding an edit and clear the redo stack."""
        self._undo_stack.append(snapshot)
        self._redo_stack.clear()
        if len(self._undo_stack) > self.max_history:
            self._undo_stack.pop(0)

    def undo(self, current: DesignDocument) -> DesignDocument | None:
        """Step back one edit.

        Args:
            current: The document shown right now, kept for redo.

        Returns:
            The previous document, or None if there is nothing to undo.
        """
        if not self._undo_stack:
            return None
        self._redo_stack.append(current)
        return self._undo_stack.pop()

    def redo(self, current: DesignDocument) -> DesignDocument | None:
        """Step forward one undone edit."""
        if not self._redo_stack:
            return None
        self._undo_stack.append(current)
        return self._redo_stack.pop()

    def rewrite(self, transform: Callable[[DesignDocument], DesignDocument]) -> None:
        """Apply ``transform`` to every stored snapshot on both stacks."""
        self._undo_stack = [transform(snapshot) for snapshot in self._undo_stack]
        self._redo_stack = [transform(snapshot) for snapshot in self._redo_stack]

    def can_undo(self) -> bool:
        """Check if there are snapshots to undo."""
        return len(self._undo_stack) > 0

    def can_redo(self) -> bool:
        """Check if there are snapshots to redo."""
        return len(self._redo_stack) > 0

    def clear(self) -> None:
        """Clear both stacks."""
        self._undo_stack.clear()
        self._redo_stack.clear()

    @property
    def undo_count(self) -> int:
        """Number of edits that can be undone."""
        return len(self._undo_stack)

    @property
    def redo_count(self) -> int:
        """Number of edits that can be redone."""
        return len(self._redo_stack)
