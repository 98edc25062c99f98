"""Snapshot-based undo/redo over whole documents."""

from returns.result import Failure, Result, Success

from ..core import get_logger
from ..document.models import ComponentNode, Document
from ..document.tree import clone_document
from ..monitoring import metrics_collector

logger = get_logger(__name__)

Snapshot = tuple[ComponentNode, ...]
"""Frozen deep copy of a document; never handed out, only cloned from."""


class HistoryManager:
    """
    Linear undo/redo with full-document checkpoints.

    Every checkpoint is a structural deep copy, so editing the live document
    afterwards never alters a stored entry. Restores return fresh copies too.
    """

    def __init__(self, limit: int = 0) -> None:
        """
        Args:
            limit: Max undo entries kept; oldest are dropped first (0 = unlimited)
        """
        if limit < 0:
            raise ValueError("limit must not be negative")
        self.limit = limit
        self._undo_stack: list[Snapshot] = []
        self._redo_stack: list[Snapshot] = []

    def checkpoint(self, document: Document) -> None:
        """Push a copy of ``document`` and discard everything redoable."""
        self._undo_stack.append(self._freeze(document))
        self._redo_stack.clear()
        self._enforce_limit()
        self._publish()

    def undo(self, current: Document) -> Result[Document, str]:
        """
        Step back one checkpoint.

        Args:
            current: The live document, kept for redo

        Returns:
            Success with the restored document, or Failure when there is nothing to undo
        """
        if not self._undo_stack:
            return Failure("Nothing to undo")

        self._redo_stack.append(self._freeze(current))
        restored = self._thaw(self._undo_stack.pop())
        self._publish()
        return Success(restored)

    def redo(self, current: Document) -> Result[Document, str]:
        """Step forward again after an undo."""
        if not self._redo_stack:
            return Failure("Nothing to redo")

        self._undo_stack.append(self._freeze(current))
        self._enforce_limit()
        restored = self._thaw(self._redo_stack.pop())
        self._publish()
        return Success(restored)

    def clear(self) -> None:
        self._undo_stack.clear()
        self._redo_stack.clear()
        self._publish()

    @property
    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    @property
    def undo_depth(self) -> int:
        return len(self._undo_stack)

    @property
    def redo_depth(self) -> int:
        return len(self._redo_stack)

    def _enforce_limit(self) -> None:
        if self.limit and len(self._undo_stack) > self.limit:
            dropped = len(self._undo_stack) - self.limit
            del self._undo_stack[:dropped]
            logger.debug("history_trimmed", dropped=dropped, limit=self.limit)

    def _publish(self) -> None:
        metrics_collector.set_history_depth(len(self._undo_stack), len(self._redo_stack))

    @staticmethod
    def _freeze(document: Document) -> Snapshot:
        return tuple(clone_document(document))

    @staticmethod
    def _thaw(snapshot: Snapshot) -> Document:
        return clone_document(snapshot)
