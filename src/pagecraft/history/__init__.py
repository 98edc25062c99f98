"""Undo/redo history for the document engine."""

from .manager import HistoryManager, Snapshot

__all__ = ["HistoryManager", "Snapshot"]
