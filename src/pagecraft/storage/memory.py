"""In-process slot storage."""

import copy
from typing import Any

from ..core import get_logger

logger = get_logger(__name__)


class MemoryStore:
    """
    Dict-backed store for tests and embedding.

    Values are deep-copied in and out, so callers never share data with a slot.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._slots: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get(self, key: str) -> Any | None:
        value = self._slots.get(key)
        return copy.deepcopy(value) if value is not None else None

    def set(self, key: str, value: Any) -> None:
        self._slots[key] = copy.deepcopy(value)
        logger.debug("slot_written", key=key, backend="memory")

    def keys(self) -> list[str]:
        return list(self._slots)

    def __contains__(self, key: str) -> bool:
        return key in self._slots
