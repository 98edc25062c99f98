"""
Persistence Collaborator
Named-slot key/value storage for documents and templates
"""

from typing import Any, Protocol, runtime_checkable


class StorageError(Exception):
    """A storage slot could not be read or written."""

    pass


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for slot storage; values are JSON-compatible data."""

    def get(self, key: str) -> Any | None:
        """Return the stored value, or None when the slot is empty"""
        ...

    def set(self, key: str, value: Any) -> None:
        """Replace the slot's value (last write wins)"""
        ...
