"""Storage backends for persisted editor state."""

from .base import KeyValueStore, StorageError
from .memory import MemoryStore
from .file import JSONFileStore

__all__ = ["KeyValueStore", "StorageError", "MemoryStore", "JSONFileStore"]
