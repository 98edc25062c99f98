"""Editing surface: the document store and the editor facade."""

from .store import DocumentStore
from .facade import Editor, create_editor

__all__ = ["DocumentStore", "Editor", "create_editor"]
