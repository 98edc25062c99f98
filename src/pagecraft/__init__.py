"""pagecraft: document engine of a visual landing-page builder."""

from .core import Settings, create_container, get_settings
from .document import ComponentNode, Document, Outcome, OutputMode, Status
from .editor import DocumentStore, Editor, create_editor
from .export import HTMLExporter, export_to_json, parse_document
from .history import HistoryManager
from .storage import JSONFileStore, KeyValueStore, MemoryStore
from .templates import Template, TemplateRegistry

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "create_container",
    "ComponentNode",
    "Document",
    "Outcome",
    "OutputMode",
    "Status",
    "DocumentStore",
    "Editor",
    "create_editor",
    "HTMLExporter",
    "export_to_json",
    "parse_document",
    "HistoryManager",
    "JSONFileStore",
    "KeyValueStore",
    "MemoryStore",
    "Template",
    "TemplateRegistry",
]
