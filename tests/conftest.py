"""Pytest configuration and fixtures."""

import os

import pytest

from pagecraft.core import Settings, create_container
from pagecraft.document import ComponentNode
from pagecraft.editor import DocumentStore, Editor
from pagecraft.export import HTMLExporter
from pagecraft.history import HistoryManager
from pagecraft.storage import MemoryStore
from pagecraft.templates import TemplateRegistry


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["PAGECRAFT_LOG_LEVEL"] = "DEBUG"


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return Settings(enable_cache=False)


@pytest.fixture
def storage():
    """Empty in-memory slot storage."""
    return MemoryStore()


@pytest.fixture
def history():
    return HistoryManager()


@pytest.fixture
def store(settings, history, storage):
    """Document store backed by memory storage."""
    return DocumentStore(settings=settings, history=history, storage=storage)


@pytest.fixture
def registry(settings, storage):
    """Template registry seeded into memory storage."""
    return TemplateRegistry(storage=storage, settings=settings)


@pytest.fixture
def exporter(settings):
    return HTMLExporter(settings)


@pytest.fixture
def di_container(settings, storage):
    """Dependency injection container for testing."""
    return create_container(settings, storage)


@pytest.fixture
def editor(di_container):
    return di_container.get(Editor)


@pytest.fixture
def outcomes(store):
    """Outcomes reported by the store, in order."""
    seen = []
    store.subscribe(seen.append)
    return seen


# ============================================================================
# Document Fixtures
# ============================================================================

@pytest.fixture
def header_node():
    return {"id": "h1", "type": "header", "content": "Hi"}


@pytest.fixture
def nested_document():
    """Three roots; the container holds a grid which holds a paragraph."""
    return [
        ComponentNode(id="a", type="header", content="A"),
        ComponentNode(
            id="box",
            type="container",
            children=[
                ComponentNode(
                    id="grid",
                    type="grid",
                    children=[ComponentNode(id="deep", type="paragraph", content="Deep")],
                ),
            ],
        ),
        ComponentNode(id="c", type="button", content="C"),
    ]


@pytest.fixture
def populated_store(store, nested_document):
    """Store holding :func:`nested_document`, with history cleared."""
    store.replace_document(nested_document)
    store.history.clear()
    return store
