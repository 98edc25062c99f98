"""Dependency Injection Container."""

from pathlib import Path

from injector import Injector, Module, provider, singleton

from .config import Settings, get_settings
from .logging_config import configure_from_settings
from ..editor import DocumentStore, Editor
from ..export import HTMLExporter
from ..history import HistoryManager
from ..storage import JSONFileStore, KeyValueStore
from ..templates import TemplateRegistry


class EngineModule(Module):
    """Engine dependencies."""

    def __init__(self, settings: Settings | None = None, storage: KeyValueStore | None = None) -> None:
        self.settings = settings or get_settings()
        self.storage = storage

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        return self.settings

    @singleton
    @provider
    def provide_storage(self, settings: Settings) -> KeyValueStore:
        """Provide the given storage, or JSON files under the configured directory."""
        if self.storage is not None:
            return self.storage
        return JSONFileStore(Path(settings.storage_dir), indent=settings.json_indent)

    @singleton
    @provider
    def provide_history(self, settings: Settings) -> HistoryManager:
        return HistoryManager(limit=settings.history_limit)

    @singleton
    @provider
    def provide_document_store(
        self, settings: Settings, history: HistoryManager, storage: KeyValueStore
    ) -> DocumentStore:
        return DocumentStore(settings=settings, history=history, storage=storage)

    @singleton
    @provider
    def provide_template_registry(self, settings: Settings, storage: KeyValueStore) -> TemplateRegistry:
        return TemplateRegistry(storage=storage, settings=settings)

    @singleton
    @provider
    def provide_html_exporter(self, settings: Settings) -> HTMLExporter:
        return HTMLExporter(settings)

    @singleton
    @provider
    def provide_editor(
        self,
        settings: Settings,
        store: DocumentStore,
        templates: TemplateRegistry,
        exporter: HTMLExporter,
    ) -> Editor:
        return Editor(store=store, templates=templates, exporter=exporter, settings=settings)


def create_container(settings: Settings | None = None, storage: KeyValueStore | None = None) -> Injector:
    """Create configured injector."""
    module = EngineModule(settings, storage)
    configure_from_settings(module.settings)
    return Injector([module])
