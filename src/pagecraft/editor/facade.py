"""
Editor Facade
One document store, one template registry and one exporter behind a single object
"""

from collections.abc import Callable

from returns.pipeline import is_successful

from ..core import Settings, get_logger, get_settings
from ..document.models import OutputMode
from ..document.outcome import Listener, MutationResult
from ..export import HTMLExporter, export_to_json
from ..storage import KeyValueStore
from ..templates import TemplateRegistry
from .store import DocumentStore

logger = get_logger(__name__)


class Editor:
    """
    Serialization and template operations over the live document.

    Structural edits go straight to :attr:`store`.
    """

    def __init__(
        self,
        store: DocumentStore,
        templates: TemplateRegistry,
        exporter: HTMLExporter,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.store = store
        self.templates = templates
        self.exporter = exporter

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Observe outcomes of both the store and the registry."""
        unsubscribers = [self.store.subscribe(listener), self.templates.subscribe(listener)]

        def unsubscribe() -> None:
            for fn in unsubscribers:
                fn()

        return unsubscribe

    def export_to_html(self, mode: OutputMode | None = None) -> str:
        """Full HTML page in ``mode``, defaulting to the store's output type."""
        return self.exporter.export(self.store.components, mode or self.store.output_type)

    def export_to_json(self) -> str:
        return export_to_json(self.store.components, indent=self.settings.json_indent)

    def import_from_json(self, text: str) -> MutationResult:
        return self.store.import_from_json(text)

    def save_template(self, name: str) -> MutationResult:
        return self.templates.save_template(name, self.store.components)

    def load_template(self, template_id: str) -> MutationResult:
        """Replace the document with a copy of the template (checkpointed)."""
        loaded = self.templates.load_template(template_id)
        if not is_successful(loaded):
            return loaded
        return self.store.replace_document(
            loaded.unwrap(),
            action_name="load_template",
            message="Template loaded",
        )

    def delete_template(self, template_id: str) -> MutationResult:
        return self.templates.delete_template(template_id)


def create_editor(settings: Settings | None = None, storage: KeyValueStore | None = None) -> Editor:
    """Build an editor wired by the dependency container."""
    from ..core import create_container

    return create_container(settings, storage).get(Editor)
