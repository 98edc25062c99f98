"""
Template Registry
Named, persisted snapshots of whole documents
"""

from collections.abc import Callable, Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from returns.pipeline import is_successful
from returns.result import Result, Success

from ..core import Settings, get_logger, get_settings, new_template_id, validate_template_name
from ..document.models import ComponentNode, Document
from ..document.outcome import (
    Listener,
    MutationResult,
    Outcome,
    OutcomeReporter,
    applied,
    noop,
    rejected,
)
from ..document.tree import clone_document, dump_document
from ..storage import KeyValueStore, StorageError
from .presets import SEED_TEMPLATES

logger = get_logger(__name__)


class Template(BaseModel):
    """A saved document. Never mutated in place once registered."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    components: list[ComponentNode] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "components": dump_document(self.components)}


def _seeds() -> list[Template]:
    return [Template.model_validate(seed) for seed in SEED_TEMPLATES]


class TemplateRegistry:
    """
    Holds every saved template and keeps the storage slot in sync.

    The seed templates are written on first run only, when the slot is empty.
    Templates go in and come out as deep copies, so the live document and the
    stored templates never share nodes.
    """

    def __init__(self, storage: KeyValueStore, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.storage = storage
        self.reporter = OutcomeReporter(logger)
        self._templates: list[Template] = self._restore()

    def _restore(self) -> list[Template]:
        try:
            data = self.storage.get(self.settings.templates_key)
        except StorageError as e:
            # Slot is left as-is; the next save overwrites it
            logger.error("templates_restore_failed", key=self.settings.templates_key, error=str(e))
            return _seeds()

        if data is None:
            templates = _seeds()
            self._persist(templates)
            logger.info("templates_seeded", count=len(templates))
            return templates

        try:
            templates = [Template.model_validate(item) for item in data]
        except (PydanticValidationError, TypeError) as e:
            # Slot is left as-is; the next save overwrites it
            logger.error("templates_restore_failed", key=self.settings.templates_key, error=str(e))
            return _seeds()

        logger.info("templates_restored", count=len(templates))
        return templates

    def _persist(self, templates: Iterable[Template] | None = None) -> None:
        items = self._templates if templates is None else templates
        try:
            self.storage.set(self.settings.templates_key, [template.to_dict() for template in items])
        except StorageError as e:
            logger.error("templates_persist_failed", key=self.settings.templates_key, error=str(e))

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self.reporter.subscribe(listener)

    def save_template(self, name: Any, document: Iterable[ComponentNode]) -> MutationResult:
        """
        Register a deep copy of ``document`` under ``name``.

        Args:
            name: Template name; surrounding whitespace is stripped
            document: Document to snapshot

        Returns:
            Success with the new template id as target, or a rejection for an empty name
        """
        validated = validate_template_name(name)
        if not is_successful(validated):
            return self.reporter.report(rejected("save_template", validated.failure().message))

        template = Template(id=new_template_id(), name=validated.unwrap(), components=clone_document(document))
        self._templates.append(template)
        self._persist()
        return self.reporter.report(applied("save_template", "Template saved", template.id))

    def load_template(self, template_id: str) -> Result[Document, Outcome]:
        """A fresh copy of a template's components, or a NOOP failure when it does not exist."""
        template = self._find(template_id)
        if template is None:
            return self.reporter.report(noop("load_template", "Template not found", template_id))
        return Success(clone_document(template.components))

    def delete_template(self, template_id: str) -> MutationResult:
        template = self._find(template_id)
        if template is None:
            return self.reporter.report(noop("delete_template", "Template not found", template_id))

        self._templates.remove(template)
        self._persist()
        return self.reporter.report(applied("delete_template", "Template deleted", template_id))

    def get(self, template_id: str) -> Template | None:
        template = self._find(template_id)
        return template.model_copy(deep=True) if template else None

    @property
    def templates(self) -> list[Template]:
        """Copies of every template, in registration order."""
        return [template.model_copy(deep=True) for template in self._templates]

    def _find(self, template_id: str) -> Template | None:
        return next((t for t in self._templates if t.id == template_id), None)

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, template_id: str) -> bool:
        return self._find(template_id) is not None
