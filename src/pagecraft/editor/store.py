"""
Document Store
The only sanctioned mutation surface of the live document
"""

import copy
import functools
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from returns.pipeline import is_successful

from ..core import LogContext, Settings, get_logger, get_settings, hash_json
from ..document.models import ComponentNode, Document, OutputMode, coerce_node
from ..document.outcome import (
    Listener,
    MutationResult,
    OutcomeReporter,
    applied,
    noop,
    rejected,
)
from ..document.properties import unknown_properties
from ..document.tree import (
    clone_document,
    count_nodes,
    dump_document,
    duplicate_ids,
    find_component,
    load_document,
    locate,
)
from ..export.json_codec import parse_document
from ..history import HistoryManager
from ..monitoring import metrics_collector
from ..storage import KeyValueStore, StorageError

logger = get_logger(__name__)

Command = Callable[[Document], MutationResult]
"""Edits a draft document in place and says whether the edit should be kept."""


def action(name: str):
    """Bind the action name to every log line emitted while the operation runs."""

    def decorator(method):
        @functools.wraps(method)
        def wrapper(*args: Any, **kwargs: Any):
            with LogContext(action=name):
                return method(*args, **kwargs)

        return wrapper

    return decorator


def _invalid(action_name: str, error: PydanticValidationError) -> MutationResult:
    return rejected(action_name, f"Invalid component: {error.errors()[0]['msg']}")


class DocumentStore:
    """
    Holds the live document plus non-historical editor state.

    Every structural mutator is a command run against a deep clone of the live
    document. Only a successful command is installed, and only then is the
    previous document checkpointed, so a rejected or no-op call leaves both the
    document and the history exactly as they were.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        history: HistoryManager | None = None,
        storage: KeyValueStore | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.history = history if history is not None else HistoryManager(self.settings.history_limit)
        self.storage = storage
        self.reporter = OutcomeReporter(logger)

        self.selected_id: str | None = None
        self.dragging_id: str | None = None
        self.is_preview_mode = False
        self.output_type = OutputMode.parse(self.settings.default_output_type) or OutputMode.UTILITY_CLASSES

        self._document: Document = self._restore()
        metrics_collector.set_document_nodes(count_nodes(self._document))

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _restore(self) -> Document:
        if self.storage is None:
            return []

        try:
            data = self.storage.get(self.settings.document_key)
        except StorageError as e:
            logger.error("document_restore_failed", key=self.settings.document_key, error=str(e))
            return []
        if data is None:
            return []

        try:
            document = load_document(data)
        except (PydanticValidationError, TypeError) as e:
            logger.error("document_restore_failed", key=self.settings.document_key, error=str(e))
            return []

        duplicates = duplicate_ids(document)
        if duplicates:
            logger.error("document_restore_failed", key=self.settings.document_key, duplicates=sorted(duplicates))
            return []

        logger.info("document_restored", key=self.settings.document_key, roots=len(document))
        return document

    def _persist(self) -> None:
        if self.storage is None:
            return
        try:
            self.storage.set(self.settings.document_key, dump_document(self._document))
        except StorageError as e:
            logger.error("document_persist_failed", key=self.settings.document_key, error=str(e))

    def _on_applied(self) -> None:
        self._persist()
        metrics_collector.set_document_nodes(count_nodes(self._document))

    # ------------------------------------------------------------------
    # Command pipeline
    # ------------------------------------------------------------------

    def _apply(self, command: Command, then: Callable[[], None] | None = None) -> MutationResult:
        draft = clone_document(self._document)
        result = command(draft)
        if is_successful(result):
            self.history.checkpoint(self._document)
            self._document = draft
            if then is not None:
                then()
            self._on_applied()
        return self.reporter.report(result)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Observe every outcome; returns an unsubscribe function."""
        return self.reporter.subscribe(listener)

    # ------------------------------------------------------------------
    # Structural mutators
    # ------------------------------------------------------------------

    @action("add_component")
    def add_component(self, node: ComponentNode | Mapping[str, Any]) -> MutationResult:
        """Append a node to the root sequence and select it."""
        try:
            component = coerce_node(node)
        except PydanticValidationError as e:
            return self.reporter.report(_invalid("add_component", e))
        component.ensure_styles()

        def command(draft: Document) -> MutationResult:
            clash = duplicate_ids(draft, [component])
            if clash:
                return rejected("add_component", f"Duplicate component ids: {', '.join(sorted(clash))}", component.id)
            draft.append(component)
            return applied("add_component", "Component added", component.id)

        return self._apply(command, then=lambda: self.select_component(component.id))

    @action("update_component")
    def update_component(self, node_id: str, patch: Mapping[str, Any]) -> MutationResult:
        """Shallow-merge ``patch`` into the node, wherever it lives."""
        if not isinstance(patch, Mapping):
            return self.reporter.report(rejected("update_component", "Patch must be a mapping", node_id))
        if not patch:
            return self.reporter.report(noop("update_component", "Nothing to update", node_id))
        fields = copy.deepcopy(dict(patch))

        def command(draft: Document) -> MutationResult:
            location = locate(draft, node_id)
            if location is None:
                return noop("update_component", "Component not found", node_id)
            try:
                location.node.merge(fields)
            except PydanticValidationError as e:
                return _invalid("update_component", e)
            except ValueError as e:
                return rejected("update_component", str(e), node_id)
            clash = duplicate_ids(draft)
            if clash:
                return rejected("update_component", f"Duplicate component ids: {', '.join(sorted(clash))}", node_id)
            return applied("update_component", "Component updated", node_id)

        return self._apply(command)

    @action("update_component_styles")
    def update_component_styles(self, node_id: str, styles: Mapping[str, Any]) -> MutationResult:
        """Merge ``styles`` into the node's ``customStyles``; other fields are untouched."""
        if not isinstance(styles, Mapping):
            return self.reporter.report(rejected("update_component_styles", "Styles must be a mapping", node_id))
        if not styles:
            return self.reporter.report(noop("update_component_styles", "Nothing to update", node_id))

        unknown = unknown_properties(styles)
        if unknown:
            logger.warning("unknown_style_properties", node_id=node_id, properties=unknown)
        values = copy.deepcopy(dict(styles))

        def command(draft: Document) -> MutationResult:
            location = locate(draft, node_id)
            if location is None:
                return noop("update_component_styles", "Component not found", node_id)
            location.node.ensure_styles().update(values)
            return applied("update_component_styles", "Styles updated", node_id)

        return self._apply(command)

    @action("remove_component")
    def remove_component(self, node_id: str) -> MutationResult:
        """Remove the node from the root sequence or from whichever parent holds it."""

        def command(draft: Document) -> MutationResult:
            location = locate(draft, node_id)
            if location is None:
                return noop("remove_component", "Component not found", node_id)
            del location.siblings[location.index]
            return applied("remove_component", "Component removed", node_id)

        return self._apply(command, then=self.clear_selection)

    @action("move_component")
    def move_component(self, old_index: int, new_index: int) -> MutationResult:
        """
        Reorder root-level nodes.

        Equal or negative indices are ignored (NOOP); an index past the end of
        the root sequence is rejected.
        """
        if not all(isinstance(i, int) and not isinstance(i, bool) for i in (old_index, new_index)):
            return self.reporter.report(rejected("move_component", "Indices must be integers"))
        if old_index == new_index or old_index < 0 or new_index < 0:
            return self.reporter.report(noop("move_component", "Move ignored"))

        def command(draft: Document) -> MutationResult:
            if old_index >= len(draft) or new_index >= len(draft):
                return rejected(
                    "move_component",
                    f"Index out of range: {old_index} -> {new_index} with {len(draft)} components",
                )
            node = draft.pop(old_index)
            draft.insert(new_index, node)
            return applied("move_component", "Component moved", node.id)

        return self._apply(command)

    @action("add_child_to_container")
    def add_child_to_container(self, parent_id: str, child: ComponentNode | Mapping[str, Any]) -> MutationResult:
        """Append a node to the children of any node in the forest and select it."""
        try:
            component = coerce_node(child)
        except PydanticValidationError as e:
            return self.reporter.report(_invalid("add_child_to_container", e))

        def command(draft: Document) -> MutationResult:
            location = locate(draft, parent_id)
            if location is None:
                return noop("add_child_to_container", "Parent component not found", parent_id)
            clash = duplicate_ids(draft, [component])
            if clash:
                return rejected(
                    "add_child_to_container",
                    f"Duplicate component ids: {', '.join(sorted(clash))}",
                    component.id,
                )
            parent = location.node
            if parent.children is None:
                parent.children = []
            parent.children.append(component)
            return applied("add_child_to_container", "Component added to container", component.id)

        return self._apply(command, then=lambda: self.select_component(component.id))

    @action("remove_child_from_container")
    def remove_child_from_container(self, parent_id: str, child_id: str) -> MutationResult:
        """Remove a direct child of ``parent_id``; deeper descendants are not searched."""

        def command(draft: Document) -> MutationResult:
            location = locate(draft, parent_id)
            if location is None:
                return noop("remove_child_from_container", "Parent component not found", parent_id)
            children = location.node.children or []
            index = next((i for i, c in enumerate(children) if c.id == child_id), None)
            if index is None:
                return noop("remove_child_from_container", "Child component not found", child_id)
            del children[index]
            return applied("remove_child_from_container", "Component removed from container", child_id)

        return self._apply(command, then=self.clear_selection)

    @action("clear_canvas")
    def clear_canvas(self) -> MutationResult:
        def command(draft: Document) -> MutationResult:
            draft.clear()
            return applied("clear_canvas", "Canvas cleared")

        return self._apply(command, then=self.clear_selection)

    @action("replace_document")
    def replace_document(
        self,
        document: Sequence[ComponentNode | Mapping[str, Any]],
        action_name: str = "replace_document",
        message: str = "Document replaced",
    ) -> MutationResult:
        """Install a whole new document (import, template load) with a checkpoint."""
        try:
            nodes = [coerce_node(node) for node in document]
        except PydanticValidationError as e:
            return self.reporter.report(_invalid(action_name, e))

        clash = duplicate_ids(nodes)
        if clash:
            return self.reporter.report(rejected(action_name, f"Duplicate component ids: {', '.join(sorted(clash))}"))

        def command(draft: Document) -> MutationResult:
            draft[:] = nodes
            return applied(action_name, message)

        return self._apply(command)

    @action("import_from_json")
    def import_from_json(self, text: str) -> MutationResult:
        """Replace the document with a JSON array of nodes; anything else is rejected."""
        parsed = parse_document(
            text,
            max_size=self.settings.max_import_size,
            max_depth=self.settings.max_json_depth,
        )
        if not is_successful(parsed):
            logger.warning("import_rejected", reason=parsed.failure())
            return self.reporter.report(rejected("import_from_json", parsed.failure()))
        return self.replace_document(
            parsed.unwrap(),
            action_name="import_from_json",
            message="Components imported successfully",
        )

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    @action("undo")
    def undo(self) -> MutationResult:
        restored = self.history.undo(self._document)
        if not is_successful(restored):
            return self.reporter.report(noop("undo", restored.failure()))
        self._document = restored.unwrap()
        self._on_applied()
        return self.reporter.report(applied("undo", "Undo successful"))

    @action("redo")
    def redo(self) -> MutationResult:
        restored = self.history.redo(self._document)
        if not is_successful(restored):
            return self.reporter.report(noop("redo", restored.failure()))
        self._document = restored.unwrap()
        self._on_applied()
        return self.reporter.report(applied("redo", "Redo successful"))

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    # ------------------------------------------------------------------
    # Non-historical state
    # ------------------------------------------------------------------

    def select_component(self, node_id: str | None) -> None:
        self.selected_id = node_id

    def set_dragging(self, node_id: str | None) -> None:
        self.dragging_id = node_id

    def clear_selection(self) -> None:
        self.selected_id = None

    def toggle_preview_mode(self) -> bool:
        self.is_preview_mode = not self.is_preview_mode
        return self.is_preview_mode

    @action("set_output_type")
    def set_output_type(self, mode: OutputMode | str) -> MutationResult:
        """Switch the HTML styling strategy; values outside the closed set are rejected."""
        parsed = OutputMode.parse(mode)
        if parsed is None:
            return self.reporter.report(rejected("set_output_type", f"Invalid output type: {mode!r}"))
        self.output_type = parsed
        return self.reporter.report(applied("set_output_type", f"Output type set to {parsed.value}"))

    # ------------------------------------------------------------------
    # Read views
    # ------------------------------------------------------------------

    def find_component_by_id(
        self, node_id: str, scope: Sequence[ComponentNode] | None = None
    ) -> ComponentNode | None:
        """
        Depth-first lookup at any nesting level.

        Args:
            node_id: Id to look for
            scope: Forest to search instead of the live document

        Returns:
            A copy of the first match, or None
        """
        found = find_component(list(scope) if scope is not None else self._document, node_id)
        return found.model_copy(deep=True) if found is not None else None

    @property
    def selected_component(self) -> ComponentNode | None:
        if not self.selected_id:
            return None
        return self.find_component_by_id(self.selected_id)

    @property
    def components(self) -> Document:
        """Deep copy of the live document."""
        return clone_document(self._document)

    document = components

    def snapshot(self) -> list[dict[str, Any]]:
        """The live document as plain JSON data."""
        return dump_document(self._document)

    @property
    def document_digest(self) -> str:
        return hash_json(self.snapshot())

    def __len__(self) -> int:
        return len(self._document)
