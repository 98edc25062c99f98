"""Document Data Models."""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..core.id import new_component_id


class OutputMode(str, Enum):
    """Styling strategy used by the HTML exporter."""

    UTILITY_CLASSES = "tailwind"
    INLINE_STYLES = "inline-styles"
    CSS_CLASSES = "css-classes"

    @classmethod
    def parse(cls, value: Any) -> "OutputMode | None":
        """Return the matching mode, or None for anything outside the closed set."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


# JSON name -> attribute name for declared fields whose names differ
_ATTRIBUTE_NAMES = {"customStyles": "custom_styles"}


def _declared(key: str) -> str | None:
    """Attribute name of a declared field given its JSON name; None for extras."""
    if key in _ATTRIBUTE_NAMES:
        return _ATTRIBUTE_NAMES[key]
    if key in ComponentNode.model_fields and key not in _ATTRIBUTE_NAMES.values():
        return key
    return None


class ComponentNode(BaseModel):
    """One element of the editable document tree.

    Kind-specific fields (``heading``, ``items``, ``rows``, ``imageUrl``, ...)
    are kept verbatim as extra fields. Only fields that were actually given or
    assigned are dumped, so ``children`` absent and ``children: []`` survive
    a JSON round-trip as different documents.
    """

    model_config = ConfigDict(
        extra="allow",
        coerce_numbers_to_str=True,
        validate_assignment=True,
    )

    id: str = Field(..., min_length=1, description="Unique identifier")
    type: str = Field(..., description="Component kind")
    content: Any = Field(default=None, description="Primary text content")
    classes: str | None = Field(default=None, description="Utility CSS classes")
    custom_styles: dict[str, Any] | None = Field(default=None, alias="customStyles")
    children: list["ComponentNode"] | None = Field(default=None)

    @model_validator(mode="before")
    @classmethod
    def assign_id(cls, data: Any) -> Any:
        """Give id-less nodes a generated, kind-prefixed id."""
        if isinstance(data, Mapping) and not data.get("id"):
            data = {**data, "id": new_component_id(data.get("type"))}
        return data

    def get(self, key: str, default: Any = None) -> Any:
        """Read a declared or extra field by its JSON name."""
        name = _declared(key)
        if name is not None:
            value = getattr(self, name)
        else:
            value = (self.__pydantic_extra__ or {}).get(key)
        return default if value is None else value

    def merge(self, patch: Mapping[str, Any]) -> None:
        """
        Shallow-merge a partial field mapping into this node.

        Declared fields are validated on assignment; any other key is kept
        verbatim as an extra field.

        Args:
            patch: Fields by JSON name

        Raises:
            ValueError: If the patch changes the id or uses a private name
            pydantic.ValidationError: If a declared field gets a value of the wrong shape
        """
        for key, value in patch.items():
            if not isinstance(key, str) or key.startswith("_"):
                raise ValueError(f"Invalid field name: {key}")
            name = _declared(key)
            if name == "id":
                if value != self.id:
                    raise ValueError("Component id cannot be changed")
                continue
            if name == "children" and isinstance(value, (list, tuple)):
                value = [coerce_node(child) for child in value]
            if name is not None:
                setattr(self, name, value)
            else:
                self.__pydantic_extra__[key] = value

    def ensure_styles(self) -> dict[str, Any]:
        """Initialize ``customStyles`` to an empty mapping on first use."""
        if self.custom_styles is None:
            self.custom_styles = {}
        return self.custom_styles

    def to_dict(self) -> dict[str, Any]:
        """Dump with JSON names, emitting only fields that were set."""
        return self.model_dump(by_alias=True, exclude_unset=True)


ComponentNode.model_rebuild()


def coerce_node(value: "ComponentNode | Mapping[str, Any]") -> ComponentNode:
    """Validate a node and detach it from the caller's objects."""
    node = value if isinstance(value, ComponentNode) else ComponentNode.model_validate(value)
    return node.model_copy(deep=True)

Document = list[ComponentNode]
"""Ordered forest of root component nodes."""
