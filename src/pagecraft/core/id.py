"""ID Generation System.

ULID-based identifiers for component nodes and templates.

- Prefixed: ``header_01J...`` makes the node kind readable in logs and exports
- K-sortable: creation order is recoverable from the id itself
- Opaque: nothing in the engine parses ids for behavior, ids are only compared
"""

from datetime import datetime
from typing import NewType
from ulid import ULID

# ============================================================================
# Type-Safe ID Wrappers
# ============================================================================

ComponentID = NewType("ComponentID", str)
"""Component node identifier"""

TemplateID = NewType("TemplateID", str)
"""Saved template identifier"""


class Prefix:
    """ID prefix constants."""

    COMPONENT = "component"
    TEMPLATE = "template"


# ============================================================================
# ULID Generator
# ============================================================================


class Generator:
    """ULID generator; ids sort by creation time at millisecond resolution."""

    def generate(self) -> str:
        """Generate a new ULID."""
        return str(ULID())

    def generate_with_prefix(self, prefix: str) -> str:
        """Generate ULID with type prefix."""
        return f"{prefix}_{self.generate()}"

    def timestamp(self, id_str: str) -> int:
        """Extract timestamp (milliseconds) from ULID."""
        try:
            ulid_str = id_str.rsplit("_", 1)[-1]
            ulid = ULID.from_str(ulid_str)
            return int(ulid.timestamp * 1000)
        except ValueError:
            return 0


_generator = Generator()


def _slug(kind: str | None) -> str:
    """Reduce a component type to an id-safe prefix."""
    if not kind:
        return Prefix.COMPONENT
    cleaned = "".join(ch if ch.isalnum() or ch == "-" else "-" for ch in kind.strip().lower())
    return cleaned.strip("-") or Prefix.COMPONENT


# ============================================================================
# Typed ID Generators
# ============================================================================


def new_component_id(kind: str | None = None) -> ComponentID:
    """Generate new component id, prefixed by its kind (``hero_01J...``)."""
    return ComponentID(_generator.generate_with_prefix(_slug(kind)))


def new_template_id() -> TemplateID:
    """Generate new template id."""
    return TemplateID(_generator.generate_with_prefix(Prefix.TEMPLATE))


# ============================================================================
# Validation and Parsing
# ============================================================================


def is_valid(id_str: str) -> bool:
    """Check if the string ends in a valid ULID (prefix optional).

    Args:
        id_str: ID string to validate

    Returns:
        True if the ULID part parses
    """
    ulid_part = id_str.rsplit("_", 1)[-1]
    if len(ulid_part) != 26:
        return False
    try:
        ULID.from_str(ulid_part)
        return True
    except ValueError:
        return False


def extract_prefix(id_str: str) -> str | None:
    """Extract prefix from a generated id, None for unprefixed ids."""
    if "_" not in id_str:
        return None
    return id_str.rsplit("_", 1)[0]


def extract_timestamp(id_str: str) -> datetime | None:
    """Extract creation time from a generated id, None for foreign ids."""
    timestamp_ms = _generator.timestamp(id_str)
    return datetime.fromtimestamp(timestamp_ms / 1000.0) if timestamp_ms > 0 else None


def is_template_id(id_str: str) -> bool:
    """Check if ID is a generated template ID."""
    return id_str.startswith(f"{Prefix.TEMPLATE}_") and is_valid(id_str)
