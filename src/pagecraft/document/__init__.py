"""Document model: component nodes, traversal, outcomes and property metadata."""

from .models import ComponentNode, Document, OutputMode, coerce_node
from .outcome import (
    Listener,
    MutationResult,
    Outcome,
    OutcomeReporter,
    Status,
    applied,
    noop,
    outcome_of,
    rejected,
)
from .properties import (
    ELEMENT_PROPERTIES,
    PROPERTY_GROUPS,
    ElementProperty,
    generate_css_from_properties,
    is_known_property,
    unknown_properties,
)
from .tree import (
    Location,
    clone_document,
    collect_ids,
    count_nodes,
    dump_document,
    duplicate_ids,
    find_component,
    load_document,
    locate,
    walk,
)

__all__ = [
    "ComponentNode",
    "Document",
    "OutputMode",
    "coerce_node",
    "Listener",
    "MutationResult",
    "Outcome",
    "OutcomeReporter",
    "Status",
    "applied",
    "noop",
    "outcome_of",
    "rejected",
    "ELEMENT_PROPERTIES",
    "PROPERTY_GROUPS",
    "ElementProperty",
    "generate_css_from_properties",
    "is_known_property",
    "unknown_properties",
    "Location",
    "clone_document",
    "collect_ids",
    "count_nodes",
    "dump_document",
    "duplicate_ids",
    "find_component",
    "load_document",
    "locate",
    "walk",
]
