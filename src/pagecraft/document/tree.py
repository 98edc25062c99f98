"""Tree traversal helpers shared by every locate-then-mutate operation.

All lookups go through :func:`walk`, so tie-breaking is the same everywhere:
depth-first, root-to-leaf, first match wins.
"""

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from .models import ComponentNode, Document


@dataclass(frozen=True)
class Location:
    """Where a node lives: its owning sequence, index and parent."""

    node: ComponentNode
    siblings: list[ComponentNode]
    index: int
    parent: ComponentNode | None
    depth: int


def walk(
    nodes: list[ComponentNode],
    parent: ComponentNode | None = None,
    depth: int = 0,
) -> Iterator[Location]:
    """Yield every node of the forest in depth-first pre-order."""
    for index, node in enumerate(nodes):
        yield Location(node=node, siblings=nodes, index=index, parent=parent, depth=depth)
        if node.children:
            yield from walk(node.children, node, depth + 1)


def locate(nodes: list[ComponentNode], node_id: str) -> Location | None:
    """Find a node and its owning sequence, or None."""
    for location in walk(nodes):
        if location.node.id == node_id:
            return location
    return None


def find_component(nodes: list[ComponentNode], node_id: str) -> ComponentNode | None:
    """Find a node at any depth, or None."""
    location = locate(nodes, node_id)
    return location.node if location else None


def collect_ids(nodes: list[ComponentNode]) -> list[str]:
    """All ids of the forest, descendants included, in traversal order."""
    return [location.node.id for location in walk(nodes)]


def duplicate_ids(*forests: list[ComponentNode]) -> set[str]:
    """Ids that occur more than once across the given forests."""
    counts = Counter(node_id for forest in forests for node_id in collect_ids(forest))
    return {node_id for node_id, count in counts.items() if count > 1}


def clone_document(nodes: Iterable[ComponentNode]) -> Document:
    """Structural deep copy; shares nothing with the source."""
    return [node.model_copy(deep=True) for node in nodes]


def dump_document(nodes: Iterable[ComponentNode]) -> list[dict[str, Any]]:
    """Plain JSON-ready data for a forest."""
    return [node.to_dict() for node in nodes]


def load_document(data: Sequence[Any]) -> Document:
    """
    Validate plain data into nodes.

    Raises:
        pydantic.ValidationError: If an entry is not a valid node
    """
    return [ComponentNode.model_validate(item) for item in data]


def count_nodes(nodes: list[ComponentNode]) -> int:
    """Number of nodes in the forest, descendants included."""
    return sum(1 for _ in walk(nodes))
