"""Node, edge, and node-arena entities.

Nodes live in a `NodeArena` indexed by their integer identifier. Edges hold
identifiers (handles) rather than node objects, so marking a node visited
through the arena is observed by every edge referencing that node.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List

NodeID = int


@dataclass
class Node:
    """A graph node with a one-way ``visited`` flag.

    Attributes:
        node_id: Stable integer identifier.
        visited: False until the node joins a spanning tree; never reverts.
    """

    node_id: NodeID
    visited: bool = False

    def mark_visited(self) -> None:
        """Set the visited flag. Repeated calls are no-ops."""
        self.visited = True


@dataclass(frozen=True)
class Edge:
    """Immutable weighted edge between two node handles.

    Equality is structural: two edges are equal when they share source,
    destination, and weight.

    Attributes:
        source: Identifier of the source node.
        destination: Identifier of the destination node.
        weight: Non-negative integer weight (not validated).
    """

    source: NodeID
    destination: NodeID
    weight: int

    def reversed(self) -> Edge:
        """Return the same edge in the opposite orientation."""
        return Edge(self.destination, self.source, self.weight)

    def matches(self, source: NodeID, destination: NodeID, weight: int) -> bool:
        """Return True if this edge has the given endpoints and weight."""
        return (
            self.source == source
            and self.destination == destination
            and self.weight == weight
        )


class NodeArena:
    """Owner of all nodes of a graph, indexed by identifier.

    This class enforces:
      - No duplicate node identifiers (raises ValueError).
      - Lookups of unknown identifiers raise KeyError.
      - Visited flags only ever go from False to True.
    """

    def __init__(self) -> None:
        self._nodes: Dict[NodeID, Node] = {}

    @classmethod
    def from_ids(cls, node_ids: List[NodeID]) -> NodeArena:
        """Create an arena with one unvisited node per identifier."""
        arena = cls()
        for node_id in node_ids:
            arena.add_node(node_id)
        return arena

    def add_node(self, node_id: NodeID, visited: bool = False) -> Node:
        """Add a node, disallowing duplicates.

        Args:
            node_id: Identifier of the new node.
            visited: Initial visited flag.

        Returns:
            The created node.

        Raises:
            ValueError: If the identifier is already present.
        """
        if node_id in self._nodes:
            raise ValueError(f"Node '{node_id}' already exists in this arena.")
        node = Node(node_id, visited)
        self._nodes[node_id] = node
        return node

    def node(self, node_id: NodeID) -> Node:
        """Return the node with the given identifier.

        Raises:
            KeyError: If the identifier is unknown.
        """
        try:
            return self._nodes[node_id]
        except KeyError:
            raise KeyError(f"Node '{node_id}' does not exist.") from None

    def mark_visited(self, node_id: NodeID) -> None:
        self.node(node_id).mark_visited()

    def is_visited(self, node_id: NodeID) -> bool:
        return self.node(node_id).visited

    def visited_nodes(self) -> List[NodeID]:
        """Return identifiers of visited nodes in insertion order."""
        return [node_id for node_id, node in self._nodes.items() if node.visited]

    def copy(self) -> NodeArena:
        """Return an arena with the same nodes and independent visited flags."""
        clone = NodeArena()
        for node in self._nodes.values():
            clone.add_node(node.node_id, node.visited)
        return clone

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"NodeArena(nodes={len(self._nodes)}, visited={len(self.visited_nodes())})"
