"""Types and data structures for MST results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Set

from primheap.graph.model import Edge, NodeID


@dataclass(frozen=True)
class PrimResult:
    """Summary of a Prim's MST run.

    Attributes:
        visit_order: Node identifiers in the order each was first recorded.
            Starts with the root.
        tree_edges: Edges that brought each non-root node into the tree, in
            visit order.
        total_weight: Sum of ``tree_edges`` weights.
        unreached: Arena nodes that never joined the tree (other components).
    """

    visit_order: List[NodeID]
    tree_edges: List[Edge] = field(default_factory=list)
    total_weight: int = 0
    unreached: Set[NodeID] = field(default_factory=set)

    @property
    def spans_all(self) -> bool:
        """True when every arena node was reached."""
        return not self.unreached

    def to_dict(self) -> dict:
        """Return a JSON-serializable representation."""
        return {
            "visit_order": list(self.visit_order),
            "tree_edges": [
                [edge.source, edge.destination, edge.weight]
                for edge in self.tree_edges
            ],
            "total_weight": self.total_weight,
            "unreached": sorted(self.unreached),
        }
