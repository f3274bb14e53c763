"""primheap: Prim's minimum spanning tree over a k-ary min-heap.

Primary API:
    prim_mst() - Grow a minimum spanning tree from a visited root node
    KaryMinHeap - Min-heap of weighted edges with configurable fan-out
    NodeArena, Edge - Graph entities; edges reference nodes by identifier
    from_networkx() - Build an arena and edge list from a NetworkX graph
    to_networkx() - Export an MST result as a NetworkX graph

Example:
    from primheap import Edge, NodeArena, prim_mst, format_visit_order

    arena = NodeArena.from_ids([0, 1, 2])
    edges = [Edge(0, 1, 3), Edge(1, 2, 1), Edge(0, 2, 5)]

    result = prim_mst(edges, arena, start=0)
    print(format_visit_order(result.visit_order))
"""

from __future__ import annotations

from primheap import cli, logging
from primheap._version import __version__
from primheap.algorithms.heap import HeapUnderflowError, KaryMinHeap, PollResult
from primheap.algorithms.prim import format_visit_order, prim_mst
from primheap.algorithms.types import PrimResult
from primheap.config import PRIM_CONFIG, PrimConfig
from primheap.graph.convert import from_networkx, to_networkx
from primheap.graph.model import Edge, Node, NodeArena

__all__ = [
    # Version
    "__version__",
    # Model
    "Node",
    "Edge",
    "NodeArena",
    # Algorithms
    "prim_mst",
    "format_visit_order",
    "KaryMinHeap",
    "PollResult",
    "HeapUnderflowError",
    "PrimResult",
    # Configuration
    "PrimConfig",
    "PRIM_CONFIG",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
