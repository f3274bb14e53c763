"""Conversion utilities between NetworkX graphs and primheap inputs/results.

Undirected graphs are expanded into both edge orientations so the MST driver,
which only follows source-to-destination edges, can reach every neighbor.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import networkx as nx

from primheap.algorithms.types import PrimResult
from primheap.graph.model import Edge, NodeArena, NodeID


def from_networkx(
    nx_graph: nx.Graph,
    weight: str = "weight",
    start: Optional[NodeID] = None,
) -> Tuple[NodeArena, List[Edge]]:
    """Convert a NetworkX graph to a node arena and an edge list.

    Edges are emitted in ``nx_graph.edges`` order. For undirected graphs each
    edge contributes its forward orientation followed by its reverse.
    Multigraph parallel edges are kept as separate entries.

    Args:
        nx_graph: Source graph with integer node labels.
        weight: Edge attribute holding the integer weight.
        start: Optional node to pre-mark visited.

    Returns:
        A tuple ``(arena, edges)``.

    Raises:
        TypeError: If a node label is not an integer.
        KeyError: If an edge lacks the weight attribute, or ``start`` is
            not a node of the graph.
        ValueError: If a weight is not a whole number.
    """
    arena = NodeArena()
    for node in nx_graph.nodes:
        if isinstance(node, bool) or not isinstance(node, int):
            raise TypeError(f"Node labels must be integers, got {node!r}.")
        arena.add_node(node)

    edges: List[Edge] = []
    for u, v, data in nx_graph.edges(data=True):
        if weight not in data:
            raise KeyError(f"Edge ({u}, {v}) has no '{weight}' attribute.")
        value = data[weight]
        if int(value) != value:
            raise ValueError(
                f"Edge ({u}, {v}) weight {value!r} is not a whole number."
            )
        edge = Edge(u, v, int(value))
        edges.append(edge)
        if not nx_graph.is_directed():
            edges.append(edge.reversed())

    if start is not None:
        arena.mark_visited(start)
    return arena, edges


def to_networkx(result: PrimResult, weight: str = "weight") -> nx.Graph:
    """Build an undirected NetworkX graph holding the spanning tree.

    Args:
        result: Output of `prim_mst`.
        weight: Attribute name for edge weights.

    Returns:
        Graph with the visited nodes and the tree edges.
    """
    tree = nx.Graph()
    tree.add_nodes_from(result.visit_order)
    for edge in result.tree_edges:
        tree.add_edge(edge.source, edge.destination, **{weight: edge.weight})
    return tree
