"""Reference example graph.

Seven nodes, eleven edges, each listed once in source-to-destination order:

    0 -3- 1,  0 -4- 2,  0 -4- 3,  1 -5- 2,  1 -4- 4,  2 -6- 3,
    2 -2- 4,  2 -7- 5,  3 -8- 5,  4 -9- 5,  5 -10- 6
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from primheap.graph.model import Edge, NodeArena, NodeID

REFERENCE_EDGES: Tuple[Tuple[NodeID, NodeID, int], ...] = (
    (0, 1, 3),
    (0, 2, 4),
    (0, 3, 4),
    (1, 2, 5),
    (1, 4, 4),
    (2, 3, 6),
    (2, 4, 2),
    (2, 5, 7),
    (3, 5, 8),
    (4, 5, 9),
    (5, 6, 10),
)

REFERENCE_NODES: Tuple[NodeID, ...] = tuple(range(7))


def reference_graph(
    start: Optional[NodeID] = 0,
    drop: Optional[Tuple[NodeID, NodeID, int]] = None,
) -> Tuple[NodeArena, List[Edge]]:
    """Build the reference graph.

    Args:
        start: Node to pre-mark visited, or None to leave all nodes unvisited.
        drop: Optional ``(source, destination, weight)`` triple to leave out.

    Returns:
        A tuple ``(arena, edges)``.

    Raises:
        ValueError: If ``drop`` names an edge that is not in the graph.
    """
    if drop is not None and tuple(drop) not in REFERENCE_EDGES:
        raise ValueError(f"Edge {tuple(drop)} is not part of the reference graph.")

    arena = NodeArena.from_ids(list(REFERENCE_NODES))
    if start is not None:
        arena.mark_visited(start)

    edges = [
        Edge(src, dst, weight)
        for src, dst, weight in REFERENCE_EDGES
        if drop is None or (src, dst, weight) != tuple(drop)
    ]
    return arena, edges
