"""Prim's minimum spanning tree driven by a k-ary min-heap.

The driver grows the tree from a single visited root. After every extraction
it looks for edges that cross the visited/unvisited cut and are not yet
pending in the heap. Two discovery strategies are available:

- Full re-scan of the edge list (default). O(E) per extraction.
- Per-source adjacency index. Only edges leaving the newly visited node can
  start crossing the cut, and the index keeps them in edge-list order, so
  both strategies insert the same edges in the same order and produce the
  same visit order.

Nodes outside the root's connected component never join the tree. They are
reported in `PrimResult.unreached`; no error is raised.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence

from primheap.algorithms.heap import KaryMinHeap
from primheap.algorithms.types import PrimResult
from primheap.config import PRIM_CONFIG
from primheap.graph.model import Edge, NodeArena, NodeID
from primheap.logging import get_logger

logger = get_logger(__name__)

VISIT_ORDER_LABEL = "Prim's MST (in order of node visited)"


def _resolve_start(arena: NodeArena, start: Optional[NodeID]) -> NodeID:
    """Return the root node, marking it visited when given explicitly.

    Raises:
        KeyError: If ``start`` is not in the arena.
        ValueError: If the arena does not hold exactly one visited node
            once ``start`` (when given) is marked.
    """
    if start is not None:
        arena.mark_visited(start)

    visited = arena.visited_nodes()
    if len(visited) != 1:
        raise ValueError(
            f"Expected exactly one pre-visited start node, found {len(visited)}: "
            f"{visited}"
        )
    return visited[0]


def _crosses_cut(arena: NodeArena, edge: Edge) -> bool:
    return arena.is_visited(edge.source) and not arena.is_visited(edge.destination)


def _push_new_frontier(
    heap: KaryMinHeap, arena: NodeArena, candidates: Iterable[Edge]
) -> int:
    """Insert cut-crossing candidates not already pending. Returns the count."""
    added = 0
    for edge in candidates:
        if _crosses_cut(arena, edge) and not heap.contains_edge(
            edge.source, edge.destination, edge.weight
        ):
            heap.add(edge)
            added += 1
    return added


def prim_mst(
    edges: Sequence[Edge],
    arena: NodeArena,
    start: Optional[NodeID] = None,
    *,
    branching_factor: Optional[int] = None,
    use_adjacency_index: Optional[bool] = None,
) -> PrimResult:
    """Compute a minimum spanning tree with Prim's algorithm.

    The arena's visited flags are updated in place. Use ``arena.copy()`` to
    keep the caller's arena untouched or to run several computations over the
    same nodes.

    The visit order among equal-weight edges depends on the branching
    factor: the reference graph visits [0, 1, 4, 2, 3, 5, 6] with k=2 and
    [0, 1, 4, 3, 2, 5, 6] with k=3. Tree weight does not change.

    Args:
        edges: Directed edges. Supply both orientations for undirected graphs.
        arena: Nodes referenced by ``edges``.
        start: Root node, marked visited here. When None, the arena's
            single pre-visited node is used. Either way no other node may be
            pre-visited.
        branching_factor: Heap fan-out. Defaults to
            ``PRIM_CONFIG.branching_factor``.
        use_adjacency_index: Discover frontier edges via a per-source index.
            Defaults to ``PRIM_CONFIG.use_adjacency_index``.

    Returns:
        PrimResult with the visit order, tree edges, total weight, and the
        set of unreached nodes.

    Raises:
        KeyError: If ``start`` or an edge endpoint is not in the arena.
        ValueError: If the root cannot be determined or the branching factor
            is invalid.
        HeapUnderflowError: If the heap is polled while empty.
    """
    if branching_factor is None:
        branching_factor = PRIM_CONFIG.branching_factor
    if use_adjacency_index is None:
        use_adjacency_index = PRIM_CONFIG.use_adjacency_index

    heap = KaryMinHeap(branching_factor)
    root = _resolve_start(arena, start)
    visit_order: List[NodeID] = [root]
    recorded = {root}
    tree_edges: List[Edge] = []

    by_source: Dict[NodeID, List[Edge]] = defaultdict(list)
    if use_adjacency_index:
        for edge in edges:
            by_source[edge.source].append(edge)

    # Seed with every edge leaving the visited set
    for edge in edges:
        if _crosses_cut(arena, edge):
            if edge.source not in recorded:
                recorded.add(edge.source)
                visit_order.append(edge.source)
            heap.add(edge)

    logger.debug(
        "Starting Prim's MST from node %s: %d edges, %d seeded, k=%d, index=%s",
        root,
        len(edges),
        len(heap),
        branching_factor,
        use_adjacency_index,
    )

    while not heap.is_empty():
        current = heap.poll()

        if current.destination not in recorded:
            recorded.add(current.destination)
            visit_order.append(current.destination)
            tree_edges.append(current)

        newly_visited = not arena.is_visited(current.destination)
        arena.mark_visited(current.destination)

        if use_adjacency_index:
            candidates: Iterable[Edge] = (
                by_source.get(current.destination, ()) if newly_visited else ()
            )
        else:
            candidates = edges
        added = _push_new_frontier(heap, arena, candidates)

        logger.debug(
            "Polled %s -> %s (w=%d); %d frontier edges added, %d pending",
            current.source,
            current.destination,
            current.weight,
            added,
            len(heap),
        )

    unreached = {node_id for node_id in arena if not arena.is_visited(node_id)}
    result = PrimResult(
        visit_order=visit_order,
        tree_edges=tree_edges,
        total_weight=sum(edge.weight for edge in tree_edges),
        unreached=unreached,
    )

    logger.info(
        "Prim's MST complete: %d nodes visited, total weight %d, %d unreached",
        len(visit_order),
        result.total_weight,
        len(unreached),
    )
    return result


def format_visit_order(visit_order: Sequence[NodeID]) -> str:
    """Render a visit order as ``"Prim's MST (in order of node visited): [...]"``."""
    return f"{VISIT_ORDER_LABEL}: {list(visit_order)}"
