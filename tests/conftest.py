"""Global pytest configuration and shared graph fixtures."""

from __future__ import annotations

import pytest

from primheap.graph.model import Edge, NodeArena
from primheap.graph.samples import reference_graph


@pytest.fixture
def reference():
    # Node 0 pre-visited; edges listed in one orientation only
    # (see primheap.graph.samples).
    return reference_graph(start=0)


@pytest.fixture
def reference_without_56():
    return reference_graph(start=0, drop=(5, 6, 10))


@pytest.fixture
def square_undirected():
    #      1
    #  0 ───── 1
    #  │       │
    # 4│       │2
    #  │       │
    #  3 ───── 2
    #      3
    arena = NodeArena.from_ids([0, 1, 2, 3])
    edges = []
    for src, dst, weight in [(0, 1, 1), (1, 2, 2), (2, 3, 3), (3, 0, 4)]:
        edge = Edge(src, dst, weight)
        edges.extend([edge, edge.reversed()])
    return arena, edges
