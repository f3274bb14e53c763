"""K-ary min-heap of weighted edges.

The heap keeps its elements in a flat list. For branching factor ``k`` the
parent of index ``i`` is ``(i - 1) // k`` and the ``j``-th child (``j`` in
``1..k``) is ``k * i + j``. Every non-root element weighs at least as much as
its parent.

Notes:
    Ties are resolved deterministically so that a run over the same input
    always extracts edges in the same order:
    - On insertion an element moves above a parent of equal weight.
    - On sift-down the first child examined wins among equal-weight
      children, and a child only moves up when strictly lighter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from primheap.config import PRIM_CONFIG
from primheap.graph.model import Edge, NodeID


class HeapUnderflowError(IndexError):
    """Raised when an element is requested from an empty heap."""

    def __init__(self, message: str = "Underflow: heap is empty") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class PollResult:
    """Outcome of `KaryMinHeap.try_poll`.

    Exactly one of ``edge`` and ``error`` is set.

    Attributes:
        edge: Extracted minimum edge, or None on underflow.
        error: Underflow error, or None when an edge was extracted.
    """

    edge: Optional[Edge] = None
    error: Optional[HeapUnderflowError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Edge:
        """Return the edge or raise the carried underflow error."""
        if self.error is not None:
            raise self.error
        assert self.edge is not None
        return self.edge


class KaryMinHeap:
    """Min-heap of edges ordered by weight, with ``k`` children per node.

    Attributes:
        branching_factor: Number of children per node, fixed for the heap's
            lifetime.
    """

    def __init__(self, branching_factor: Optional[int] = None) -> None:
        """Create an empty heap.

        Args:
            branching_factor: Children per node. Defaults to
                ``PRIM_CONFIG.branching_factor``.

        Raises:
            ValueError: If the branching factor is below 1.
        """
        if branching_factor is None:
            branching_factor = PRIM_CONFIG.branching_factor
        if branching_factor < 1:
            raise ValueError(f"branching_factor must be >= 1, got {branching_factor}")
        self._k = branching_factor
        self._heap: List[Edge] = []

    @property
    def branching_factor(self) -> int:
        return self._k

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return f"KaryMinHeap(k={self._k}, size={len(self._heap)})"

    def is_empty(self) -> bool:
        return not self._heap

    def parent(self, i: int) -> int:
        return (i - 1) // self._k

    def kth_child(self, i: int, k: int) -> int:
        return self._k * i + k

    def entries(self) -> Tuple[Edge, ...]:
        """Return a snapshot of the backing sequence in heap order."""
        return tuple(self._heap)

    def add(self, edge: Edge) -> None:
        """Insert an edge and restore heap order.

        Args:
            edge: Edge to insert.
        """
        self._heap.append(edge)
        if len(self._heap) > 1:
            self._sift_up(len(self._heap) - 1)

    def contains_edge(self, source: NodeID, destination: NodeID, weight: int) -> bool:
        """Return True if an edge with these endpoints and weight is stored.

        Linear scan over the backing sequence.
        """
        return any(edge.matches(source, destination, weight) for edge in self._heap)

    def peek(self) -> Edge:
        """Return the minimum edge without removing it.

        Raises:
            HeapUnderflowError: If the heap is empty.
        """
        if not self._heap:
            raise HeapUnderflowError()
        return self._heap[0]

    def try_poll(self) -> PollResult:
        """Remove and return the minimum edge as an explicit outcome.

        Returns:
            PollResult holding the edge, or the underflow error when empty.
        """
        if not self._heap:
            return PollResult(error=HeapUnderflowError())

        root = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return PollResult(edge=root)

    def poll(self) -> Edge:
        """Remove and return the minimum edge.

        Raises:
            HeapUnderflowError: If the heap is empty.
        """
        return self.try_poll().unwrap()

    def _min_child(self, i: int) -> int:
        """Return the index of the lightest existing child of ``i``.

        The first child examined wins ties.
        """
        size = len(self._heap)
        best = self.kth_child(i, 1)
        for k in range(2, self._k + 1):
            child = self.kth_child(i, k)
            if child >= size:
                break
            if self._heap[child].weight < self._heap[best].weight:
                best = child
        return best

    def _sift_up(self, i: int) -> None:
        item = self._heap[i]
        while i > 0:
            p = self.parent(i)
            if item.weight > self._heap[p].weight:
                break
            self._heap[i] = self._heap[p]
            i = p
        self._heap[i] = item

    def _sift_down(self, i: int) -> None:
        item = self._heap[i]
        size = len(self._heap)
        while self.kth_child(i, 1) < size:
            child = self._min_child(i)
            if self._heap[child].weight >= item.weight:
                break
            self._heap[i] = self._heap[child]
            i = child
        self._heap[i] = item
