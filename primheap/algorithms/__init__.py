"""MST algorithms and the k-ary heap that drives them."""

from primheap.algorithms.heap import HeapUnderflowError, KaryMinHeap, PollResult
from primheap.algorithms.prim import format_visit_order, prim_mst
from primheap.algorithms.types import PrimResult

__all__ = [
    "HeapUnderflowError",
    "KaryMinHeap",
    "PollResult",
    "PrimResult",
    "format_visit_order",
    "prim_mst",
]
