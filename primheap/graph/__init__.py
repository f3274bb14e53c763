"""Graph primitives and helpers.

This package provides the node arena and edge value types used by the MST
driver, plus conversion helpers for NetworkX (`convert`) and the reference
example graph (`samples`).
"""

from primheap.graph.model import Edge, Node, NodeArena, NodeID

__all__ = ["Edge", "Node", "NodeArena", "NodeID"]
