"""Configuration classes for primheap components."""

from dataclasses import dataclass


@dataclass
class PrimConfig:
    """Defaults for MST computation."""

    # Number of children per heap node ("k" of the k-ary heap)
    branching_factor: int = 2

    # Discover new frontier edges through a per-source index instead of
    # re-scanning the whole edge list after every extraction
    use_adjacency_index: bool = False


# Global configuration instance
PRIM_CONFIG = PrimConfig()
