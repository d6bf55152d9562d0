from .partition import (
    Block,
    Edge,
    GraphSnapshot,
    Partition,
    from_graph,
    validate_snapshot,
    is_valid_partition,
)
from .contract import contract_edge, direct_contractions
from .cancel import StopCheck
from .builder import build_lattice

__all__ = [
    "Block",
    "Edge",
    "GraphSnapshot",
    "Partition",
    "from_graph",
    "validate_snapshot",
    "is_valid_partition",
    "contract_edge",
    "direct_contractions",
    "StopCheck",
    "build_lattice",
]
