from .graph6 import strip_graph6_header, g6_to_nx, nx_to_snapshot, g6_to_snapshot, snapshot_to_nx

__all__ = [
    "strip_graph6_header",
    "g6_to_nx",
    "nx_to_snapshot",
    "g6_to_snapshot",
    "snapshot_to_nx",
]
