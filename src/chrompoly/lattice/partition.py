"""Vertex partitions ("submaps") of a graph together with their induced edges.

A partition groups the labels 0..n-1 of the original graph into blocks.
Edges refer to block *indices*, not labels, so contracting an edge shifts
every index above the dropped block down by one.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, NamedTuple, Sequence, Tuple

Block = Tuple[int, ...]
Edge = Tuple[int, int]


class GraphSnapshot(NamedTuple):
    """Active vertex count and 0-based edge list of a graph at one instant."""

    n: int
    edges: Tuple[Edge, ...]


@dataclass(frozen=True)
class Partition:
    """
    blocks: sorted label tuples, pairwise disjoint, covering 0..n-1.
    edges:  (a, b) pairs of block indices, a != b.  Parallel edges allowed.

    Equality and hashing are structural: the order of blocks and of edges
    both matter.
    """

    blocks: Tuple[Block, ...]
    edges: Tuple[Edge, ...]

    @property
    def num_blocks(self) -> int:
        return len(self.blocks)

    @property
    def num_labels(self) -> int:
        return sum(len(b) for b in self.blocks)

    def block_of(self) -> List[int]:
        """Return owner[label] = index of the block containing label."""
        owner = [-1] * self.num_labels
        for idx, block in enumerate(self.blocks):
            for label in block:
                owner[label] = idx
        return owner


def validate_snapshot(n: int, edges: Sequence[Edge]) -> None:
    """Raise ValueError unless (n, edges) describes a simple graph on 0..n-1."""
    if n < 0:
        raise ValueError(f"vertex count must be non-negative, got {n}")
    seen: set[Edge] = set()
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) out of range for n={n}")
        if u == v:
            raise ValueError(f"self-loop at vertex {u}")
        key = (u, v) if u < v else (v, u)
        if key in seen:
            raise ValueError(f"duplicate edge ({u}, {v})")
        seen.add(key)


def from_graph(n: int, edges: Sequence[Edge]) -> Partition:
    """
    The finest partition of a graph: n singleton blocks and every edge,
    stored lower index first, in input order.
    """
    validate_snapshot(n, edges)
    blocks = tuple((i,) for i in range(n))
    return Partition(
        blocks=blocks,
        edges=tuple((u, v) if u < v else (v, u) for u, v in edges),
    )


def is_valid_partition(p: Partition, n: int) -> bool:
    """Check the block and edge invariants of p against the label range 0..n-1."""
    labels = [lab for block in p.blocks for lab in block]
    if sorted(labels) != list(range(n)):
        return False
    if any(list(block) != sorted(block) or not block for block in p.blocks):
        return False
    m = p.num_blocks
    return all(0 <= a < m and 0 <= b < m and a != b for a, b in p.edges)
