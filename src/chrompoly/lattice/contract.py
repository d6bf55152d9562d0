"""Edge contraction on partitions."""
from __future__ import annotations

from typing import List

from chrompoly.lattice.partition import Edge, Partition


def _ordered(a: int, b: int) -> Edge:
    return (a, b) if a < b else (b, a)


def contract_edge(p: Partition, edge: Edge) -> Partition:
    """Merge the two blocks joined by *edge* into one.

    The merged block takes the position of the lower index i; block j is
    removed and every index above j moves down by one.  Edges between i and j
    vanish (they would be loops); parallel edges created by the merge are kept.
    """
    i, j = edge
    if i > j:
        i, j = j, i
    if i == j or j >= p.num_blocks:
        raise ValueError(f"cannot contract edge {edge} of a {p.num_blocks}-block partition")

    blocks = []
    for k, block in enumerate(p.blocks):
        if k == i:
            blocks.append(tuple(sorted(p.blocks[i] + p.blocks[j])))
        elif k != j:
            blocks.append(block)

    def shift(x: int) -> int:
        if x == i or x == j:
            return i
        return x - 1 if x > j else x

    edges: List[Edge] = []
    for k, l in p.edges:
        if (k == i and l == j) or (k == j and l == i):
            continue
        edges.append(_ordered(shift(k), shift(l)))

    return Partition(blocks=tuple(blocks), edges=tuple(edges))


def direct_contractions(p: Partition) -> List[Partition]:
    """One contracted partition per edge of p, in edge order (duplicates kept)."""
    if not p.edges:
        raise ValueError("partition has no edges to contract")
    return [contract_edge(p, e) for e in p.edges]
