from __future__ import annotations

from collections import defaultdict
from typing import Optional, Sequence

import networkx as nx

from chrompoly.lattice.partition import Partition
from chrompoly.mobius.order import refines_or_equal


def block_label(p: Partition) -> str:
    """Compact label such as '01|2' (comma-separated once labels reach 10)."""
    sep = "" if p.num_labels <= 10 else ","
    return "|".join(sep.join(str(x) for x in b) for b in p.blocks)


def lattice_to_nx(
    lattice: Sequence[Partition],
    mobius: Optional[Sequence[int]] = None,
) -> nx.DiGraph:
    """
    Hasse diagram of the refinement order.

    Nodes are lattice indices with attributes blocks, num_blocks, label and
    (if given) mobius.  An edge i -> j means lattice[j] is obtained from
    lattice[i] by merging exactly two blocks and lattice[i] refines it.
    """
    H = nx.DiGraph()
    for idx, p in enumerate(lattice):
        attrs = {"blocks": p.blocks, "num_blocks": p.num_blocks, "label": block_label(p)}
        if mobius is not None:
            attrs["mobius"] = mobius[idx]
        H.add_node(idx, **attrs)

    by_size = defaultdict(list)
    for idx, p in enumerate(lattice):
        by_size[p.num_blocks].append(idx)

    for i, p in enumerate(lattice):
        for j in by_size.get(p.num_blocks - 1, ()):
            if refines_or_equal(p, lattice[j]):
                H.add_edge(i, j)
    return H


def lattice_layout(H: nx.DiGraph) -> dict:
    """Rows by block count (finest on top), nodes spread evenly per row."""
    rows = defaultdict(list)
    for v, data in H.nodes(data=True):
        rows[data["num_blocks"]].append(v)
    pos = {}
    for k, members in rows.items():
        members.sort()
        width = len(members)
        for x, v in enumerate(members):
            pos[v] = ((x + 0.5) / width - 0.5, float(k))
    return pos
