"""The full lattice / Mobius pipeline, run synchronously."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

import networkx as nx

from chrompoly.io.graph6 import g6_to_snapshot, nx_to_snapshot
from chrompoly.lattice.builder import build_lattice
from chrompoly.lattice.cancel import StopCheck
from chrompoly.lattice.partition import Edge, GraphSnapshot, Partition, from_graph
from chrompoly.mobius.order import ordering_matrix
from chrompoly.mobius.solve import mobius_column
from chrompoly.polynomial.assemble import assemble_polynomial

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChromaticResult:
    """
    Everything computed for one graph snapshot.

    lattice:      partitions in post-order (the input graph last)
    matrix:       refinement matrix over lattice, unit upper triangular
    mobius:       Mobius value of each partition
    coefficients: coefficients[k] is the x^(k+1) term of P(x)
    """

    n: int
    edges: Tuple[Edge, ...]
    lattice: Tuple[Partition, ...]
    matrix: Tuple[Tuple[int, ...], ...]
    mobius: Tuple[int, ...]
    coefficients: Tuple[int, ...]


def compute_chromatic(
    snapshot: GraphSnapshot,
    *,
    stop: Optional[StopCheck] = None,
    on_partition: Optional[Callable[[int], None]] = None,
    on_lattice: Optional[Callable[[int], None]] = None,
    on_row: Optional[Callable[[int], None]] = None,
) -> Optional[ChromaticResult]:
    """
    Run lattice -> ordering matrix -> Mobius -> polynomial for one snapshot.

    Returns None for the empty graph and for a run cancelled through *stop*.
    Raises ValueError for an invalid snapshot.
    on_lattice is called with the lattice size before matrix construction.
    """
    n, edges = snapshot
    root = from_graph(n, edges)
    if n == 0:
        return None

    t0 = time.perf_counter()
    lattice = build_lattice(root, stop=stop, on_progress=on_partition)
    if stop is not None and stop.tripped:
        return None
    if on_lattice is not None:
        on_lattice(len(lattice))

    M = ordering_matrix(lattice, stop=stop, on_row=on_row)
    if stop is not None and stop.tripped:
        return None

    mu = mobius_column(M, check=False)
    coeffs = assemble_polynomial(n, lattice, mu)
    logger.debug(
        "n=%d m=%d: %d partitions in %.3fs", n, len(edges), len(lattice), time.perf_counter() - t0
    )
    return ChromaticResult(
        n=n,
        edges=root.edges,
        lattice=tuple(lattice),
        matrix=tuple(tuple(row) for row in M),
        mobius=tuple(mu),
        coefficients=tuple(coeffs),
    )


def chromatic_polynomial(n: int, edges: Sequence[Edge]) -> Optional[List[int]]:
    """Coefficient list of P(x) (lowest power x^1 first), or None when n == 0."""
    res = compute_chromatic(GraphSnapshot(n, tuple(edges)))
    return None if res is None else list(res.coefficients)


def chromatic_polynomial_nx(G: nx.Graph) -> Optional[List[int]]:
    snap = nx_to_snapshot(G)
    return chromatic_polynomial(snap.n, snap.edges)


def chromatic_polynomial_g6(g6: str) -> Optional[List[int]]:
    snap = g6_to_snapshot(g6)
    return chromatic_polynomial(snap.n, snap.edges)
