from __future__ import annotations

import networkx as nx

from chrompoly.lattice.partition import GraphSnapshot


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def g6_to_nx(g6: str) -> nx.Graph:
    """
    Parse a graph6 string into a simple undirected NetworkX Graph.
    """
    s = strip_graph6_header(g6)
    return nx.from_graph6_bytes(s.encode("ascii"))


def nx_to_snapshot(G: nx.Graph) -> GraphSnapshot:
    """
    Relabel the nodes of G to 0..n-1 (in G's node order) and return the
    resulting snapshot.  Multigraphs are collapsed; directed graphs and
    self-loops are rejected.
    """
    if G.is_directed():
        raise ValueError("directed graphs are not supported")
    if nx.number_of_selfloops(G) > 0:
        raise ValueError("graph has self-loops")
    index = {v: i for i, v in enumerate(G.nodes())}
    edges = set()
    for u, v in G.edges():
        a, b = index[u], index[v]
        edges.add((a, b) if a < b else (b, a))
    return GraphSnapshot(len(index), tuple(sorted(edges)))


def g6_to_snapshot(g6: str) -> GraphSnapshot:
    return nx_to_snapshot(g6_to_nx(g6))


def snapshot_to_nx(snap: GraphSnapshot) -> nx.Graph:
    G = nx.Graph()
    G.add_nodes_from(range(snap.n))
    G.add_edges_from(snap.edges)
    return G
