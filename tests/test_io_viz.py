"""Tests for graph6/networkx conversion and the lattice Hasse diagram."""
import matplotlib

matplotlib.use("Agg")

import networkx as nx
import pytest

from chrompoly.io.graph6 import strip_graph6_header, g6_to_snapshot, nx_to_snapshot, snapshot_to_nx
from chrompoly.lattice.partition import GraphSnapshot, Partition
from chrompoly.pipeline import compute_chromatic
from chrompoly.viz.layouts import block_label, lattice_to_nx, lattice_layout
from chrompoly.viz.draw import draw_lattice


# --- io ---

def test_strip_header():
    assert strip_graph6_header(" >>graph6<<Bw \n") == "Bw"


def test_g6_to_snapshot_triangle():
    snap = g6_to_snapshot("Bw")
    assert snap == GraphSnapshot(3, ((0, 1), (0, 2), (1, 2)))


def test_nx_to_snapshot_multigraph_collapses():
    G = nx.MultiGraph([(0, 1), (1, 0), (1, 2)])
    assert nx_to_snapshot(G) == GraphSnapshot(3, ((0, 1), (1, 2)))


def test_nx_to_snapshot_rejects_directed():
    with pytest.raises(ValueError):
        nx_to_snapshot(nx.DiGraph([(0, 1)]))


def test_nx_to_snapshot_rejects_loops():
    with pytest.raises(ValueError):
        nx_to_snapshot(nx.Graph([(0, 0)]))


def test_snapshot_to_nx_keeps_isolated():
    G = snapshot_to_nx(GraphSnapshot(3, ((0, 1),)))
    assert G.number_of_nodes() == 3
    assert G.number_of_edges() == 1


# --- Hasse diagram ---

def test_block_label():
    assert block_label(Partition(blocks=((0, 2), (1,)), edges=())) == "02|1"


def test_hasse_triangle():
    res = compute_chromatic(GraphSnapshot(3, ((0, 1), (1, 2), (0, 2))))
    H = lattice_to_nx(res.lattice, res.mobius)
    assert H.number_of_nodes() == 5
    # root covers three 2-block partitions, each covers the 1-block one
    assert H.number_of_edges() == 6
    assert H.out_degree(4) == 3
    assert H.nodes[0]["mobius"] == 2


def test_layout_rows_by_block_count():
    res = compute_chromatic(GraphSnapshot(3, ((0, 1), (1, 2))))
    H = lattice_to_nx(res.lattice)
    pos = lattice_layout(H)
    for v, (_, y) in pos.items():
        assert y == H.nodes[v]["num_blocks"]


def test_draw_lattice_saves(tmp_path):
    res = compute_chromatic(GraphSnapshot(4, ((0, 1), (1, 2), (2, 3), (3, 0))))
    out = tmp_path / "lattice.png"
    H = draw_lattice(res, save_path=str(out))
    assert out.exists()
    assert H.number_of_nodes() == len(res.lattice)
