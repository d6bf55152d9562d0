"""Tests for chrompoly.mobius: refinement matrix and Mobius values."""
import pytest

from chrompoly.lattice.partition import Partition, from_graph
from chrompoly.lattice.builder import build_lattice
from chrompoly.lattice.cancel import StopCheck
from chrompoly.mobius.order import refines_or_equal, ordering_matrix, is_unit_upper_triangular
from chrompoly.mobius.solve import mobius_column


# --- refines_or_equal ---

def test_refines_finer_into_coarser():
    fine = Partition(blocks=((0,), (1,), (2,)), edges=())
    coarse = Partition(blocks=((0, 2), (1,)), edges=())
    assert refines_or_equal(fine, coarse)
    assert not refines_or_equal(coarse, fine)


def test_refines_itself():
    p = Partition(blocks=((0, 1), (2,)), edges=((0, 1),))
    assert refines_or_equal(p, p)


def test_refines_incomparable():
    a = Partition(blocks=((0, 1), (2,)), edges=())
    b = Partition(blocks=((0,), (1, 2)), edges=())
    assert not refines_or_equal(a, b)
    assert not refines_or_equal(b, a)


def test_refines_ignores_edges():
    a = Partition(blocks=((0,), (1, 2)), edges=((0, 1), (0, 1)))
    b = Partition(blocks=((0, 1, 2),), edges=())
    assert refines_or_equal(a, b)


# --- ordering matrix ---

def test_matrix_triangle():
    lat = build_lattice(from_graph(3, [(0, 1), (1, 2), (0, 2)]))
    M = ordering_matrix(lat)
    assert M == [
        [1, 1, 1, 1, 1],
        [0, 1, 0, 0, 1],
        [0, 0, 1, 0, 1],
        [0, 0, 0, 1, 1],
        [0, 0, 0, 0, 1],
    ]


def test_matrix_unit_upper_triangular():
    edges = [(0, 1), (1, 2), (2, 3), (3, 0), (0, 2), (1, 3)]
    M = ordering_matrix(build_lattice(from_graph(4, edges)))
    assert is_unit_upper_triangular(M)


def test_matrix_row_callback():
    lat = build_lattice(from_graph(3, [(0, 1), (1, 2)]))
    rows = []
    ordering_matrix(lat, on_row=rows.append)
    assert rows == [1, 2, 3, 4]


def test_matrix_stopped_midway():
    lat = build_lattice(from_graph(3, [(0, 1), (1, 2), (0, 2)]))
    rows = []
    stop = StopCheck(lambda: len(rows) > 2)
    M = ordering_matrix(lat, stop=stop, on_row=rows.append)
    assert stop.tripped
    assert rows == [1, 2, 3]
    assert M[2] == [0] * 5
    assert M[4] == [0] * 5


def test_is_unit_upper_triangular_rejects():
    assert not is_unit_upper_triangular([[1, 0], [1, 1]])
    assert not is_unit_upper_triangular([[1, 0], [0, 2]])
    assert is_unit_upper_triangular([])


# --- Mobius ---

def test_mobius_identity():
    assert mobius_column([[1, 0], [0, 1]]) == [0, 1]


def test_mobius_chain():
    # two-element chain: mu = (-1, 1)
    assert mobius_column([[1, 1], [0, 1]]) == [-1, 1]


def test_mobius_triangle():
    lat = build_lattice(from_graph(3, [(0, 1), (1, 2), (0, 2)]))
    assert mobius_column(ordering_matrix(lat)) == [2, -1, -1, -1, 1]


def test_mobius_is_last_column_of_inverse():
    lat = build_lattice(from_graph(4, [(0, 1), (1, 2), (2, 3), (3, 0)]))
    M = ordering_matrix(lat)
    mu = mobius_column(M)
    m = len(M)
    # M @ mu == e_{m-1}
    for i in range(m):
        assert sum(M[i][k] * mu[k] for k in range(m)) == (1 if i == m - 1 else 0)


def test_mobius_empty():
    assert mobius_column([]) == []


def test_mobius_rejects_non_triangular():
    with pytest.raises(ValueError):
        mobius_column([[1, 0], [1, 1]])
