"""Refinement order on a post-ordered lattice of partitions."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from chrompoly.lattice.cancel import StopCheck
from chrompoly.lattice.partition import Partition

logger = logging.getLogger(__name__)

Matrix = List[List[int]]


def _refines(a: Partition, owner_b: Sequence[int]) -> bool:
    for block in a.blocks:
        idx = owner_b[block[0]]
        for label in block[1:]:
            if owner_b[label] != idx:
                return False
    return True


def refines_or_equal(a: Partition, b: Partition) -> bool:
    """True iff every block of a lies inside a single block of b."""
    return _refines(a, b.block_of())


def ordering_matrix(
    lattice: Sequence[Partition],
    *,
    stop: Optional[StopCheck] = None,
    on_row: Optional[Callable[[int], None]] = None,
) -> Matrix:
    """
    M[i][j] = 1 iff i <= j and lattice[j] refines lattice[i].

    With lattice in post-order this is upper triangular with a unit diagonal.
    stop is polled once per row; on a trip the partially filled matrix is
    returned as is.  on_row receives the 1-based count of rows reached.
    """
    m = len(lattice)
    owners = [p.block_of() for p in lattice]
    sizes = [p.num_blocks for p in lattice]
    M: Matrix = [[0] * m for _ in range(m)]

    for i in range(m):
        if on_row is not None:
            on_row(i + 1)
        if stop is not None and stop():
            logger.debug("ordering matrix stopped at row %d/%d", i, m)
            return M
        row = M[i]
        row[i] = 1
        for j in range(i + 1, m):
            # a finer partition never has fewer blocks
            if sizes[j] >= sizes[i] and _refines(lattice[j], owners[i]):
                row[j] = 1
    return M


def is_unit_upper_triangular(M: Sequence[Sequence[int]]) -> bool:
    m = len(M)
    for i in range(m):
        if len(M[i]) != m or M[i][i] != 1:
            return False
        if any(M[i][j] != 0 for j in range(i)):
            return False
    return True
