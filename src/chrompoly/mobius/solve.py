from __future__ import annotations

from typing import List, Sequence

from chrompoly.mobius.order import is_unit_upper_triangular


def mobius_column(M: Sequence[Sequence[int]], *, check: bool = True) -> List[int]:
    """Last column of M^{-1} for a unit upper-triangular integer matrix.

    Back substitution from the bottom row:
      mu[m-1] = 1
      mu[j]   = -sum_{k>j} M[j][k] * mu[k]

    For the refinement matrix of a lattice this gives the Mobius value of
    every partition against the last one (the uncontracted graph).
    """
    if check and not is_unit_upper_triangular(M):
        raise ValueError("matrix is not unit upper triangular")
    m = len(M)
    if m == 0:
        return []
    mu = [0] * m
    mu[m - 1] = 1
    for j in range(m - 2, -1, -1):
        row = M[j]
        s = 0
        for k in range(j + 1, m):
            if row[k]:
                s += row[k] * mu[k]
        mu[j] = -s
    return mu
