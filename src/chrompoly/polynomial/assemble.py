from __future__ import annotations

from typing import List, Sequence

from chrompoly.lattice.partition import Partition


def assemble_polynomial(
    n: int,
    lattice: Sequence[Partition],
    mobius: Sequence[int],
) -> List[int]:
    """
    Coefficients of the chromatic polynomial, lowest power first:
      P(x) = sum_k coeffs[k] * x^(k+1)
    coeffs[k] collects the Mobius values of partitions with k+1 blocks.
    """
    if len(lattice) != len(mobius):
        raise ValueError(f"{len(lattice)} partitions but {len(mobius)} Mobius values")
    coeffs = [0] * n
    for part, mu in zip(lattice, mobius):
        coeffs[part.num_blocks - 1] += mu
    return coeffs


def evaluate_polynomial(coeffs: Sequence[int], x: int) -> int:
    """P(x); for a positive integer x, the number of proper x-colourings."""
    total = 0
    for c in reversed(coeffs):
        total = (total + c) * x
    return total
