"""Human-readable text for polynomials and computation progress."""
from __future__ import annotations

from typing import Sequence

_SUPERSCRIPT = str.maketrans("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹")

LOADING_TEXT = "..."


def _power(p: int, unicode: bool) -> str:
    if p == 1:
        return "x"
    if unicode:
        return "x" + str(p).translate(_SUPERSCRIPT)
    return f"x^{p}"


def polynomial_to_text(coeffs: Sequence[int], *, unicode: bool = True) -> str:
    """
    Render coefficients (coeffs[k] is the x^(k+1) term) highest power first:
      [2, -3, 1] -> "x³ - 3x² + 2x"
    Zero terms are skipped; the zero polynomial renders as "0".
    """
    parts: list[str] = []
    for k in range(len(coeffs) - 1, -1, -1):
        c = coeffs[k]
        if c == 0:
            continue
        mag = abs(c)
        term = ("" if mag == 1 else str(mag)) + _power(k + 1, unicode)
        if not parts:
            parts.append(term if c > 0 else "-" + term)
        else:
            parts.append(("+ " if c > 0 else "- ") + term)
    return " ".join(parts) if parts else "0"


def found_text(partitions: int) -> str:
    return f"Found {partitions} submaps"


def processing_text(row: int, total: int) -> str:
    return f"Processing {row}/{total} submaps"
