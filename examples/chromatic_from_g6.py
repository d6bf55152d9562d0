#!/usr/bin/env python3
"""
Chromatic polynomial of graph6-encoded graphs via the contraction lattice.

Usage: python3 chromatic_from_g6.py Bw "C~" [--ascii] [--check 4] [--draw lattice.png]
"""
from __future__ import annotations

import argparse
import logging

from chrompoly.io.graph6 import g6_to_snapshot
from chrompoly.pipeline import compute_chromatic
from chrompoly.polynomial.assemble import evaluate_polynomial
from chrompoly.polynomial.format import polynomial_to_text


def main():
    ap = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("g6", nargs="+", help="graph6 strings")
    ap.add_argument("--ascii", action="store_true", help="plain x^k exponents")
    ap.add_argument("--check", type=int, default=0, help="also print P(1..K)")
    ap.add_argument("--draw", default=None, help="save the Hasse diagram of the last graph here")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="[%(levelname)s] %(message)s")

    res = None
    for g6 in args.g6:
        snap = g6_to_snapshot(g6)
        res = compute_chromatic(snap)
        if res is None:
            print(f"{g6}: empty graph")
            continue
        print(f"{g6}: n={snap.n} m={len(snap.edges)} submaps={len(res.lattice)}")
        print(f"  P(x) = {polynomial_to_text(res.coefficients, unicode=not args.ascii)}")
        for k in range(1, args.check + 1):
            print(f"  P({k}) = {evaluate_polynomial(res.coefficients, k)}")

    if args.draw and res is not None:
        from chrompoly.viz.draw import draw_lattice
        draw_lattice(res, save_path=args.draw)
        print(f"Saved {args.draw}")


if __name__ == "__main__":
    main()
