#!/usr/bin/env python3
"""
Simulated interactive session: an "editor" thread grows a wheel graph one
edit at a time while the background worker keeps recomputing.  Prints the
status line the way a UI would poll it.

Usage: python3 live_editing.py [--spokes 6] [--delay 0.02]
"""
from __future__ import annotations

import argparse
import logging
import math
import time

from chrompoly.compute import Coordinator, Phase, SharedGraph


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--spokes", type=int, default=6)
    ap.add_argument("--delay", type=float, default=0.02)
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(threadName)s %(message)s")

    graph = SharedGraph()
    with Coordinator(graph):
        hub = graph.add_vertex((0.0, 0.0))
        rim = []
        for i in range(args.spokes):
            a = 2 * math.pi * i / args.spokes
            v = graph.add_vertex((math.cos(a), math.sin(a)))
            graph.add_edge(hub, v)
            if rim:
                graph.add_edge(rim[-1], v)
            rim.append(v)
            print(f"edit {i}: {graph.status_text()}")
            time.sleep(args.delay)
        graph.add_edge(rim[-1], rim[0])

        last = None
        while True:
            text = graph.status_text()
            if text != last:
                print(text)
                last = text
            if graph.progress().phase is Phase.DONE and not graph.changed:
                break
            time.sleep(0.05)


if __name__ == "__main__":
    main()
