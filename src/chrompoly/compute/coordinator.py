"""Background worker that recomputes the chromatic polynomial on every edit."""
from __future__ import annotations

import logging
import os
import threading
from typing import Optional

from chrompoly.compute.state import SharedGraph
from chrompoly.lattice.cancel import StopCheck
from chrompoly.pipeline import ChromaticResult, compute_chromatic

logger = logging.getLogger(__name__)

POLL_INTERVAL = float(os.environ.get("CHROMPOLY_POLL_INTERVAL", "0.05"))
THREAD_NAME = os.environ.get("CHROMPOLY_THREAD_NAME", "chrompoly-worker")


class Coordinator:
    """
    Owns one worker thread running the pipeline for the lifetime of *graph*.

    Each run clears the changed flag, snapshots the graph and computes.  A
    change raised mid-run trips the run's StopCheck (polled per lattice node
    and per matrix row); the partial work is dropped and, since the flag is
    still set, the loop immediately starts again on the new graph.
    """

    def __init__(
        self,
        graph: SharedGraph,
        *,
        poll_interval: Optional[float] = None,
        name: Optional[str] = None,
    ):
        self.graph = graph
        self.poll_interval = POLL_INTERVAL if poll_interval is None else poll_interval
        self.name = THREAD_NAME if name is None else name
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("coordinator already started")
        self._thread = threading.Thread(target=self._loop, name=self.name, daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        """Clear the running flag and join the worker."""
        self.graph.shut_down()
        if self._thread is not None:
            self._thread.join(timeout)

    @property
    def alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def __enter__(self) -> "Coordinator":
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.stop()

    def _loop(self) -> None:
        while self.graph.running:
            if self.graph.wait_for_change(self.poll_interval):
                self.run_once()
        logger.debug("worker %s exiting", self.name)

    def run_once(self) -> Optional[ChromaticResult]:
        """One Computing pass; returns the published result, if any."""
        graph = self.graph
        graph.begin_run()
        snap = graph.snapshot()
        stop = StopCheck(lambda: graph.changed or not graph.running)

        try:
            result = compute_chromatic(
                snap,
                stop=stop,
                on_partition=graph.set_partitions,
                on_lattice=graph.set_total,
                on_row=graph.set_rows,
            )
        except ValueError as e:
            logger.warning("skipping invalid graph snapshot: %s", e)
            graph.reset()
            return None
        except MemoryError:
            logger.error("out of memory computing n=%d graph; run abandoned", snap.n)
            graph.reset()
            return None

        if result is None:
            if stop.tripped:
                logger.debug("run on n=%d graph aborted", snap.n)
                graph.abort()
            else:
                graph.reset()
            return None

        if not graph.publish(result):
            logger.debug("graph changed before publication; result dropped")
            return None
        logger.info("n=%d: %d submaps, P = %s", snap.n, len(result.lattice), list(result.coefficients))
        return result
