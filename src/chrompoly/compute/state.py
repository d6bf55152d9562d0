"""State shared between the graph editor and the computation worker."""
from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from chrompoly.lattice.partition import Edge, GraphSnapshot
from chrompoly.pipeline import ChromaticResult
from chrompoly.polynomial.format import (
    LOADING_TEXT,
    found_text,
    polynomial_to_text,
    processing_text,
)


class Phase(Enum):
    IDLE = "idle"
    COMPUTING = "computing"
    DONE = "done"
    ABORTED = "aborted"


@dataclass(frozen=True)
class Progress:
    phase: Phase
    partitions: int
    rows: int
    total: Optional[int]


@dataclass
class _Vertex:
    pos: Tuple[float, float]
    active: bool = True


class SharedGraph:
    """
    Editable simple graph plus the published computation state.

    The editor thread is the only mutator of the graph; every structural edit
    raises the "changed" signal, cosmetic edits (move, select) do not.
    Vertex ids are stable; removed vertices stay in the list as inactive,
    and snapshot() renumbers the active ones 0..n-1.

    Two locks: one for the graph itself, one (a Condition) for the change and
    running flags, the published result and the progress counters.
    """

    def __init__(self) -> None:
        self._graph_lock = threading.Lock()
        self._cond = threading.Condition()
        self._vertices: List[_Vertex] = []
        self._edges: List[Edge] = []
        self.selected: Optional[int] = None

        self._changed = False
        self._running = True
        self._phase = Phase.IDLE
        self._result: Optional[ChromaticResult] = None
        self._partitions = 0
        self._rows = 0
        self._total: Optional[int] = None

    # ------------------------------------------------------------------
    # Editor side
    # ------------------------------------------------------------------

    def _check_active(self, v: int) -> None:
        if not (0 <= v < len(self._vertices)) or not self._vertices[v].active:
            raise KeyError(f"no active vertex {v}")

    def _signal_change(self) -> None:
        with self._cond:
            self._changed = True
            self._cond.notify_all()

    def add_vertex(self, pos: Tuple[float, float] = (0.0, 0.0)) -> int:
        with self._graph_lock:
            self._vertices.append(_Vertex(pos=pos))
            v = len(self._vertices) - 1
        self._signal_change()
        return v

    def remove_vertex(self, v: int) -> None:
        with self._graph_lock:
            self._check_active(v)
            self._vertices[v].active = False
            self._edges = [e for e in self._edges if v not in e]
            if self.selected == v:
                self.selected = None
        self._signal_change()

    def add_edge(self, u: int, v: int) -> bool:
        """Connect u and v; False (and no change) for loops and existing edges."""
        with self._graph_lock:
            self._check_active(u)
            self._check_active(v)
            key = (u, v) if u < v else (v, u)
            if u == v or key in self._edges:
                return False
            self._edges.append(key)
        self._signal_change()
        return True

    def remove_edge(self, u: int, v: int) -> bool:
        key = (u, v) if u < v else (v, u)
        with self._graph_lock:
            if key not in self._edges:
                return False
            self._edges.remove(key)
        self._signal_change()
        return True

    def clear(self) -> None:
        with self._graph_lock:
            self._vertices.clear()
            self._edges.clear()
            self.selected = None
        self._signal_change()

    def move_vertex(self, v: int, pos: Tuple[float, float]) -> None:
        with self._graph_lock:
            self._check_active(v)
            self._vertices[v].pos = pos

    def select(self, v: Optional[int]) -> None:
        with self._graph_lock:
            if v is not None:
                self._check_active(v)
            self.selected = v

    def position(self, v: int) -> Tuple[float, float]:
        with self._graph_lock:
            return self._vertices[v].pos

    def snapshot(self) -> GraphSnapshot:
        """Active vertex count and edges in the active numbering."""
        with self._graph_lock:
            index = {}
            for vid, vert in enumerate(self._vertices):
                if vert.active:
                    index[vid] = len(index)
            edges = tuple((index[u], index[v]) for u, v in self._edges)
        return GraphSnapshot(len(index), edges)

    # ------------------------------------------------------------------
    # Flags
    # ------------------------------------------------------------------

    @property
    def changed(self) -> bool:
        with self._cond:
            return self._changed

    @property
    def running(self) -> bool:
        with self._cond:
            return self._running

    def take_change(self) -> bool:
        """Clear the changed flag, returning its previous value."""
        with self._cond:
            was = self._changed
            self._changed = False
            return was

    def wait_for_change(self, timeout: Optional[float] = None) -> bool:
        """Block until changed, shut down, or timeout; return the changed flag."""
        with self._cond:
            self._cond.wait_for(lambda: self._changed or not self._running, timeout)
            return self._changed and self._running

    def shut_down(self) -> None:
        with self._cond:
            self._running = False
            self._cond.notify_all()

    # ------------------------------------------------------------------
    # Worker side: progress and publication
    # ------------------------------------------------------------------

    def begin_run(self) -> None:
        """Clear the changed flag and enter the Computing phase in one step."""
        with self._cond:
            self._changed = False
            self._phase = Phase.COMPUTING
            self._result = None
            self._partitions = 0
            self._rows = 0
            self._total = None

    def set_partitions(self, count: int) -> None:
        with self._cond:
            self._partitions = count

    def set_total(self, total: int) -> None:
        with self._cond:
            self._total = total

    def set_rows(self, rows: int) -> None:
        with self._cond:
            self._rows = rows

    def _zero_counters(self) -> None:
        self._partitions = 0
        self._rows = 0

    def publish(self, result: ChromaticResult) -> bool:
        """
        Publish a finished result unless the graph changed meanwhile, in
        which case the run counts as aborted and False is returned.
        """
        with self._cond:
            self._zero_counters()
            if self._changed or not self._running:
                self._phase = Phase.ABORTED
                return False
            self._phase = Phase.DONE
            self._result = result
            return True

    def abort(self) -> None:
        with self._cond:
            self._zero_counters()
            self._phase = Phase.ABORTED
            self._result = None

    def reset(self) -> None:
        """Back to idle with nothing published (empty or unusable graph)."""
        with self._cond:
            self._zero_counters()
            self._total = None
            self._phase = Phase.IDLE
            self._result = None

    # ------------------------------------------------------------------
    # Presentation side
    # ------------------------------------------------------------------

    def result(self) -> Optional[ChromaticResult]:
        with self._cond:
            return self._result

    def coefficients(self) -> Optional[Tuple[int, ...]]:
        with self._cond:
            return None if self._result is None else self._result.coefficients

    def progress(self) -> Progress:
        with self._cond:
            return Progress(self._phase, self._partitions, self._rows, self._total)

    def status_text(self, *, unicode: bool = True) -> str:
        """
        "Found <k> submaps" while enumerating, "Processing <r>/<m> submaps"
        while building the matrix, the polynomial once done, "..." otherwise.
        """
        with self._cond:
            phase, result = self._phase, self._result
            partitions, rows, total = self._partitions, self._rows, self._total
        if phase is Phase.DONE and result is not None:
            return polynomial_to_text(result.coefficients, unicode=unicode)
        if phase is Phase.IDLE:
            return ""
        if rows > 0 and total is not None:
            return processing_text(rows, total)
        if partitions > 0:
            return found_text(partitions)
        return LOADING_TEXT
