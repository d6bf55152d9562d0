from __future__ import annotations

from typing import Callable, Optional


class StopCheck:
    """
    Polled cancellation flag.

    Wraps a predicate (e.g. "has the graph changed?").  Once the predicate
    has returned True the check stays tripped, so every later stage of the
    same run sees the cancellation even if the predicate flips back.
    """

    def __init__(self, predicate: Optional[Callable[[], bool]] = None):
        self._predicate = predicate
        self.tripped = False

    def __call__(self) -> bool:
        if not self.tripped and self._predicate is not None and self._predicate():
            self.tripped = True
        return self.tripped

    def trip(self) -> None:
        self.tripped = True
