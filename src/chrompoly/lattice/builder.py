"""Depth-first enumeration of every partition reachable by contraction."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Set

from chrompoly.lattice.cancel import StopCheck
from chrompoly.lattice.contract import direct_contractions
from chrompoly.lattice.partition import Partition

logger = logging.getLogger(__name__)


def build_lattice(
    root: Partition,
    *,
    stop: Optional[StopCheck] = None,
    on_progress: Optional[Callable[[int], None]] = None,
) -> List[Partition]:
    """
    Enumerate the contraction closure of *root* in depth-first post-order.

    A partition is appended only after all its contractions have been, so it
    has a larger index than anything it can reach and *root* comes last.
    Already-seen partitions are not expanded again.

    stop is polled once per visited partition; when it trips the traversal
    ends and the partial list is returned (callers must check stop.tripped).
    on_progress receives the number of partitions found after every append.
    """
    found: List[Partition] = []
    seen: Set[Partition] = set()

    # Each frame: [partition, iterator over its contractions or None]
    stack: list = [[root, None]]
    while stack:
        frame = stack[-1]
        part, children = frame
        if children is None:
            if stop is not None and stop():
                logger.debug("lattice build stopped after %d partitions", len(found))
                return found
            if part in seen:
                stack.pop()
                continue
            if part.num_blocks > 1 and part.edges:
                children = iter(direct_contractions(part))
            else:
                children = iter(())
            frame[1] = children

        child = next(children, None)
        if child is None:
            stack.pop()
            seen.add(part)
            found.append(part)
            if on_progress is not None:
                on_progress(len(found))
        else:
            stack.append([child, None])

    logger.debug("lattice has %d partitions", len(found))
    return found
