"""Priority frontiers for the shortest-path engine.

Two interchangeable implementations of FrontierPort:

- HeapFrontier keeps a binary heap and never searches it. A priority
  decrease pushes a fresh entry and leaves the superseded one behind,
  so callers must skip entries whose priority is out of date.
- SortedFrontier keeps a plain list sorted by priority and updates
  entries in place, re-sorting after each change. Quadratic on large
  graphs but free of stale entries.

Both break ties by queue order, so equal-weight alternatives resolve
the same way on every run.
"""

from __future__ import annotations

import heapq
import itertools
from operator import itemgetter
from typing import Dict, Iterator, List, Optional, Tuple

from ..domain.errors import ConfigurationError
from ..ports.frontier import FrontierEntry, FrontierPort


def _check_priority(node: str, priority: float) -> None:
    if priority < 0:
        raise ValueError(f"Priority for {node!r} must be non-negative, got {priority}")


class HeapFrontier:
    """Binary-heap frontier with lazy removal of superseded entries."""

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, str]] = []
        # Lowest priority currently queued per node.
        self._queued: Dict[str, float] = {}
        self._counter: Iterator[int] = itertools.count()

    def insert(self, node: str, priority: float) -> None:
        _check_priority(node, priority)
        heapq.heappush(self._heap, (priority, next(self._counter), node))
        current = self._queued.get(node)
        if current is None or priority < current:
            self._queued[node] = priority

    def extract_min(self) -> Optional[FrontierEntry]:
        if not self._heap:
            return None
        priority, _, node = heapq.heappop(self._heap)
        if self._queued.get(node) == priority:
            del self._queued[node]
        return node, priority

    def decrease_priority(self, node: str, new_priority: float) -> None:
        current = self._queued.get(node)
        if current is not None:
            if new_priority > current:
                raise ValueError(
                    f"Cannot raise priority of {node!r} from {current} to {new_priority}"
                )
            if new_priority == current:
                return
        self.insert(node, new_priority)

    def __contains__(self, node: object) -> bool:
        return node in self._queued

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


class SortedFrontier:
    """Frontier backed by a list re-sorted after every change."""

    def __init__(self) -> None:
        # [node, priority] pairs; mutable so priorities can change in place.
        self._entries: List[List] = []

    def _resort(self) -> None:
        # list.sort is stable: equal priorities keep their queue order.
        self._entries.sort(key=itemgetter(1))

    def insert(self, node: str, priority: float) -> None:
        _check_priority(node, priority)
        self._entries.append([node, priority])
        self._resort()

    def extract_min(self) -> Optional[FrontierEntry]:
        if not self._entries:
            return None
        node, priority = self._entries.pop(0)
        return node, priority

    def decrease_priority(self, node: str, new_priority: float) -> None:
        for entry in self._entries:
            if entry[0] == node:
                if new_priority > entry[1]:
                    raise ValueError(
                        f"Cannot raise priority of {node!r} from {entry[1]} to {new_priority}"
                    )
                entry[1] = new_priority
                self._resort()
                return
        self.insert(node, new_priority)

    def __contains__(self, node: object) -> bool:
        return any(entry[0] == node for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


FRONTIER_KINDS = {
    "heap": HeapFrontier,
    "sorted": SortedFrontier,
}


def make_frontier(kind: str = "heap") -> FrontierPort:
    """Create an empty frontier of the given kind.

    Raises:
        ConfigurationError: If ``kind`` is not a known frontier.
    """
    try:
        factory = FRONTIER_KINDS[kind]
    except KeyError:
        raise ConfigurationError(
            f"Unknown frontier kind: {kind!r} (expected one of {sorted(FRONTIER_KINDS)})",
            setting_name="engine.frontier",
        ) from None
    return factory()
