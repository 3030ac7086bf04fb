"""Frontier port - Priority queue contract used by the engine.

Implementations:
- graph/frontier.py (HeapFrontier) - binary heap, default
- graph/frontier.py (SortedFrontier) - sorted list, re-sorted per operation

Implementations may keep superseded entries for a node after a priority
decrease. The engine recognises such entries because their priority no
longer matches its distance table, and skips them.
"""

from __future__ import annotations

from typing import Optional, Protocol, Tuple

# Priority is a non-negative distance or math.inf.
FrontierEntry = Tuple[str, float]


class FrontierPort(Protocol):
    """Mutable collection of (node, tentative distance) pairs."""

    def insert(self, node: str, priority: float) -> None:
        """Add an entry for ``node``."""
        ...

    def extract_min(self) -> Optional[FrontierEntry]:
        """Remove and return the lowest-priority entry, or None if empty.

        Ties are broken consistently: the entry queued first wins.
        """
        ...

    def decrease_priority(self, node: str, new_priority: float) -> None:
        """Lower the priority of ``node``, queueing it if absent."""
        ...

    def __len__(self) -> int:
        ...
