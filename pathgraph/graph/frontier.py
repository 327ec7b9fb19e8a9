"""Search state for shortest-path queries.

A query keeps the best known cost per node and a min-priority frontier
of ``(cost, position)`` entries. Improved costs are pushed as new
entries instead of updating existing ones; outdated entries are
recognised and skipped when they are popped.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple


class State(NamedTuple):
    """Frontier entry. Ordered by cost first, as heapq compares tuples."""

    cost: int
    position: int


@dataclass
class Frontier:
    """Min-priority collection of frontier entries backed by heapq."""

    _heap: List[State] = field(default_factory=list, repr=False)

    def push(self, cost: int, position: int) -> None:
        heapq.heappush(self._heap, State(cost, position))

    def pop(self) -> State:
        """Remove and return the cheapest entry.

        Raises:
            IndexError: If the frontier is empty.
        """
        return heapq.heappop(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


@dataclass
class SearchState:
    """Transient state of one query, discarded when the query returns.

    Attributes:
        distances: Best known cost from the source for each reached node
        frontier: Candidates still to be expanded
    """

    distances: Dict[int, int] = field(default_factory=dict)
    frontier: Frontier = field(default_factory=Frontier)

    @classmethod
    def start(cls, source: int) -> SearchState:
        state = cls()
        state.distances[source] = 0
        state.frontier.push(0, source)
        return state

    def is_stale(self, cost: int, position: int) -> bool:
        """Check if a popped entry was superseded by a cheaper one."""
        best = self.distances.get(position)
        return best is not None and cost > best

    def relax(self, position: int, candidate: int) -> bool:
        """Record ``candidate`` for ``position`` if it improves on the best.

        Returns:
            True if the candidate was recorded and pushed.
        """
        best = self.distances.get(position)
        if best is not None and candidate >= best:
            return False
        self.distances[position] = candidate
        self.frontier.push(candidate, position)
        return True
