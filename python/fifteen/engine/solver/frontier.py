"""Search frontier: path-carrying nodes in a min-priority queue."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass

from fifteen.models.board import Board, Move


@dataclass(frozen=True)
class HistoryNode:
    """A board reached during search and the moves that led to it."""

    board: Board
    path: tuple[Move, ...] = ()

    @property
    def g(self) -> int:
        return len(self.path)

    def extend(self, move: Move, board: Board) -> HistoryNode:
        return HistoryNode(board=board, path=self.path + (move,))


class Frontier:
    """Min-heap of ``HistoryNode`` keyed by an integer priority.

    There is no decrease-key: the same board may sit in the queue several
    times under different keys.  Equal keys pop in insertion order.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, HistoryNode]] = []
        self._counter = itertools.count()

    def push(self, node: HistoryNode, priority: int) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), node))

    def pop(self) -> tuple[HistoryNode, int]:
        """Remove and return the lowest-keyed node with its key."""
        priority, _, node = heapq.heappop(self._heap)
        return node, priority

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
