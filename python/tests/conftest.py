from __future__ import annotations

from collections import deque
from typing import Callable

import pytest

from fifteen.models.board import Board, Move


@pytest.fixture
def solved() -> Board:
    return Board.solved()



def _bfs_distance(board: Board) -> int:
    """Exact number of moves to the goal; only viable for shallow boards."""
    seen = {board}
    queue = deque([(board, 0)])
    while queue:
        current, depth = queue.popleft()
        if current.is_solved():
            return depth
        for move in Move:
            nxt = current.move_tile(move)
            if nxt is not None and nxt not in seen:
                seen.add(nxt)
                queue.append((nxt, depth + 1))
    raise AssertionError("goal unreachable")


@pytest.fixture
def shortest_distance() -> Callable[[Board], int]:
    return _bfs_distance
