"""Advances a working board along a move sequence."""

from __future__ import annotations

from typing import Iterable, Iterator

from fifteen.models.board import Board, Move


class GamePlay:
    """Owns the current board of one session and counts applied moves."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0

    def move(self, move: Move) -> bool:
        """Apply *move* to the working board.

        Returns False, leaving the board untouched, if the blank would
        leave the grid.
        """
        moved = self.board.move_tile(move)
        if moved is None:
            return False
        self.board = moved
        self.moves += 1
        return True

    def replay(self, moves: Iterable[Move]) -> Iterator[Board]:
        """Apply *moves* in order, yielding the board after each one."""
        for i, move in enumerate(moves):
            if not self.move(move):
                raise ValueError(
                    f"Move {i} ({move.value}) is illegal with the blank at "
                    f"{self.board.free_slot()}"
                )
            yield self.board

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()
