"""Produces starting layouts and checks whether they can be solved."""

from __future__ import annotations

import random

from fifteen.config import BOARD_SIZE, SHUFFLE_MOVES
from fifteen.models.board import Board


class GameGenerator:
    """Creates puzzles either by shuffling or by random placement."""

    @staticmethod
    def shuffled(rng: random.Random | None = None, moves: int = SHUFFLE_MOVES) -> Board:
        """Return a solvable board made of random legal moves."""
        return Board.new(rng, moves)

    @staticmethod
    def random_layout(rng: random.Random | None = None) -> Board:
        """Drop tiles 1..15 onto random empty cells.

        Half of all such layouts are unsolvable; check with ``is_solvable``.
        """
        rng = rng if rng is not None else random.Random()
        cells = BOARD_SIZE * BOARD_SIZE
        flat = [0] * cells
        for value in range(1, cells):
            while True:
                idx = rng.randrange(cells)
                if flat[idx] == 0:
                    flat[idx] = value
                    break
        return Board.from_flat(flat)

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal layout.

        On an even-width grid a layout is solvable when the inversion count
        plus the blank's row, counted 1-based from the bottom, is odd.
        """
        flat = [v for row in board.tiles for v in row if v != 0]
        inversions = sum(
            1
            for i in range(len(flat))
            for j in range(i + 1, len(flat))
            if flat[i] > flat[j]
        )
        blank_row, _ = board.free_slot()
        return (inversions + BOARD_SIZE - blank_row) % 2 == 1
