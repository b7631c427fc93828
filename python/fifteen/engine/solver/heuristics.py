"""Remaining-cost estimates for 15-puzzle boards."""

from __future__ import annotations

from fifteen.config import BOARD_SIZE
from fifteen.models.board import Board, goal_position

TILE_COUNT = BOARD_SIZE * BOARD_SIZE - 1


def misplaced_tiles(board: Board) -> int:
    """Number of non-blank tiles outside their goal cell."""
    in_place = 0
    for value in range(1, TILE_COUNT + 1):
        r, c = goal_position(value)
        if board.tiles[r][c] == value:
            in_place += 1
    return TILE_COUNT - in_place


def manhattan_distance(board: Board) -> int:
    """Sum of row and column distances of every tile to its goal cell.

    Admissible: each move shifts exactly one tile by one cell.
    """
    total = 0
    for r, row in enumerate(board.tiles):
        for c, value in enumerate(row):
            if value == 0:
                continue
            gr, gc = goal_position(value)
            total += abs(r - gr) + abs(c - gc)
    return total
