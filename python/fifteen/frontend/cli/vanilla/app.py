"""Vanilla terminal frontend — plain text, no styling."""

from __future__ import annotations

import time

from fifteen.config import BOARD_SIZE
from fifteen.engine.gameplay import GamePlay
from fifteen.models.board import Board, Move


def render_board(board: Board) -> str:
    """Return a boxed text representation of the board."""
    width = len(str(BOARD_SIZE * BOARD_SIZE - 1))
    sep = "+" + (("-" * (width + 2) + "+") * BOARD_SIZE)

    lines: list[str] = [sep]
    for row in board.get_board():
        cells = [f" {'.' if v == 0 else v:>{width}} " for v in row]
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def run(board: Board, moves: list[Move], delay: float = 0.0) -> None:
    """Print *board*, then the board after each of *moves*."""
    print(render_board(board))
    if not moves:
        print("Already solved!" if board.is_solved() else "No solution found.")
        return

    game = GamePlay(board)
    for i, current in enumerate(game.replay(moves), 1):
        print(f"\nMove {i}/{len(moves)} ({moves[i - 1].value})")
        print(render_board(current))
        if delay:
            time.sleep(delay)

    print(f"\nSolved in {len(moves)} moves!")
