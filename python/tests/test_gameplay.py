from __future__ import annotations

import pytest

from fifteen.engine.gameplay import GamePlay
from fifteen.models.board import Board, Move


def test_move_advances_working_copy(solved: Board) -> None:
    game = GamePlay(solved)
    assert game.move(Move.UP)
    assert game.moves == 1
    assert game.board.free_slot() == (2, 3)
    assert solved.is_solved()
    assert not game.is_won


def test_illegal_move_is_rejected(solved: Board) -> None:
    game = GamePlay(solved)
    assert not game.move(Move.DOWN)
    assert game.moves == 0
    assert game.board == solved
    assert game.is_won


def test_replay_yields_each_board(solved: Board) -> None:
    start = solved.move_tile(Move.UP).move_tile(Move.LEFT)
    game = GamePlay(start)
    boards = list(game.replay([Move.RIGHT, Move.DOWN]))

    assert boards == [solved.move_tile(Move.UP), solved]
    assert game.is_won
    assert game.moves == 2


def test_replay_rejects_illegal_move(solved: Board) -> None:
    game = GamePlay(solved)
    with pytest.raises(ValueError, match="illegal"):
        list(game.replay([Move.UP, Move.DOWN, Move.DOWN]))
    assert game.moves == 2
