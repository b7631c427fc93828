"""Board model: layout, move semantics and edge handling."""

from __future__ import annotations

import random

import pytest

from fifteen.models.board import Board, CorruptBoardError, Move, goal_position

ALL_VALUES = list(range(16))


def _flat(board: Board) -> list[int]:
    return [v for row in board.get_board() for v in row]


# -- construction -------------------------------------------------------------


def test_solved_layout(solved: Board) -> None:
    assert _flat(solved) == list(range(1, 16)) + [0]
    assert solved.free_slot() == (3, 3)
    assert solved.is_solved()
    for value in range(1, 16):
        assert solved.get_tile(*goal_position(value)) == value


def test_goal_position() -> None:
    assert goal_position(1) == (0, 0)
    assert goal_position(4) == (0, 3)
    assert goal_position(5) == (1, 0)
    assert goal_position(15) == (3, 2)


def test_from_rows_matches_from_flat() -> None:
    flat = [5, 1, 2, 3, 0, 6, 7, 4, 9, 10, 11, 8, 13, 14, 15, 12]
    rows = [flat[i : i + 4] for i in range(0, 16, 4)]
    assert Board.from_rows(rows) == Board.from_flat(flat)


@pytest.mark.parametrize(
    "flat",
    [
        list(range(15)),
        list(range(17)),
        [1] * 16,
        list(range(1, 17)),
    ],
    ids=["short", "long", "duplicates", "no-blank"],
)
def test_from_flat_rejects_bad_layouts(flat: list[int]) -> None:
    with pytest.raises(ValueError):
        Board.from_flat(flat)


def test_from_rows_rejects_ragged_grid() -> None:
    rows = [[1, 2, 3, 4], [5, 6, 7], [8, 9, 10, 11, 12], [13, 14, 15, 0]]
    with pytest.raises(ValueError):
        Board.from_rows(rows)


def test_missing_blank_is_fatal() -> None:
    broken = Board(tiles=((1, 2, 3, 4), (5, 6, 7, 8), (9, 10, 11, 12), (13, 14, 15, 15)))
    with pytest.raises(CorruptBoardError):
        broken.free_slot()
    with pytest.raises(CorruptBoardError):
        broken.move_tile(Move.UP)


# -- shuffling ----------------------------------------------------------------


def test_new_is_deterministic_for_a_seed() -> None:
    assert Board.new(random.Random(7)) == Board.new(random.Random(7))


def test_new_without_moves_is_solved() -> None:
    assert Board.new(random.Random(7), moves=0).is_solved()


@pytest.mark.parametrize("seed", range(10))
def test_shuffle_keeps_every_value_once(seed: int) -> None:
    board = Board.new(random.Random(seed))
    assert sorted(_flat(board)) == ALL_VALUES


def test_new_accepts_no_rng() -> None:
    assert sorted(_flat(Board.new())) == ALL_VALUES


# -- moves --------------------------------------------------------------------


def test_move_order_is_fixed() -> None:
    assert list(Move) == [Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT]


def test_opposites() -> None:
    for move in Move:
        assert move.opposite != move
        assert move.opposite.opposite == move


def test_up_swaps_blank_with_tile_above(solved: Board) -> None:
    moved = solved.move_tile(Move.UP)
    assert moved is not None
    assert moved.free_slot() == (2, 3)
    assert moved.get_tile(3, 3) == 12
    assert not moved.is_solved()


def test_left_swaps_blank_with_tile_left(solved: Board) -> None:
    moved = solved.move_tile(Move.LEFT)
    assert moved is not None
    assert moved.free_slot() == (3, 2)
    assert moved.get_tile(3, 3) == 15


def test_move_does_not_mutate(solved: Board) -> None:
    before = solved.get_board()
    solved.move_tile(Move.UP)
    assert solved.get_board() == before
    assert solved.is_solved()


def test_edges_reject_moves() -> None:
    top_left = Board.from_flat([0] + list(range(1, 16)))
    assert top_left.move_tile(Move.UP) is None
    assert top_left.move_tile(Move.LEFT) is None
    assert top_left.legal_moves() == [Move.DOWN, Move.RIGHT]

    bottom_right = Board.solved()
    assert bottom_right.move_tile(Move.DOWN) is None
    assert bottom_right.move_tile(Move.RIGHT) is None
    assert bottom_right.legal_moves() == [Move.UP, Move.LEFT]


def test_center_blank_allows_every_move() -> None:
    board = Board.from_flat([1, 2, 3, 4, 5, 0, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15])
    assert board.legal_moves() == list(Move)


@pytest.mark.parametrize("seed", range(5))
def test_moves_are_reversible(seed: int) -> None:
    board = Board.new(random.Random(seed), moves=30)
    for move in Move:
        moved = board.move_tile(move)
        if moved is None:
            continue
        assert sorted(_flat(moved)) == ALL_VALUES
        assert moved.move_tile(move.opposite) == board


def test_boards_are_hashable(solved: Board) -> None:
    again = Board.solved()
    assert hash(again) == hash(solved)
    assert len({solved, again, solved.move_tile(Move.UP)}) == 2
