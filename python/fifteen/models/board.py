"""Board model for the 15-puzzle."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable

from fifteen.config import BOARD_SIZE, SHUFFLE_MOVES

Tiles = tuple[tuple[int, ...], ...]


class CorruptBoardError(RuntimeError):
    """The board lost its blank. Raised for broken invariants only."""


class Move(StrEnum):
    """Direction the *blank* travels.

    ``Move.DOWN`` swaps the blank with the tile below it, so that tile
    slides up.  Declaration order is the search expansion order.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Move:
        return _OPPOSITES[self]


_OPPOSITES = {
    Move.UP: Move.DOWN,
    Move.DOWN: Move.UP,
    Move.LEFT: Move.RIGHT,
    Move.RIGHT: Move.LEFT,
}

_OFFSETS = {
    Move.UP: (-1, 0),
    Move.DOWN: (1, 0),
    Move.LEFT: (0, -1),
    Move.RIGHT: (0, 1),
}


def goal_position(value: int) -> tuple[int, int]:
    """Row and column where tile *value* belongs in the solved layout."""
    return divmod(value - 1, BOARD_SIZE)


@dataclass(frozen=True)
class Board:
    """A 4×4 puzzle configuration.

    Boards are values: ``move_tile`` returns a new board and never touches
    the receiver.  Tiles are stored row-major as nested tuples, 0 being the
    blank.
    """

    tiles: Tiles

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls) -> Board:
        """Return the goal layout (1..15 in order, blank bottom-right)."""
        flat = list(range(1, BOARD_SIZE * BOARD_SIZE)) + [0]
        return cls.from_flat(flat)

    @classmethod
    def new(
        cls, rng: random.Random | None = None, moves: int = SHUFFLE_MOVES
    ) -> Board:
        """Return a shuffled board that is always solvable.

        Starts from the solved layout and draws *moves* directions uniformly
        from *rng*.  A draw that would push the blank off the grid is skipped,
        not retried.
        """
        rng = rng if rng is not None else random.Random()
        directions = list(Move)
        board = cls.solved()
        for _ in range(moves):
            moved = board.move_tile(rng.choice(directions))
            if moved is not None:
                board = moved
        return board

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> Board:
        """Create a board from four rows of four tiles.

        Raises ``ValueError`` unless the values are exactly 0..15.
        """
        tiles = tuple(tuple(int(v) for v in row) for row in rows)
        if len(tiles) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in tiles):
            raise ValueError(
                f"Expected a {BOARD_SIZE}×{BOARD_SIZE} grid, got "
                f"{[len(row) for row in tiles]}."
            )
        values = sorted(v for row in tiles for v in row)
        if values != list(range(BOARD_SIZE * BOARD_SIZE)):
            raise ValueError(
                f"Tiles must be 0..{BOARD_SIZE * BOARD_SIZE - 1} exactly once, "
                f"got {values}."
            )
        return cls(tiles=tiles)

    @classmethod
    def from_flat(cls, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 0, 15])
        """
        flat = list(flat)
        if len(flat) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(
                f"Expected {BOARD_SIZE * BOARD_SIZE} tiles, got {len(flat)}."
            )
        return cls.from_rows(
            flat[r * BOARD_SIZE : (r + 1) * BOARD_SIZE] for r in range(BOARD_SIZE)
        )

    # -- queries --------------------------------------------------------------

    def get_board(self) -> Tiles:
        return self.tiles

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def free_slot(self) -> tuple[int, int]:
        """Return ``(row, col)`` of the blank."""
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == 0:
                    return r, c
        raise CorruptBoardError(f"No free slot found in {self.tiles!r}")

    def is_solved(self) -> bool:
        """Check that tiles 1..15 occupy the first 15 row-major cells."""
        for value in range(1, BOARD_SIZE * BOARD_SIZE):
            r, c = goal_position(value)
            if self.tiles[r][c] != value:
                return False
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == BOARD_SIZE - 1 and col == BOARD_SIZE - 1
        return goal_position(val) == (row, col)

    # -- transitions ----------------------------------------------------------

    def move_tile(self, move: Move) -> Board | None:
        """Swap the blank with its neighbour in *move*'s direction.

        Returns ``None`` when that neighbour would be off the grid.
        """
        br, bc = self.free_slot()
        dr, dc = _OFFSETS[move]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < BOARD_SIZE and 0 <= tc < BOARD_SIZE):
            return None

        rows = [list(row) for row in self.tiles]
        rows[br][bc], rows[tr][tc] = rows[tr][tc], 0
        return Board(tiles=tuple(tuple(row) for row in rows))

    def legal_moves(self) -> list[Move]:
        return [m for m in Move if self.move_tile(m) is not None]

    def __str__(self) -> str:
        return "\n".join(" ".join(f"{v:>2}" for v in row) for row in self.tiles)
