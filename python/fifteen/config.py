"""Defaults and tunables for board generation and search."""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 4
SHUFFLE_MOVES = 100
DEFAULT_FRONTEND = "rich"


@dataclass(frozen=True)
class SolverConfig:
    """Options for ``BoardSolver``.

    Both flags default to off, which reproduces the plain best-first search:
    the root is ranked by misplaced tiles, every successor by Manhattan
    distance, and repeated states are never pruned.
    """

    # Keep the best known path length per state and drop dominated entries.
    prune_duplicates: bool = False
    # Rank the root node with Manhattan distance as well.
    uniform_heuristic: bool = False
