"""15-puzzle solver.

Usage::

    fifteen                          # shuffle 100 moves, solve, print steps
    fifteen -s 7 -m 30 -f vanilla    # seeded, shorter shuffle, plain output
    fifteen -t 1,2,3,4,5,6,7,8,9,10,11,12,13,14,0,15
"""

from __future__ import annotations

import importlib
import random
from enum import StrEnum
from typing import Optional

import typer
from loguru import logger

from fifteen import log
from fifteen.config import SHUFFLE_MOVES, SolverConfig
from fifteen.engine.generator import GameGenerator
from fifteen.engine.solver import BoardSolver
from fifteen.models.board import Board

cli_log = logger.bind(component="cli")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "fifteen.frontend.cli.vanilla.app",
    Frontend.rich: "fifteen.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _parse_tiles(raw: str) -> Board:
    try:
        return Board.from_flat(int(v) for v in raw.split(","))
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--tiles") from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    seed: Optional[int] = typer.Option(
        None, "-s", "--seed",
        help="Seed for the shuffle. Omit for a random board.",
    ),
    moves: int = typer.Option(
        SHUFFLE_MOVES, "-m", "--moves",
        min=0,
        help="Number of random moves used to shuffle the board.",
    ),
    tiles: Optional[str] = typer.Option(
        None, "-t", "--tiles",
        help="Solve this layout instead: 16 comma-separated values, 0 = blank.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="How to print the solution.",
    ),
    prune: bool = typer.Option(
        False, "--prune",
        help="Skip states already reached by an equal or shorter path.",
    ),
    uniform_heuristic: bool = typer.Option(
        False, "--uniform-heuristic",
        help="Rank the start board by Manhattan distance too.",
    ),
    delay: float = typer.Option(
        0.0, "--delay",
        min=0.0,
        help="Seconds to pause between printed boards.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search statistics.",
    ),
) -> None:
    """Shuffle a 15-puzzle and print the moves that solve it."""
    log.configure(verbose)

    if tiles is not None:
        board = _parse_tiles(tiles)
        if not GameGenerator.is_solvable(board):
            cli_log.error("Layout is unsolvable, refusing to search")
            raise typer.Exit(code=1)
    else:
        board = GameGenerator.shuffled(random.Random(seed), moves)

    cli_log.debug("Start board:\n{}", board)
    solver = BoardSolver(
        SolverConfig(prune_duplicates=prune, uniform_heuristic=uniform_heuristic)
    )
    path = solver.solve(board)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(board, path, delay=delay)


if __name__ == "__main__":
    app()
