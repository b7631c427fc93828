"""Rich terminal frontend — prints the start board and every step to the goal."""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fifteen.config import BOARD_SIZE
from fifteen.engine.gameplay import GamePlay
from fifteen.models.board import Board, Move

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(BOARD_SIZE * BOARD_SIZE - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(BOARD_SIZE):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.get_board()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _print_step(board: Board, title: str) -> None:
    panel = Panel(
        Align.center(render_board(board)),
        title=title,
        border_style="cyan",
        padding=(0, 2),
    )
    console.print(panel)


# -- public entry point -------------------------------------------------------


def run(board: Board, moves: list[Move], delay: float = 0.0) -> None:
    """Print *board*, then the board after each of *moves*."""
    _print_step(board, "[bold yellow]Start[/bold yellow]")
    if not moves:
        if board.is_solved():
            console.print(Text("Already solved!", style="bold green"))
        else:
            console.print(Text("No solution found.", style="bold red"))
        return

    game = GamePlay(board)
    for i, (move, current) in enumerate(zip(moves, game.replay(moves)), 1):
        _print_step(
            current,
            f"[bold cyan]Move {i}/{len(moves)}[/bold cyan] [dim]({move.value})[/dim]",
        )
        if delay:
            time.sleep(delay)

    console.print(Text(f"Solved in {len(moves)} moves!", style="bold green"))
