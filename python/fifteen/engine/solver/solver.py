"""Best-first 15-puzzle solver."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from fifteen.config import SolverConfig
from fifteen.engine.solver.frontier import Frontier, HistoryNode
from fifteen.engine.solver.heuristics import manhattan_distance, misplaced_tiles
from fifteen.models.board import Board, Move

log = logger.bind(component="solver")


@dataclass
class SearchStats:
    expanded: int = 0
    generated: int = 0
    pruned: int = 0
    peak_frontier: int = 0


class BoardSolver:
    """A*-style search ranking frontier entries by ``f = g + h``.

    Successors are ranked by Manhattan distance.  The root is ranked by
    misplaced tiles unless ``SolverConfig.uniform_heuristic`` is set; since
    it is alone in the queue its key never changes the outcome.
    """

    def __init__(self, config: SolverConfig | None = None) -> None:
        self.config = config or SolverConfig()
        self.stats = SearchStats()

    def solve(self, board: Board) -> list[Move]:
        """Return a move sequence that solves *board*, or ``[]``.

        ``[]`` means either *board* is already solved or the frontier ran
        dry.  There is no step or time bound: an unsolvable board can keep
        the search running until memory runs out.
        """
        self.stats = stats = SearchStats()
        prune = self.config.prune_duplicates
        best_g: dict[Board, int] = {board: 0}

        frontier = Frontier()
        root_h = (
            manhattan_distance(board)
            if self.config.uniform_heuristic
            else misplaced_tiles(board)
        )
        frontier.push(HistoryNode(board=board), root_h)

        while frontier:
            stats.peak_frontier = max(stats.peak_frontier, len(frontier))
            node, _ = frontier.pop()

            if node.board.is_solved():
                log.info("Solved in {} moves", node.g)
                log.debug(
                    "expanded={} generated={} pruned={} peak_frontier={}",
                    stats.expanded, stats.generated, stats.pruned,
                    stats.peak_frontier,
                )
                return list(node.path)

            if prune and node.g > best_g.get(node.board, node.g):
                stats.pruned += 1
                continue

            stats.expanded += 1
            g = node.g + 1
            for move in Move:
                successor = node.board.move_tile(move)
                if successor is None:
                    continue
                if prune:
                    known = best_g.get(successor)
                    if known is not None and known <= g:
                        stats.pruned += 1
                        continue
                    best_g[successor] = g
                stats.generated += 1
                frontier.push(
                    node.extend(move, successor), g + manhattan_distance(successor)
                )

        log.warning("Frontier exhausted after {} expansions", stats.expanded)
        return []

    def hint(self, board: Board) -> Move | None:
        """Return the first move of a solution, or ``None``."""
        if board.is_solved():
            return None
        moves = self.solve(board)
        return moves[0] if moves else None


def solve(board: Board, config: SolverConfig | None = None) -> list[Move]:
    return BoardSolver(config).solve(board)
