from fifteen.engine.solver.frontier import Frontier, HistoryNode
from fifteen.engine.solver.heuristics import manhattan_distance, misplaced_tiles
from fifteen.engine.solver.solver import BoardSolver, SearchStats, solve

__all__ = [
    "BoardSolver",
    "Frontier",
    "HistoryNode",
    "SearchStats",
    "manhattan_distance",
    "misplaced_tiles",
    "solve",
]
