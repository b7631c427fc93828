from fifteen.models.board import Board, CorruptBoardError, Move, goal_position

__all__ = ["Board", "CorruptBoardError", "Move", "goal_position"]
