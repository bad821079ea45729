from .board import Board, calc_drop_pos, is_valid_move, lock_piece, propagate_lines
from .game import GameState
from .metrics import HEURISTICS, N_HEURISTICS, evaluate_board, weighted_loss
from .piece import Piece, PieceColor, random_piece
from .search import Placement, pick_move, search_placements
from .types import Action, Position

__all__ = [
    "Action",
    "Board",
    "GameState",
    "HEURISTICS",
    "N_HEURISTICS",
    "Piece",
    "PieceColor",
    "Placement",
    "Position",
    "calc_drop_pos",
    "evaluate_board",
    "is_valid_move",
    "lock_piece",
    "pick_move",
    "propagate_lines",
    "random_piece",
    "search_placements",
    "weighted_loss",
]
