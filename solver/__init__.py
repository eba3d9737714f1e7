"""
Solver module for TicTacToe.
Handles the board, outcome evaluation, and minimax move selection.
"""

__version__ = "1.0.0"

from .board import Mark, new_board, as_cells, empty_cells, parse_board, format_board
from .errors import SolverError, InvalidBoardError, NoLegalMoveError
from .outcome import Outcome, WIN_LINES, evaluate, winning_line
from .search import search, best_move
