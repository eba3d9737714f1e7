"""
Outcome evaluation for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple

import numpy as np

from .board import Mark, as_cells


class Outcome(Enum):
    """Status of a board."""
    PLAYER_ONE_WINS = "x_wins"
    PLAYER_TWO_WINS = "o_wins"
    DRAW = "draw"
    ONGOING = "ongoing"

    @property
    def is_terminal(self) -> bool:
        """True if the game has ended (win or draw)."""
        return self != Outcome.ONGOING

    @property
    def winner(self) -> Optional[Mark]:
        """The winning mark, or None for a draw or an ongoing game."""
        if self == Outcome.PLAYER_ONE_WINS:
            return Mark.X
        if self == Outcome.PLAYER_TWO_WINS:
            return Mark.O
        return None

    @staticmethod
    def for_winner(mark: Mark) -> "Outcome":
        """Get the outcome where `mark` has won."""
        if mark == Mark.X:
            return Outcome.PLAYER_ONE_WINS
        if mark == Mark.O:
            return Outcome.PLAYER_TWO_WINS
        raise ValueError(f"{mark!r} cannot win")


# All possible winning lines, checked in this order
WIN_LINES = np.array([
    # Rows
    [0, 1, 2],
    [3, 4, 5],
    [6, 7, 8],
    # Columns
    [0, 3, 6],
    [1, 4, 7],
    [2, 5, 8],
    # Diagonals
    [0, 4, 8],
    [2, 4, 6],
], dtype=np.intp)
WIN_LINES.setflags(write=False)


def _completed_lines(cells: np.ndarray) -> np.ndarray:
    """Boolean mask over WIN_LINES: True where all 3 cells hold the same mark."""
    lines = cells[WIN_LINES]
    first = lines[:, 0]
    return (first != Mark.EMPTY) & (first == lines[:, 1]) & (first == lines[:, 2])


def outcome_of(cells: np.ndarray) -> Outcome:
    """
    Evaluate an already-validated cell array.

    This is the hot path of the search, so it skips validation.
    """
    completed = _completed_lines(cells)
    if completed.any():
        # argmax gives the first completed line
        first_line = WIN_LINES[completed.argmax()]
        return Outcome.for_winner(Mark(int(cells[first_line[0]])))

    if not (cells == Mark.EMPTY).any():
        return Outcome.DRAW

    return Outcome.ONGOING


def evaluate(board: Sequence[Mark]) -> Outcome:
    """
    Report the status of a board.

    Args:
        board: Sequence of 9 Marks.

    Returns:
        The winner's outcome if any line is complete, DRAW if the board is
        full, ONGOING otherwise.

    Raises:
        InvalidBoardError: If the board is malformed.
    """
    return outcome_of(as_cells(board))


def winning_line(board: Sequence[Mark]) -> Optional[Tuple[int, int, int]]:
    """
    Get the winning line if there is one.

    Returns:
        The first completed line as a tuple of 3 indices, or None.
    """
    completed = _completed_lines(as_cells(board))
    if not completed.any():
        return None
    a, b, c = WIN_LINES[completed.argmax()]
    return int(a), int(b), int(c)
