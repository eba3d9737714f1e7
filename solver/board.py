"""
Board representation for TicTacToe.
A board is any sequence of 9 Marks in row-major order:

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8

The solver never searches on the caller's sequence directly. It copies it
into a numpy int8 array ("cells") and works on that copy.
"""

from enum import IntEnum
from typing import Iterable, List, Sequence

import numpy as np

from .config import SolverConfig
from .errors import InvalidBoardError


class Mark(IntEnum):
    """The value of a single cell."""
    EMPTY = 0
    X = 1       # First player
    O = 2       # Second player

    def opposite(self) -> "Mark":
        """Get the opposite player's mark."""
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        raise ValueError("EMPTY has no opposite")

    @property
    def symbol(self) -> str:
        """Single character used when printing boards."""
        return _SYMBOLS[self]


_SYMBOLS = {Mark.EMPTY: ".", Mark.X: "X", Mark.O: "O"}

# Characters accepted by parse_board
_TEXT_MARKS = {
    "X": Mark.X, "x": Mark.X,
    "O": Mark.O, "o": Mark.O,
    ".": Mark.EMPTY, "-": Mark.EMPTY, "_": Mark.EMPTY, " ": Mark.EMPTY,
}
_TEXT_SEPARATORS = "|/\n\t"

_MARK_VALUES = frozenset(int(m) for m in Mark)


def new_board() -> List[Mark]:
    """Create an empty board."""
    return [Mark.EMPTY] * SolverConfig.CELL_COUNT


def as_cells(board: Sequence[Mark]) -> np.ndarray:
    """
    Validate a board and copy it into a fresh int8 array.

    Args:
        board: Sequence of 9 Marks (a list, tuple or 1-D array).

    Returns:
        A new array of shape (9,) that the caller owns.

    Raises:
        InvalidBoardError: Wrong length, or a value outside the Mark domain.
    """
    try:
        values = list(board)
    except TypeError as e:
        raise InvalidBoardError(f"Board must be a sequence, got {type(board).__name__}") from e

    if len(values) != SolverConfig.CELL_COUNT:
        raise InvalidBoardError(
            f"Board must have {SolverConfig.CELL_COUNT} cells, got {len(values)}"
        )

    for index, value in enumerate(values):
        # bool is an int subclass, but True is not a Mark
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise InvalidBoardError(f"Cell {index} holds {value!r}, which is not a Mark")
        if int(value) not in _MARK_VALUES:
            raise InvalidBoardError(f"Cell {index} holds {value!r}, which is not a Mark")

    return np.fromiter((int(v) for v in values), dtype=np.int8, count=SolverConfig.CELL_COUNT)


def empty_cells(cells: np.ndarray) -> np.ndarray:
    """Indices of the empty cells, ascending."""
    return np.flatnonzero(cells == Mark.EMPTY)


def to_marks(cells: Iterable[int]) -> List[Mark]:
    """Convert an array of cells back into a list of Marks."""
    return [Mark(int(v)) for v in cells]


def parse_board(text: str) -> List[Mark]:
    """
    Parse a board from text, e.g. "XO./.X./..O" or "XOX OXO OXO".

    'X' and 'O' are marks, '.', '-', '_' and space are empty cells.
    '|', '/', tabs and newlines are ignored.
    """
    chars = [c for c in text if c not in _TEXT_SEPARATORS]

    # Allow "XOX OXO OXO" style input where spaces separate rows
    if len(chars) > SolverConfig.CELL_COUNT:
        chars = [c for c in chars if c != " "]

    if len(chars) != SolverConfig.CELL_COUNT:
        raise InvalidBoardError(
            f"Board text must describe {SolverConfig.CELL_COUNT} cells, got {len(chars)}: {text!r}"
        )

    board = []
    for c in chars:
        if c not in _TEXT_MARKS:
            raise InvalidBoardError(f"Unknown board character {c!r} in {text!r}")
        board.append(_TEXT_MARKS[c])
    return board


def format_board(board: Sequence[Mark], show_indices: bool = False) -> str:
    """
    Format a board as a grid for the console.

    Args:
        board: The board to format.
        show_indices: Print the cell index in empty cells instead of a blank.
    """
    marks = to_marks(as_cells(board))
    size = SolverConfig.BOARD_SIZE

    lines = ["┌───┬───┬───┐"]
    for row in range(size):
        row_str = "│"
        for col in range(size):
            index = row * size + col
            mark = marks[index]
            if mark == Mark.EMPTY:
                text = str(index) if show_indices else " "
            else:
                text = mark.symbol
            row_str += f" {text} │"
        lines.append(row_str)

        if row < size - 1:
            lines.append("├───┼───┼───┤")

    lines.append("└───┴───┴───┘")
    return "\n".join(lines)
