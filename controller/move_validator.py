"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import List, Optional, Sequence
from dataclasses import dataclass

from solver.board import Mark, as_cells, empty_cells
from solver.config import SolverConfig
from solver.outcome import outcome_of


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Index must be on the board (0-8)
    3. Can only place on empty cells
    """

    def validate_move(self, board: Sequence[Mark], index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place a mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        cells = as_cells(board)

        # Check if game is over
        outcome = outcome_of(cells)
        if outcome.is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range
        if isinstance(index, bool) or not isinstance(index, int) or not (
            0 <= index < SolverConfig.CELL_COUNT
        ):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be 0-{SolverConfig.CELL_COUNT - 1}."
            )

        # Check if cell is empty
        if cells[index] != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already taken by {Mark(int(cells[index])).symbol}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Sequence[Mark]) -> List[int]:
        """
        Get all valid moves on the board.

        Returns:
            Ascending list of empty cell indices, empty if the game is over.
        """
        cells = as_cells(board)

        if outcome_of(cells).is_terminal:
            return []

        return [int(i) for i in empty_cells(cells)]
