"""
Errors raised by the TicTacToe solver.
"""


class SolverError(Exception):
    """Base class for all solver errors."""


class InvalidBoardError(SolverError, ValueError):
    """The board has the wrong length or holds a value that is not a Mark."""


class NoLegalMoveError(SolverError, ValueError):
    """A move was requested on a board that is already won, drawn or full."""
