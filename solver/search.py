"""
Minimax search for TicTacToe.
Scores positions with alpha-beta pruning and picks the best move.

Both entry points copy the board they are given, so the caller's board is
never modified. Inside the search a single copy is mutated in place and
every placement is undone before the branch returns.
"""

import logging
from typing import Sequence

import numpy as np

from .board import Mark, as_cells, empty_cells
from .config import SolverConfig
from .errors import NoLegalMoveError
from .outcome import Outcome, outcome_of

logger = logging.getLogger(__name__)


def _searching_mark(player: Mark) -> Mark:
    if player not in (Mark.X, Mark.O):
        raise ValueError(f"player must be Mark.X or Mark.O, got {player!r}")
    return Mark(player)


def _terminal_score(outcome: Outcome, player: Mark, depth: int) -> int:
    """Score a finished game from `player`'s point of view."""
    if outcome == Outcome.DRAW:
        return SolverConfig.DRAW_SCORE
    if outcome.winner == player:
        return SolverConfig.WIN_SCORE - depth  # Win (prefer faster wins)
    return depth - SolverConfig.WIN_SCORE      # Loss (prefer slower losses)


def _minimax(
    cells: np.ndarray,
    depth: int,
    is_maximizing: bool,
    alpha: float,
    beta: float,
    player: Mark,
) -> int:
    """
    Minimax with alpha-beta pruning on a validated cell array.

    `cells` is mutated during the call and restored before it returns.
    """
    outcome = outcome_of(cells)
    if outcome.is_terminal:
        return _terminal_score(outcome, player, depth)

    if is_maximizing:
        max_score = float('-inf')
        for index in empty_cells(cells):
            cells[index] = player
            score = _minimax(cells, depth + 1, False, alpha, beta, player)
            cells[index] = Mark.EMPTY
            max_score = max(max_score, score)
            alpha = max(alpha, max_score)
            if beta <= alpha:
                break  # Prune
        return max_score
    else:
        opponent = player.opposite()
        min_score = float('inf')
        for index in empty_cells(cells):
            cells[index] = opponent
            score = _minimax(cells, depth + 1, True, alpha, beta, player)
            cells[index] = Mark.EMPTY
            min_score = min(min_score, score)
            beta = min(beta, min_score)
            if beta <= alpha:
                break  # Prune
        return min_score


def search(
    board: Sequence[Mark],
    depth: int = 0,
    maximizing: bool = True,
    alpha: float = float('-inf'),
    beta: float = float('inf'),
    player: Mark = Mark.O,
) -> int:
    """
    Score a position with minimax and alpha-beta pruning.

    Args:
        board: Sequence of 9 Marks. Not modified.
        depth: Plies already played below the top-level call.
        maximizing: True if it is `player`'s turn to move.
        alpha: Best score the maximizer is already assured of.
        beta: Best score the minimizer is already assured of.
        player: The maximizing (computer) mark.

    Returns:
        10 - d if `player` wins at depth d, d - 10 if the opponent does,
        0 for a draw, assuming both sides play optimally.

    Raises:
        InvalidBoardError: If the board is malformed.
    """
    player = _searching_mark(player)
    return int(_minimax(as_cells(board), depth, maximizing, alpha, beta, player))


def best_move(board: Sequence[Mark], player: Mark = Mark.O) -> int:
    """
    Get the best move for `player`.

    Empty cells are tried in ascending order and only a strictly greater
    score replaces the current choice, so the lowest index wins ties.

    Args:
        board: Sequence of 9 Marks with the game still in progress. Not modified.
        player: The mark to move.

    Returns:
        Index (0-8) of the chosen cell.

    Raises:
        InvalidBoardError: If the board is malformed.
        NoLegalMoveError: If the game is already over.
    """
    player = _searching_mark(player)
    cells = as_cells(board)

    outcome = outcome_of(cells)
    if outcome.is_terminal:
        raise NoLegalMoveError(f"No legal move: game is over ({outcome.value})")

    best_score = float('-inf')
    best_index = -1

    for index in empty_cells(cells):
        # Try this move
        cells[index] = player
        score = _minimax(cells, 0, False, float('-inf'), float('inf'), player)
        cells[index] = Mark.EMPTY

        if score > best_score:
            best_score = score
            best_index = int(index)

    logger.debug("Best move for %s: %d (score: %s)", player.symbol, best_index, best_score)

    return best_index
