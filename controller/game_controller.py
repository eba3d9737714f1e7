"""
Game controller for TicTacToe.
Tracks the board, whose turn it is, and the game mode, and decides
when the computer gets to move.
"""

import logging
from enum import Enum
from typing import List, Optional
from dataclasses import dataclass, field

from solver.board import Mark, new_board
from solver.outcome import Outcome, evaluate
from solver.search import best_move

from .config import GameConfig
from .move_validator import MoveValidator, ValidationResult

logger = logging.getLogger(__name__)


class GameMode(Enum):
    """Who the human is playing against."""
    VS_COMPUTER = "computer"
    VS_HUMAN = "human"

    def opposite(self) -> "GameMode":
        """Get the other mode."""
        return GameMode.VS_HUMAN if self == GameMode.VS_COMPUTER else GameMode.VS_COMPUTER


@dataclass
class Move:
    """
    A move in the current game.
    """
    player: Mark            # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # Which move this is, starting at 0


@dataclass
class GameController:
    """
    The turn and mode controller of a TicTacToe game.

    Game flow (vs computer):
    1. X moves first; the human taps a cell with play()
    2. If it is now the computer's turn, the caller invokes computer_move()
    3. Repeat until someone wins or it's a draw

    The outcome is never stored; it is always recomputed from the board.
    """

    mode: GameMode = GameMode(GameConfig.DEFAULT_MODE)

    # Mark the human plays in vs-computer mode
    human_mark: Mark = GameConfig.HUMAN_MARK

    # The live board - a list of 9 Marks
    board: List[Mark] = field(default_factory=new_board)

    # Current player's turn
    current_player: Mark = GameConfig.FIRST_PLAYER

    # Moves of the current game
    moves: List[Move] = field(default_factory=list)

    validator: MoveValidator = field(default_factory=MoveValidator, repr=False)

    def __post_init__(self):
        if self.human_mark not in (Mark.X, Mark.O):
            raise ValueError(f"human_mark must be Mark.X or Mark.O, got {self.human_mark!r}")
        self.human_mark = Mark(self.human_mark)

    @property
    def computer_mark(self) -> Mark:
        """The mark the computer plays in vs-computer mode."""
        return self.human_mark.opposite()

    @property
    def outcome(self) -> Outcome:
        return evaluate(self.board)

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def is_computer_turn(self) -> bool:
        """True if the computer should move now."""
        return (
            self.mode == GameMode.VS_COMPUTER
            and self.current_player == self.computer_mark
            and not self.is_game_over
        )

    def play(self, index: int) -> ValidationResult:
        """
        Place the current player's mark on a cell (a tap on the board).

        Args:
            index: Cell index (0-8).

        Returns:
            ValidationResult; the board is unchanged if the move is rejected.
        """
        result = self.validator.validate_move(self.board, index)
        if not result.is_valid:
            logger.debug("Rejected move %r: %s", index, result.error_message)
            return result

        if self.mode == GameMode.VS_COMPUTER and self.current_player == self.computer_mark:
            return ValidationResult(
                is_valid=False,
                error_message="Wait for the computer to move!"
            )

        self._place(index)
        return result

    def computer_move(self) -> Optional[int]:
        """
        Let the computer make its move.

        Returns:
            The index the computer played, or None if it is not the
            computer's turn.
        """
        if not self.is_computer_turn:
            logger.warning("computer_move() called when it is not the computer's turn")
            return None

        # Search on a copy so the live board is only changed by _place
        index = best_move(list(self.board), self.computer_mark)
        self._place(index)

        logger.info("Computer (%s) played cell %d", self.computer_mark.symbol, index)
        return index

    def _place(self, index: int):
        """Apply a validated move and switch turns."""
        self.board[index] = self.current_player
        self.moves.append(Move(
            player=self.current_player,
            index=index,
            move_number=len(self.moves)
        ))
        self.current_player = self.current_player.opposite()

    def restart(self):
        """Start a new game in the same mode."""
        self.board = new_board()
        self.current_player = GameConfig.FIRST_PLAYER
        self.moves = []

    def switch_mode(self):
        """Toggle between vs-computer and vs-human, and start a new game."""
        self.mode = self.mode.opposite()
        self.restart()
        logger.info("Switched to %s mode", self.mode.value)

    def status_message(self) -> str:
        """One-line game status for display."""
        outcome = self.outcome

        if outcome == Outcome.DRAW:
            return "It's a draw!"
        if outcome.winner is not None:
            return f"Winner: {outcome.winner.symbol}"
        return f"Next: {self.current_player.symbol}"
