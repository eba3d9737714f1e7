"""
Controller module for TicTacToe.
Handles turns, game modes, and when the computer moves.
"""

from .config import GameConfig
from .move_validator import MoveValidator, ValidationResult
from .game_controller import GameController, GameMode, Move
