"""
Game configuration for TicTacToe.
Settings for players, game mode, timing and logging.
"""

import logging

from solver.board import Mark


class GameConfig:
    """
    Configuration class for game settings.
    Command-line flags of main.py override some of these.
    """

    # ==================== PLAYER SETTINGS ====================
    # X always moves first
    FIRST_PLAYER = Mark.X

    # Mark the human plays by default in vs-computer mode
    HUMAN_MARK = Mark.X

    # "computer" or "human" (see GameMode)
    DEFAULT_MODE = "computer"

    # ==================== TIMING ====================
    # Pause before the computer's reply is shown, in seconds
    COMPUTER_DELAY_SECONDS = 0.8

    # ==================== LOGGING ====================
    LOG_LEVEL = logging.WARNING
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
