"""
Solver configuration for TicTacToe.
Fixed board geometry and scoring constants.
"""


class SolverConfig:
    """
    Configuration class for the solver.
    These are rules of the game, not tuning knobs.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, row-major

    # ==================== SCORING ====================
    # A win found at depth d scores WIN_SCORE - d (a loss d - WIN_SCORE),
    # so faster wins and slower losses are preferred
    WIN_SCORE = 10
    DRAW_SCORE = 0
