"""
Console entry point for TicTacToe.

Play against the computer (or another human) in the terminal.
The board uses cell indices 0-8:

     0 | 1 | 2
     3 | 4 | 5
     6 | 7 | 8
"""

import logging
import time

from solver.board import Mark, format_board
from controller.config import GameConfig
from controller.game_controller import GameController, GameMode


class ConsoleGame:
    """
    Plays TicTacToe in the terminal.

    Game flow:
    1. The console shows the board and asks for a cell
    2. The controller applies the move
    3. In vs-computer mode, the computer replies after a short delay
    4. Repeat until someone wins or it's a draw, then offer a new game
    """

    def __init__(self, controller: GameController, delay: float = GameConfig.COMPUTER_DELAY_SECONDS):
        """
        Initialize the console game.

        Args:
            controller: The game controller to drive.
            delay: Seconds to wait before showing the computer's move.
        """
        self.controller = controller
        self.delay = delay
        self.is_running = False

    def start(self):
        """Start the game."""
        print("\n" + "="*60)
        print("   TicTacToe")
        print(f"   Mode: {self._mode_text()}")
        print("="*60)
        print("Enter a cell (0-8), 'r' to restart, 'm' to switch mode, 'q' to quit\n")

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            if self.controller.is_computer_turn:
                self._computer_move()
                continue

            self._show_board()

            if self.controller.is_game_over:
                self._show_game_result()
                answer = input("Play again? [y/n]: ").strip().lower()
                if answer.startswith("y"):
                    self.controller.restart()
                else:
                    self.is_running = False
                continue

            self._handle_input(input(f"{self.controller.current_player.symbol} > ").strip().lower())

    def _handle_input(self, command: str):
        """
        Handle one line of user input.

        Args:
            command: A cell index or one of q/r/m.
        """
        if command == "q":
            print("\nGame quit by user.")
            self.is_running = False
        elif command == "r":
            self.controller.restart()
            print("\nGame reset!")
        elif command == "m":
            self.controller.switch_mode()
            print(f"\nSwitched to {self._mode_text()}. New game!")
        elif command.isdecimal():
            result = self.controller.play(int(command))
            if not result.is_valid:
                print(f"WARNING: {result.error_message}")
        else:
            print("Please type a cell number 0-8 (or q/r/m).")

    def _computer_move(self):
        """Let the computer move after the configured delay."""
        print("\n>>> Computer is thinking...")
        time.sleep(self.delay)

        index = self.controller.computer_move()
        if index is not None:
            print(f">>> Computer plays {self.controller.computer_mark.symbol} at cell {index}")

    def _show_board(self):
        print()
        print(format_board(self.controller.board, show_indices=True))
        print(self.controller.status_message())

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        winner = self.controller.outcome.winner
        if winner is None:
            print("\nIt's a draw! Good game!")
        elif self.controller.mode == GameMode.VS_HUMAN:
            print(f"\n{winner.symbol} wins!")
        elif winner == self.controller.human_mark:
            print("\nCongratulations! You won!")
        else:
            print("\nComputer wins! Better luck next time!")

        print("\n" + "="*60)

    def _mode_text(self) -> str:
        if self.controller.mode == GameMode.VS_HUMAN:
            return "vs Human"
        return f"vs Computer (you play {self.controller.human_mark.symbol})"


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GameMode],
        default=GameConfig.DEFAULT_MODE,
        help="Opponent type"
    )
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer play first (as X)"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=GameConfig.COMPUTER_DELAY_SECONDS,
        help="Seconds to wait before the computer's move"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else GameConfig.LOG_LEVEL,
        format=GameConfig.LOG_FORMAT
    )

    # Determine players
    if args.computer_first:
        human_mark = Mark.O
    else:
        human_mark = GameConfig.HUMAN_MARK

    controller = GameController(mode=GameMode(args.mode), human_mark=human_mark)
    game = ConsoleGame(controller, delay=args.delay)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
