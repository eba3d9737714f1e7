"""
Tests for the game controller and move validator.
"""

import logging

import pytest

from solver import Mark, Outcome, best_move, parse_board
from controller import GameController, GameMode, MoveValidator, GameConfig

X, O, _ = Mark.X, Mark.O, Mark.EMPTY


@pytest.fixture
def game():
    return GameController()


# ==================== MOVE VALIDATOR ====================

def test_validator_accepts_empty_cell():
    result = MoveValidator().validate_move([_] * 9, 4)
    assert result.is_valid
    assert result.error_message is None


@pytest.mark.parametrize("index", [-1, 9, 100, "4", 4.0, None, True])
def test_validator_rejects_index_off_the_board(index):
    result = MoveValidator().validate_move([_] * 9, index)
    assert not result.is_valid
    assert "Invalid cell" in result.error_message


def test_validator_rejects_taken_cell():
    result = MoveValidator().validate_move(parse_board("....X...."), 4)
    assert not result.is_valid
    assert "already taken by X" in result.error_message


def test_validator_rejects_move_after_game_over():
    result = MoveValidator().validate_move(parse_board("XXX OO. ..."), 8)
    assert not result.is_valid
    assert result.error_message == "Game is already over!"


def test_get_valid_moves():
    validator = MoveValidator()
    assert validator.get_valid_moves(parse_board("X.O .X. O..")) == [1, 3, 5, 7, 8]
    assert validator.get_valid_moves(parse_board("XXX OO. ...")) == []


# ==================== CONTROLLER ====================

def test_new_game_defaults(game):
    assert game.mode == GameMode.VS_COMPUTER
    assert game.board == [_] * 9
    assert game.current_player == X
    assert game.human_mark == X
    assert game.computer_mark == O
    assert game.outcome == Outcome.ONGOING
    assert not game.is_computer_turn
    assert game.status_message() == "Next: X"


def test_human_move_then_computer_turn(game):
    result = game.play(4)

    assert result.is_valid
    assert game.board[4] == X
    assert game.current_player == O
    assert game.is_computer_turn
    assert game.status_message() == "Next: O"
    assert len(game.moves) == 1
    assert game.moves[0].player == X
    assert game.moves[0].index == 4
    assert game.moves[0].move_number == 0


def test_human_cannot_move_for_the_computer(game):
    game.play(4)
    result = game.play(0)

    assert not result.is_valid
    assert result.error_message == "Wait for the computer to move!"
    assert game.board[0] == _


def test_rejected_move_leaves_board_unchanged(game):
    game.play(4)
    game.computer_move()
    before = list(game.board)

    result = game.play(4)

    assert not result.is_valid
    assert game.board == before
    assert game.current_player == X


def test_computer_move_applies_best_move(game):
    game.play(4)
    index = game.computer_move()

    # Against a center opening the first corner is chosen
    assert index == 0
    assert game.board[0] == O
    assert game.current_player == X
    assert [m.player for m in game.moves] == [X, O]


def test_computer_move_out_of_turn_returns_none(game, caplog):
    with caplog.at_level(logging.WARNING, logger="controller.game_controller"):
        assert game.computer_move() is None
    assert game.board == [_] * 9
    assert "not the computer's turn" in caplog.text


def test_computer_takes_the_win():
    game = GameController()
    game.board = [O, O, _, X, X, _, X, _, _]
    game.current_player = O

    assert game.computer_move() == 2
    assert game.outcome == Outcome.PLAYER_TWO_WINS
    assert game.is_game_over
    assert not game.is_computer_turn
    assert game.status_message() == "Winner: O"
    assert game.computer_move() is None


def test_computer_plays_x_when_human_plays_o():
    game = GameController(human_mark=O)

    assert game.computer_mark == X
    assert game.is_computer_turn
    assert not game.play(4).is_valid

    index = game.computer_move()
    assert game.board[index] == X
    assert game.current_player == O


def test_vs_human_mode_alternates_marks():
    game = GameController(mode=GameMode.VS_HUMAN)

    for index in (0, 3, 1, 4):
        assert game.play(index).is_valid
        assert not game.is_computer_turn

    assert game.board[:6] == [X, X, _, O, O, _]
    assert game.play(2).is_valid
    assert game.outcome == Outcome.PLAYER_ONE_WINS
    assert game.status_message() == "Winner: X"

    result = game.play(5)
    assert not result.is_valid
    assert result.error_message == "Game is already over!"


def test_draw_status():
    game = GameController(mode=GameMode.VS_HUMAN)
    for index in (0, 1, 2, 4, 3, 5, 7, 6, 8):
        assert game.play(index).is_valid

    assert game.outcome == Outcome.DRAW
    assert game.status_message() == "It's a draw!"


def test_restart(game):
    game.play(4)
    game.computer_move()

    game.restart()

    assert game.board == [_] * 9
    assert game.current_player == GameConfig.FIRST_PLAYER
    assert game.moves == []
    assert game.mode == GameMode.VS_COMPUTER


def test_switch_mode_restarts(game):
    game.play(4)

    game.switch_mode()
    assert game.mode == GameMode.VS_HUMAN
    assert game.board == [_] * 9
    assert game.current_player == X

    game.switch_mode()
    assert game.mode == GameMode.VS_COMPUTER


def test_controllers_do_not_share_boards():
    first = GameController()
    second = GameController()
    first.play(0)
    assert second.board == [_] * 9


def test_full_game_against_itself_is_a_draw():
    game = GameController()
    while not game.is_game_over:
        if game.is_computer_turn:
            game.computer_move()
        else:
            # Let the solver pick the human's move too
            assert game.play(best_move(list(game.board), game.current_player)).is_valid

    assert game.outcome == Outcome.DRAW


@pytest.mark.parametrize("mark", [_, 3, None])
def test_human_mark_must_be_x_or_o(mark):
    with pytest.raises(ValueError):
        GameController(human_mark=mark)


def test_computer_defaults_to_the_other_mark():
    assert GameController().computer_mark == GameConfig.HUMAN_MARK.opposite()
    assert not hasattr(GameConfig, "COMPUTER_MARK")
