import random
from collections import deque

import pytest

from quadkit.snake import DOWN, LEFT, RIGHT, UP, SnakeGame


def make_game():
    game = SnakeGame(rng=random.Random(3))
    game.fruit = (10, 10)
    return game


def test_initial_state():
    game = make_game()
    assert game.head == (0, 0)
    assert game.direction == RIGHT
    assert game.score == 0
    assert not game.game_over


def test_no_move_before_speed_elapsed():
    game = make_game()
    assert game.tick(0.1) is False
    assert game.head == (0, 0)


def test_moves_after_speed_elapsed():
    game = make_game()
    assert game.tick(0.31) is True
    assert game.head == RIGHT
    assert len(game.body) == 0


def test_reverse_turn_rejected():
    game = make_game()
    assert game.turn(LEFT) is False
    assert game.direction == RIGHT


def test_second_turn_locked_until_tick():
    game = make_game()
    assert game.turn(DOWN) is True
    assert game.turn(RIGHT) is False
    game.tick(0.31)
    assert game.turn(RIGHT) is True


def test_leaving_board_ends_game():
    game = make_game()
    game.turn(UP)
    game.tick(0.31)
    assert game.game_over
    assert game.tick(1.0) is False


def test_eating_fruit_grows_and_speeds_up():
    game = make_game()
    game.fruit = RIGHT
    game.tick(0.31)
    assert game.score == 100
    assert len(game.body) == 1
    assert game.speed < 0.3
    assert 0 <= game.fruit[0] < game.squares and 0 <= game.fruit[1] < game.squares


def test_self_collision_ends_game():
    game = make_game()
    game.head = (2, 2)
    game.direction = DOWN
    game.body = deque([(3, 2), (3, 3), (2, 3), (1, 3)])
    game.tick(0.31)
    assert game.head == (2, 3)
    assert game.game_over


def test_restart_resets_state():
    game = make_game()
    game.turn(UP)
    game.tick(0.31)
    game.restart()
    assert not game.game_over
    assert game.head == (0, 0)
    assert game.score == 0
    assert game.last_update == pytest.approx(0.31)


def test_invalid_board_rejected():
    with pytest.raises(ValueError):
        SnakeGame(squares=0)