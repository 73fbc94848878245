"""Shared fixtures for BrickBreaker tests."""
import random

import pytest

from brickbreaker.config import GameConfig
from brickbreaker.game.entities import Ball, Paddle, create_brick_grid
from brickbreaker.game_mode import BrickBreakerGame
from brickbreaker.game_state import GameState
from brickbreaker.logging import disable_logging
from brickbreaker.state_machine import GameStateMachine


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep test output free of game log lines."""
    disable_logging()
    yield


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def paddle(config):
    return Paddle(config.paddle, config.field.width, config.field.height)


@pytest.fixture
def ball(config):
    return Ball(config.ball, 400.0, 300.0)


@pytest.fixture
def bricks(config):
    return create_brick_grid(config.bricks, config.field.width)


@pytest.fixture
def state(paddle, ball, bricks):
    return GameState(paddle=paddle, ball=ball, bricks=bricks)


@pytest.fixture
def machine(state, config):
    machine = GameStateMachine(state, config, random.Random(7))
    machine.restore_defaults()
    return machine


@pytest.fixture
def game(config):
    return BrickBreakerGame(config=config, seed=1234)


@pytest.fixture
def ready_game(game):
    game.start()
    return game
