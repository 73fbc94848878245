"""Tests for the BrickBreakerGame simulation driver."""

import pytest
from pydantic import ValidationError

from brickbreaker.game.physics import BallLost, BrickDestroyed
from brickbreaker.game_mode import BrickBreakerGame
from brickbreaker.game_state import Lifecycle
from brickbreaker.input import InputManager, InputSnapshot, NO_INPUT
from brickbreaker.input.sources.base import InputSource

LEFT = InputSnapshot(left=True)
RIGHT = InputSnapshot(right=True)
BOTH = InputSnapshot(left=True, right=True)
LAUNCH = InputSnapshot(launch=True)


class FixedInputSource(InputSource):
    """Input source that always reports the same snapshot."""

    def __init__(self, snapshot):
        self._snapshot = snapshot

    def snapshot(self):
        return self._snapshot


def drop_ball(game):
    """Launch and send the ball out through the bottom in one tick."""
    game.launch(0.0)
    game.ball.set_position(20.0, 595.0)
    game.ball.set_velocity(0.0, 6.0)
    return game.tick(NO_INPUT)


def clear_column_below_top_brick(game):
    for row in range(1, game.config.bricks.rows):
        game.bricks[row * game.config.bricks.cols].hide()


class TestIdle:
    """Before start() nothing moves."""

    def test_initial_state(self, game):
        assert game.lifecycle == Lifecycle.IDLE
        assert game.score == 0
        assert game.lives == 3
        assert len(game.bricks) == 60

    def test_tick_is_noop(self, game):
        events = game.tick(LEFT)
        assert events == []
        assert game.paddle.x == 340.0

    def test_launch_input_ignored(self, game):
        game.tick(LAUNCH)
        assert game.lifecycle == Lifecycle.IDLE

    def test_control_surface_rejects_launch(self, game):
        assert game.launch() is False


class TestReady:
    """Paddle control and ball following before launch."""

    def test_paddle_moves_and_ball_follows(self, ready_game):
        ready_game.tick(LEFT)
        assert ready_game.paddle.x == 332.0
        assert ready_game.ball.x == ready_game.paddle.center_x
        assert ready_game.ball.y == 550.0

    def test_paddle_clamped(self, ready_game):
        for _ in range(200):
            ready_game.tick(RIGHT)
        assert ready_game.paddle.x == 680.0
        assert ready_game.ball.x == 740.0

    def test_opposite_directions_left_first(self, ready_game):
        ready_game.tick(BOTH)
        assert ready_game.paddle.x == 340.0

        ready_game.paddle.set_x(0.0)
        ready_game.tick(BOTH)
        assert ready_game.paddle.x == 8.0

    def test_launch_from_input(self, ready_game):
        events = ready_game.tick(LAUNCH)

        assert events == []
        assert ready_game.lifecycle == Lifecycle.LAUNCHED
        assert ready_game.ball.dy < 0
        assert ready_game.ball.y == 550.0

    def test_uses_input_manager_when_no_actions(self, config):
        source = FixedInputSource(RIGHT)
        game = BrickBreakerGame(config=config, input_manager=InputManager(source))
        game.start()

        game.tick()

        assert game.paddle.x == 348.0
        assert game.ticks == 1


class TestLaunched:
    """Physics ticks and event handling."""

    def test_ball_moves_each_tick(self, ready_game):
        ready_game.launch(0.0)
        ready_game.tick(NO_INPUT)
        assert (ready_game.ball.x, ready_game.ball.y) == (400.0, 544.0)

    def test_paddle_still_controllable(self, ready_game):
        ready_game.launch(0.0)
        ready_game.tick(LEFT)
        assert ready_game.paddle.x == 332.0
        assert ready_game.ball.x == 400.0

    def test_launch_during_flight_ignored(self, ready_game):
        ready_game.launch(0.0)
        ready_game.tick(LAUNCH)
        assert (ready_game.ball.dx, ready_game.ball.dy) == (0.0, -6.0)

    def test_top_brick_scenario(self, ready_game):
        """Straight-up launch under the top-left brick destroys it for 60 points."""
        clear_column_below_top_brick(ready_game)
        ready_game.launch(0.0)
        ready_game.ball.set_position(40.0, ready_game.ball.y)

        events = []
        for _ in range(200):
            events = ready_game.tick(NO_INPUT)
            if not ready_game.bricks[0].visible:
                break

        assert events == [BrickDestroyed(0, 0, 0, 60)]
        assert ready_game.score == 60
        assert ready_game.ball.dy > 0
        assert ready_game.lifecycle == Lifecycle.LAUNCHED

    def test_win_on_last_brick(self, ready_game):
        for brick in ready_game.bricks[1:]:
            brick.hide()
        ready_game.launch(0.0)
        ready_game.ball.set_position(40.0, ready_game.ball.y)

        for _ in range(200):
            ready_game.tick(NO_INPUT)
            if ready_game.lifecycle != Lifecycle.LAUNCHED:
                break

        assert ready_game.lifecycle == Lifecycle.WON
        assert ready_game.message == "You Win! Final Score: 60"

    def test_ball_lost_rearms(self, ready_game):
        events = drop_ball(ready_game)

        assert events == [BallLost(20.0)]
        assert ready_game.lives == 2
        assert ready_game.lifecycle == Lifecycle.READY
        assert (ready_game.ball.x, ready_game.ball.y) == (400.0, 550.0)

    def test_lives_exhaustion_freezes_game(self, ready_game):
        for _ in range(3):
            drop_ball(ready_game)

        assert ready_game.lives == 0
        assert ready_game.lifecycle == Lifecycle.LOST

        paddle_x = ready_game.paddle.x
        for _ in range(10):
            assert ready_game.tick(LEFT) == []
        assert ready_game.paddle.x == paddle_x
        assert ready_game.lives == 0
        assert ready_game.score == 0


def fresh(game):
    pass


def moved(game):
    game.start()
    for _ in range(15):
        game.tick(LEFT)


def in_flight(game):
    game.start()
    game.tick(LAUNCH)
    for _ in range(120):
        game.tick(RIGHT)


def lost(game):
    game.start()
    for _ in range(3):
        drop_ball(game)


def won(game):
    game.start()
    for brick in game.bricks[1:]:
        brick.hide()
    game.launch(0.0)
    game.ball.set_position(40.0, game.ball.y)
    for _ in range(200):
        game.tick(NO_INPUT)


class TestReset:
    """reset() yields the same canonical state from anywhere."""

    @pytest.mark.parametrize("setup", [fresh, moved, in_flight, lost, won])
    def test_reset_is_canonical(self, config, setup):
        reference = BrickBreakerGame(config=config, seed=0)
        reference.reset()

        game = BrickBreakerGame(config=config, seed=0)
        setup(game)
        game.reset()

        assert game.snapshot() == reference.snapshot()
        snap = game.snapshot()
        assert snap.lifecycle == Lifecycle.READY
        assert snap.score == 0
        assert snap.lives == 3
        assert all(b.visible for b in snap.bricks)
        assert (snap.ball.x, snap.ball.y) == (snap.paddle.x + snap.paddle.width / 2, 550.0)
        assert (snap.ball.dx, snap.ball.dy) == (0.0, 0.0)

    def test_reset_twice_is_idempotent(self, ready_game):
        ready_game.reset()
        first = ready_game.snapshot()
        ready_game.reset()
        assert ready_game.snapshot() == first

    def test_start_from_won_restarts(self, game):
        won(game)
        assert game.lifecycle == Lifecycle.WON

        assert game.start() is True
        assert game.lifecycle == Lifecycle.READY
        assert game.score == 0


class TestSnapshot:
    """Read-only views for the renderer."""

    def test_snapshot_contents(self, ready_game):
        snap = ready_game.snapshot()

        assert snap.lifecycle == Lifecycle.READY
        assert snap.field_width == 800
        assert snap.paddle.rect == (340.0, 570.0, 120.0, 15.0)
        assert snap.ball.radius == 8.0
        assert len(snap.bricks) == 60
        assert snap.bricks[0].color == ready_game.config.bricks.colors[0]
        assert snap.bricks[0].rect == ready_game.bricks[0].rect == (2.5, 60.0, 75.0, 20.0)
        assert (snap.bricks[-1].row, snap.bricks[-1].col) == (5, 9)
        assert not snap.ball_launched

    def test_snapshot_is_frozen(self, game):
        snap = game.snapshot()
        with pytest.raises(ValidationError):
            snap.score = 100

    def test_snapshot_detached_from_game(self, ready_game):
        ready_game.launch(0.0)
        snap = ready_game.snapshot()

        ready_game.tick(NO_INPUT)
        ready_game.bricks[0].hide()

        assert snap.ball.y == 550.0
        assert snap.bricks[0].visible
        assert len(snap.visible_bricks) == 60
