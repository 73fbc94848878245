"""Game lifecycle state machine.

Consumes control calls (start/launch/reset) and physics events and is the
only code that changes score, lives and lifecycle. Calls that don't make
sense in the current state are ignored and return False.
"""

import random
from typing import Iterable, Optional

from .config import GameConfig
from .game_state import GameState, Lifecycle
from .game.physics.events import BallLost, BrickDestroyed, PhysicsEvent
from .logging import get_logger

log = get_logger('state_machine')

READY_MESSAGE = 'Press SPACE to launch the ball!'


class GameStateMachine:
    """Drives a GameState through Idle, Ready, Launched, Won and Lost."""

    def __init__(
        self,
        state: GameState,
        config: GameConfig,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the state machine.

        Args:
            state: Game state to mutate (owned by the caller)
            config: Game configuration
            rng: Random source for launch angles; seeded for reproducibility
        """
        self._state = state
        self._config = config
        self._rng = rng or random.Random()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def lifecycle(self) -> Lifecycle:
        return self._state.lifecycle

    def _set_lifecycle(self, lifecycle: Lifecycle, message: str = "") -> None:
        if lifecycle != self._state.lifecycle:
            log.info("%s -> %s", self._state.lifecycle.value, lifecycle.value)
        self._state.lifecycle = lifecycle
        self._state.message = message

    def _seat_ball(self) -> None:
        """Stop the ball and park it above the paddle centre."""
        self._state.ball.rest_on(self._state.paddle.center_x, self._config.field.height)

    def restore_defaults(self) -> None:
        """Reset every mutable field without touching the lifecycle.

        The brick grid is reused; bricks are only made visible again.
        """
        state = self._state
        state.score = 0
        state.lives = self._config.lives
        state.paddle.reset()
        self._seat_ball()
        for brick in state.bricks:
            brick.show()

    def start(self) -> bool:
        """Start play from Idle, or start over after a win or loss.

        Returns:
            True if the game moved to Ready
        """
        lifecycle = self._state.lifecycle
        if lifecycle == Lifecycle.IDLE:
            self._set_lifecycle(Lifecycle.READY, READY_MESSAGE)
            return True
        if lifecycle.is_terminal:
            return self.reset()

        log.debug("Ignoring start() in state %s", lifecycle.value)
        return False

    def reset(self) -> bool:
        """Restore canonical state and re-arm in Ready. Valid from any state."""
        self.restore_defaults()
        self._set_lifecycle(Lifecycle.READY, READY_MESSAGE)
        log.info("Game reset")
        return True

    def launch(self, angle: Optional[float] = None) -> bool:
        """Launch the resting ball.

        Args:
            angle: Radians from straight up; drawn uniformly from
                +/- launch_angle_spread when None

        Returns:
            True if the ball was launched
        """
        if self._state.lifecycle != Lifecycle.READY:
            log.debug("Ignoring launch() in state %s", self._state.lifecycle.value)
            return False

        if angle is None:
            spread = self._config.ball.launch_angle_spread
            angle = self._rng.uniform(-spread, spread)

        self._state.ball.launch(angle)
        self._set_lifecycle(Lifecycle.LAUNCHED)
        log.debug("Launched at %.3f rad", angle)
        return True

    def apply_events(self, events: Iterable[PhysicsEvent]) -> None:
        """Update score, lives and lifecycle from one tick's events.

        Events are ignored unless the ball is launched, so nothing changes
        once a terminal state is reached.
        """
        for event in events:
            if self._state.lifecycle != Lifecycle.LAUNCHED:
                return
            if isinstance(event, BrickDestroyed):
                self._on_brick_destroyed(event)
            elif isinstance(event, BallLost):
                self._on_ball_lost()

    def _on_brick_destroyed(self, event: BrickDestroyed) -> None:
        self._state.score += event.points
        log.debug("Brick (%d, %d) destroyed, +%d", event.row, event.col, event.points)

        if self._state.all_bricks_destroyed:
            self._set_lifecycle(
                Lifecycle.WON,
                f'You Win! Final Score: {self._state.score}',
            )

    def _on_ball_lost(self) -> None:
        self._state.lives -= 1
        log.info("Ball lost, %d lives left", self._state.lives)

        if self._state.lives <= 0:
            self._state.ball.stop()
            self._set_lifecycle(
                Lifecycle.LOST,
                f'Game Over! Final Score: {self._state.score}',
            )
        else:
            self._seat_ball()
            self._set_lifecycle(Lifecycle.READY, READY_MESSAGE)
