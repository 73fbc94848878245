"""BrickBreaker - simulation driver.

Features:
- One fixed step per tick(), called by any host loop (pygame clock,
  timer, test harness)
- Keyboard-style input sampled once per tick as an immutable snapshot
- Lifecycle control surface: start(), reset(), launch()
"""

import random
from typing import List, Optional

from .config import GameConfig
from .game.entities import Ball, Brick, Paddle, create_brick_grid
from .game.physics import PhysicsEvent, step_physics
from .game_state import GameState, Lifecycle
from .input import InputManager, InputSnapshot
from .logging import get_logger
from .snapshot import GameSnapshot, take_snapshot
from .state_machine import GameStateMachine

log = get_logger('game_mode')


class BrickBreakerGame:
    """Brick Breaker game.

    Owns the GameState and advances it one step per tick(). Rendering is
    left to the host, which reads snapshot() after each tick.
    """

    NAME = "Brick Breaker"
    DESCRIPTION = "Break every brick without dropping the ball."
    VERSION = "1.0.0"

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        input_manager: Optional[InputManager] = None,
    ):
        """Initialize BrickBreaker game.

        All entities are built once here and reused for every reset.

        Args:
            config: Game configuration (defaults if None)
            seed: Seed for launch angles, for reproducible games
            input_manager: Input used when tick() is called without actions
        """
        self._config = config or GameConfig()
        self._input = input_manager or InputManager()

        field = self._config.field
        paddle = Paddle(self._config.paddle, field.width, field.height)
        ball = Ball(self._config.ball, paddle.center_x, field.height - self._config.ball.rest_offset)
        bricks = create_brick_grid(self._config.bricks, field.width)

        self._state = GameState(paddle=paddle, ball=ball, bricks=bricks)
        self._machine = GameStateMachine(self._state, self._config, random.Random(seed))
        self._machine.restore_defaults()
        self._ticks = 0

        log.info(
            "Created %dx%d field with %d bricks, %d lives",
            field.width, field.height, len(bricks), self._config.lives,
        )

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def lifecycle(self) -> Lifecycle:
        return self._state.lifecycle

    @property
    def paddle(self) -> Paddle:
        return self._state.paddle

    @property
    def ball(self) -> Ball:
        return self._state.ball

    @property
    def bricks(self) -> List[Brick]:
        return self._state.bricks

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def lives(self) -> int:
        return self._state.lives

    @property
    def message(self) -> str:
        return self._state.message

    @property
    def ticks(self) -> int:
        """Number of tick() calls so far."""
        return self._ticks

    @property
    def input_manager(self) -> InputManager:
        return self._input

    def start(self) -> bool:
        """Start the game (Idle, Won or Lost -> Ready)."""
        return self._machine.start()

    def reset(self) -> bool:
        """Reset score, lives, bricks and entities, and re-arm in Ready."""
        return self._machine.reset()

    def launch(self, angle: Optional[float] = None) -> bool:
        """Launch the ball (Ready -> Launched)."""
        return self._machine.launch(angle)

    def tick(self, actions: Optional[InputSnapshot] = None) -> List[PhysicsEvent]:
        """Advance the game one step.

        Args:
            actions: Held actions for this tick; sampled from the input
                manager when None

        Returns:
            Physics events produced this tick (empty unless launched)
        """
        self._ticks += 1
        if actions is None:
            actions = self._input.sample()

        if not self._state.lifecycle.is_active:
            return []

        self._apply_paddle_input(actions)

        if self._state.lifecycle == Lifecycle.READY:
            self._follow_paddle()
            if actions.launch:
                self._machine.launch()
            return []

        events = step_physics(
            self._state.ball,
            self._state.paddle,
            self._state.bricks,
            self._config.field.width,
            self._config.field.height,
            self._config.ball.max_bounce_angle,
        )
        self._machine.apply_events(events)
        return events

    def _apply_paddle_input(self, actions: InputSnapshot) -> None:
        """Move the paddle; left is applied before right."""
        if actions.left:
            self._state.paddle.move_left()
        if actions.right:
            self._state.paddle.move_right()

    def _follow_paddle(self) -> None:
        """Keep the resting ball centred over the paddle."""
        ball = self._state.ball
        ball.set_position(self._state.paddle.center_x, ball.y)

    def snapshot(self) -> GameSnapshot:
        """Read-only view of the current state for rendering."""
        return take_snapshot(
            self._state,
            self._config.field.width,
            self._config.field.height,
        )
