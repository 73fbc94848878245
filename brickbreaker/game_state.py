"""Lifecycle enum and the mutable game state owned by the driver.

States:
    IDLE: Before the first start; nothing moves
    READY: Started, ball rests on the paddle and follows it
    LAUNCHED: Ball moving under physics
    WON: Every brick destroyed (terminal)
    LOST: No lives left (terminal)

Only the state machine writes score, lives, lifecycle and message. The
physics step reads and moves the entities it is handed.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .game.entities import Ball, Brick, Paddle


class Lifecycle(Enum):
    """Game lifecycle states."""

    IDLE = "idle"
    READY = "ready"
    LAUNCHED = "launched"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self in (Lifecycle.WON, Lifecycle.LOST)

    @property
    def is_active(self) -> bool:
        """True while the paddle responds to input."""
        return self in (Lifecycle.READY, Lifecycle.LAUNCHED)


@dataclass
class GameState:
    """Everything that changes during play."""

    paddle: Paddle
    ball: Ball
    bricks: List[Brick] = field(default_factory=list)
    lifecycle: Lifecycle = Lifecycle.IDLE
    score: int = 0
    lives: int = 3
    message: str = ""

    @property
    def bricks_remaining(self) -> int:
        return sum(1 for brick in self.bricks if brick.visible)

    @property
    def all_bricks_destroyed(self) -> bool:
        return not any(brick.visible for brick in self.bricks)
