"""Events reported by the physics step.

The physics step never touches score, lives or lifecycle; it only reports
what happened during a tick and the state machine reacts.
"""

from dataclasses import dataclass
from typing import Literal, Union


@dataclass(frozen=True)
class WallBounce:
    """Ball bounced off a side wall or the ceiling."""
    wall: Literal['side', 'top']


@dataclass(frozen=True)
class PaddleHit:
    """Ball bounced off the paddle.

    Attributes:
        hit_pos: Offset from paddle centre, -1 (left edge) to 1 (right edge)
    """
    hit_pos: float


@dataclass(frozen=True)
class BrickDestroyed:
    """A brick was hit and hidden."""
    index: int
    row: int
    col: int
    points: int

    def __post_init__(self):
        """Validate points are non-negative."""
        if self.points < 0:
            raise ValueError(f'Points must be non-negative, got {self.points}')


@dataclass(frozen=True)
class BallLost:
    """Ball left the field through the bottom edge."""
    x: float


PhysicsEvent = Union[WallBounce, PaddleHit, BrickDestroyed, BallLost]
