"""Collision detection helpers for BrickBreaker.

Pure functions over anything with x/y/width/height (bricks, the paddle)
and the ball. The circle-rectangle test is a bounding-box approximation:
a ball near a corner can register a hit a few pixels early.
"""

import math
from enum import Enum
from typing import Protocol, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle


class Rect(Protocol):
    """Axis-aligned rectangle, (x, y) is the top-left corner."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...


class ImpactSide(Enum):
    """Which pair of faces the ball struck."""

    HORIZONTAL = "horizontal"  # Left/right face, reflect dx
    VERTICAL = "vertical"      # Top/bottom face, reflect dy


def circle_rect_overlap(ball: 'Ball', rect: Rect) -> bool:
    """Check if the ball's bounding box touches the rectangle.

    Touching edges count as overlap.
    """
    left, top, right, bottom = ball.get_bounds()
    return (
        right >= rect.x and
        left <= rect.x + rect.width and
        bottom >= rect.y and
        top <= rect.y + rect.height
    )


def classify_impact_side(ball: 'Ball', rect: Rect) -> ImpactSide:
    """Determine which side of the rectangle the ball hit.

    Compares the offset from rectangle centre to ball centre, each axis
    scaled by the other axis' extent, so a wide brick needs a larger
    horizontal offset before it counts as a side hit.

    Returns:
        VERTICAL when |width * dy| > |height * dx|, HORIZONTAL otherwise
        (including exact ties)
    """
    dx = ball.x - (rect.x + rect.width / 2)
    dy = ball.y - (rect.y + rect.height / 2)

    if abs(rect.width * dy) > abs(rect.height * dx):
        return ImpactSide.VERTICAL
    return ImpactSide.HORIZONTAL


def reflect_velocity(dx: float, dy: float, side: ImpactSide) -> Tuple[float, float]:
    """Reflect a velocity off the given side."""
    if side is ImpactSide.VERTICAL:
        return dx, -dy
    return -dx, dy


def paddle_overlap(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if the ball is touching the paddle.

    The ball's vertical span must overlap the paddle band and its centre
    must lie within the paddle's horizontal span. Direction of travel is
    not considered.
    """
    x, y, width, height = paddle.rect
    return (
        ball.y + ball.radius >= y and
        ball.y - ball.radius <= y + height and
        x <= ball.x <= x + width
    )


def paddle_hit_position(ball: 'Ball', paddle: 'Paddle') -> float:
    """Offset of the ball from paddle centre, -1 (left edge) to 1 (right edge)."""
    half_width = paddle.width / 2
    return (ball.x - paddle.center_x) / half_width


def paddle_bounce_velocity(
    hit_pos: float,
    speed: float,
    max_angle: float = math.pi / 3,
) -> Tuple[float, float]:
    """Velocity after a paddle hit.

    Hitting the centre bounces straight up, the edges bounce at
    +/- max_angle from vertical. The result always points upward.

    Args:
        hit_pos: Offset from paddle centre in [-1, 1]
        speed: Scalar ball speed
        max_angle: Deflection at the paddle edges, radians

    Returns:
        (dx, dy) with dy <= 0
    """
    angle = hit_pos * max_angle
    return math.sin(angle) * speed, -abs(math.cos(angle) * speed)
