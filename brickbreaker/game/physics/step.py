"""Per-tick ball physics.

Resolution order within a tick is fixed: integrate, side walls, ceiling,
bottom exit, paddle, then at most one brick.
"""

from typing import List, Sequence, TYPE_CHECKING

from ...logging import get_logger
from .collision import (
    circle_rect_overlap,
    classify_impact_side,
    paddle_bounce_velocity,
    paddle_hit_position,
    paddle_overlap,
    reflect_velocity,
)
from .events import BallLost, BrickDestroyed, PaddleHit, PhysicsEvent, WallBounce

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.brick import Brick
    from ..entities.paddle import Paddle

log = get_logger('physics')


def check_wall_collision(
    ball: 'Ball',
    field_width: float,
    field_height: float,
) -> List[PhysicsEvent]:
    """Bounce the ball off the side walls and ceiling.

    Returns:
        WallBounce events, or a single BallLost if the ball dropped
        below the field
    """
    events: List[PhysicsEvent] = []
    r = ball.radius

    if ball.x <= r or ball.x >= field_width - r:
        ball.bounce_horizontal()
        ball.set_position(max(r, min(field_width - r, ball.x)), ball.y)
        events.append(WallBounce('side'))

    if ball.y <= r:
        ball.bounce_vertical()
        ball.set_position(ball.x, r)
        events.append(WallBounce('top'))

    if ball.y > field_height:
        return [BallLost(ball.x)]

    return events


def check_paddle_collision(
    ball: 'Ball',
    paddle: 'Paddle',
    max_angle: float,
) -> List[PhysicsEvent]:
    """Deflect the ball off the paddle, angle depending on where it hit."""
    if not paddle_overlap(ball, paddle):
        return []

    hit_pos = paddle_hit_position(ball, paddle)
    ball.set_velocity(*paddle_bounce_velocity(hit_pos, ball.speed, max_angle))
    # Sit on top of the paddle so the next tick doesn't hit it again
    ball.set_position(ball.x, paddle.y - ball.radius)
    return [PaddleHit(hit_pos)]


def check_brick_collision(
    ball: 'Ball',
    bricks: Sequence['Brick'],
) -> List[PhysicsEvent]:
    """Destroy the first visible brick in grid order that the ball touches.

    Only one brick is resolved per tick, even if several overlap.
    """
    for index, brick in enumerate(bricks):
        if not brick.visible:
            continue
        if not circle_rect_overlap(ball, brick):
            continue

        brick.hide()
        side = classify_impact_side(ball, brick)
        ball.set_velocity(*reflect_velocity(ball.dx, ball.dy, side))
        return [BrickDestroyed(index, brick.row, brick.col, brick.points)]

    return []


def step_physics(
    ball: 'Ball',
    paddle: 'Paddle',
    bricks: Sequence['Brick'],
    field_width: float,
    field_height: float,
    max_bounce_angle: float,
) -> List[PhysicsEvent]:
    """Advance the ball one tick and resolve collisions.

    Mutates the ball and brick visibility. Score, lives and lifecycle are
    left to whoever consumes the returned events.

    Args:
        ball: Launched ball
        paddle: Player paddle
        bricks: Brick grid in scan order
        field_width: Field width in pixels
        field_height: Field height in pixels
        max_bounce_angle: Paddle edge deflection, radians

    Returns:
        Events in the order they occurred. A BallLost event ends the tick.
    """
    ball.move()

    events = check_wall_collision(ball, field_width, field_height)
    if any(isinstance(e, BallLost) for e in events):
        log.debug("Ball lost at x=%.1f", ball.x)
        return events

    events.extend(check_paddle_collision(ball, paddle, max_bounce_angle))
    events.extend(check_brick_collision(ball, bricks))

    if events:
        log.trace("Tick events: %s", events)
    return events
