"""BrickBreaker physics and collision detection."""

from .collision import (
    ImpactSide,
    circle_rect_overlap,
    classify_impact_side,
    reflect_velocity,
    paddle_overlap,
    paddle_hit_position,
    paddle_bounce_velocity,
)
from .events import WallBounce, PaddleHit, BrickDestroyed, BallLost, PhysicsEvent
from .step import step_physics

__all__ = [
    'ImpactSide',
    'circle_rect_overlap',
    'classify_impact_side',
    'reflect_velocity',
    'paddle_overlap',
    'paddle_hit_position',
    'paddle_bounce_velocity',
    'WallBounce',
    'PaddleHit',
    'BrickDestroyed',
    'BallLost',
    'PhysicsEvent',
    'step_physics',
]
