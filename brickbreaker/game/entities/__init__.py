"""BrickBreaker game entities."""

from .paddle import Paddle
from .ball import Ball
from .brick import Brick, brick_points, create_brick_grid

__all__ = [
    'Paddle',
    'Ball',
    'Brick', 'brick_points', 'create_brick_grid',
]
