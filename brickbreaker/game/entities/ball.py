"""Ball entity with per-tick velocity integration.

The ball keeps a constant scalar speed; collisions change its direction
only. While not launched it rests above the paddle and follows it.
"""

import math
from typing import Tuple

from ...config import BallConfig


class Ball:
    """Ball with a centre position and a velocity in pixels per tick."""

    def __init__(
        self,
        config: BallConfig,
        x: float,
        y: float,
        dx: float = 0.0,
        dy: float = 0.0,
    ):
        """Initialize ball.

        Args:
            config: Ball configuration
            x: Center X position
            y: Center Y position
            dx: X velocity (pixels/tick)
            dy: Y velocity (pixels/tick)
        """
        self._config = config
        self._x = x
        self._y = y
        self._dx = dx
        self._dy = dy

    @property
    def x(self) -> float:
        """Get ball center X."""
        return self._x

    @property
    def y(self) -> float:
        """Get ball center Y."""
        return self._y

    @property
    def dx(self) -> float:
        """Get X velocity."""
        return self._dx

    @property
    def dy(self) -> float:
        """Get Y velocity."""
        return self._dy

    @property
    def radius(self) -> float:
        return self._config.radius

    @property
    def speed(self) -> float:
        """Get the configured scalar speed."""
        return self._config.speed

    @property
    def velocity_magnitude(self) -> float:
        """Get the magnitude of the current velocity vector."""
        return math.hypot(self._dx, self._dy)

    @property
    def is_moving(self) -> bool:
        return self._dx != 0.0 or self._dy != 0.0

    def set_position(self, x: float, y: float) -> None:
        """Place the ball centre at (x, y)."""
        self._x = x
        self._y = y

    def set_velocity(self, dx: float, dy: float) -> None:
        """Set the velocity vector."""
        self._dx = dx
        self._dy = dy

    def launch(self, angle: float) -> None:
        """Start moving at `angle` radians from straight up.

        Args:
            angle: Deviation from vertical; positive leans right
        """
        self._dx = math.sin(angle) * self._config.speed
        self._dy = -math.cos(angle) * self._config.speed

    def move(self) -> None:
        """Advance one tick along the current velocity."""
        self._x += self._dx
        self._y += self._dy

    def stop(self) -> None:
        self._dx = 0.0
        self._dy = 0.0

    def bounce_horizontal(self) -> None:
        """Bounce off a vertical surface (reverse X velocity)."""
        self._dx = -self._dx

    def bounce_vertical(self) -> None:
        """Bounce off a horizontal surface (reverse Y velocity)."""
        self._dy = -self._dy

    def rest_on(self, center_x: float, field_height: float) -> None:
        """Park the ball at its resting height above the given x, stopped."""
        self._x = center_x
        self._y = field_height - self._config.rest_offset
        self.stop()

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get ball bounding box (left, top, right, bottom)."""
        r = self._config.radius
        return (self._x - r, self._y - r, self._x + r, self._y + r)
