"""Paddle entity driven by held left/right keys.

The paddle moves a fixed number of pixels per tick and never leaves the
field: x is clamped to [0, field_width - width] after every move.
"""

from typing import Tuple

from ...config import PaddleConfig


class Paddle:
    """Horizontal paddle at a fixed height near the bottom of the field."""

    def __init__(
        self,
        config: PaddleConfig,
        field_width: float,
        field_height: float,
    ):
        """Initialize paddle centred horizontally.

        Args:
            config: Paddle configuration
            field_width: Field width in pixels
            field_height: Field height in pixels
        """
        self._config = config
        self._field_width = field_width
        self._y = field_height - config.bottom_offset
        self._x = 0.0
        self.reset()

    @property
    def x(self) -> float:
        """Get paddle left edge X."""
        return self._x

    @property
    def y(self) -> float:
        """Get paddle top edge Y."""
        return self._y

    @property
    def width(self) -> float:
        return self._config.width

    @property
    def height(self) -> float:
        return self._config.height

    @property
    def speed(self) -> float:
        """Get paddle speed in pixels per tick."""
        return self._config.speed

    @property
    def center_x(self) -> float:
        """Get paddle center X."""
        return self._x + self._config.width / 2

    @property
    def max_x(self) -> float:
        """Largest allowed left edge."""
        return self._field_width - self._config.width

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get paddle bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._config.width, self._config.height)

    def set_x(self, x: float) -> None:
        """Move the left edge to x, clamped into the field."""
        self._x = max(0.0, min(self.max_x, x))

    def move_left(self) -> None:
        """Move one step to the left."""
        self.set_x(self._x - self._config.speed)

    def move_right(self) -> None:
        """Move one step to the right."""
        self.set_x(self._x + self._config.speed)

    def reset(self) -> None:
        """Centre the paddle horizontally."""
        self.set_x((self._field_width - self._config.width) / 2)
