"""Brick entity and grid factory.

Bricks are never removed from the grid. A destroyed brick is hidden, so
grid indices stay stable for scan order and for the win check.
"""

from typing import List, Tuple

from ...config import BrickGridConfig


class Brick:
    """A single brick in the grid."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        points: int,
        grid_position: Tuple[int, int] = (0, 0),
        color: str = '#ffffff',
    ):
        """Initialize brick.

        Args:
            x: Left edge X position
            y: Top edge Y position
            width: Brick width
            height: Brick height
            points: Points awarded when destroyed
            grid_position: (row, col) position in grid
            color: Colour class used by the renderer
        """
        self._x = x
        self._y = y
        self._width = width
        self._height = height
        self._points = points
        self._grid_position = grid_position
        self._color = color
        self._visible = True

    @property
    def x(self) -> float:
        """Get left edge X position."""
        return self._x

    @property
    def y(self) -> float:
        """Get top edge Y position."""
        return self._y

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def center_x(self) -> float:
        return self._x + self._width / 2

    @property
    def center_y(self) -> float:
        return self._y + self._height / 2

    @property
    def points(self) -> int:
        return self._points

    @property
    def color(self) -> str:
        return self._color

    @property
    def row(self) -> int:
        return self._grid_position[0]

    @property
    def col(self) -> int:
        return self._grid_position[1]

    @property
    def visible(self) -> bool:
        """True until the brick is destroyed."""
        return self._visible

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._width, self._height)

    def hide(self) -> None:
        """Mark the brick destroyed."""
        self._visible = False

    def show(self) -> None:
        self._visible = True


def brick_points(row: int, rows: int, points_per_row: int) -> int:
    """Points for a brick in `row`; the top row is worth the most."""
    return (rows - row) * points_per_row


def create_brick_grid(config: BrickGridConfig, field_width: float) -> List[Brick]:
    """Build the brick grid in row-major order, centred horizontally.

    Args:
        config: Grid layout
        field_width: Field width used to centre the grid

    Returns:
        Bricks ordered top row first, left to right
    """
    offset_left = (field_width - config.total_width) / 2
    step_x = config.brick_width + config.padding
    step_y = config.brick_height + config.padding

    bricks = []
    for row in range(config.rows):
        color = config.colors[row % len(config.colors)]
        points = brick_points(row, config.rows, config.points_per_row)
        for col in range(config.cols):
            bricks.append(Brick(
                offset_left + col * step_x,
                config.offset_top + row * step_y,
                config.brick_width,
                config.brick_height,
                points,
                (row, col),
                color,
            ))
    return bricks
