"""
Read-only views of the game handed to the renderer once per tick.

Snapshots are frozen pydantic models, so a skin can hold on to one without
seeing later simulation changes.
"""

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .game.entities import Brick
from .game_state import GameState, Lifecycle


class PaddleView(BaseModel):
    """Paddle rectangle, (x, y) is the top-left corner."""
    x: float
    y: float
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


class BallView(BaseModel):
    """Ball centre, radius and velocity (used for the motion trail)."""
    x: float
    y: float
    radius: float = Field(..., gt=0)
    dx: float = 0.0
    dy: float = 0.0

    model_config = ConfigDict(frozen=True)


class BrickView(BaseModel):
    """Brick rectangle with its visibility and colour class."""
    x: float
    y: float
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    color: str
    visible: bool

    model_config = ConfigDict(frozen=True)

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


class GameSnapshot(BaseModel):
    """Everything the renderer needs for one frame.

    Examples:
        >>> snap = game.snapshot()
        >>> snap.lifecycle, snap.score, snap.lives
        (<Lifecycle.IDLE: 'idle'>, 0, 3)
    """
    lifecycle: Lifecycle
    score: int = Field(..., ge=0)
    lives: int = Field(..., ge=0)
    message: str = ""
    field_width: int = Field(..., gt=0)
    field_height: int = Field(..., gt=0)
    paddle: PaddleView
    ball: BallView
    bricks: Tuple[BrickView, ...]

    model_config = ConfigDict(frozen=True)

    @property
    def ball_launched(self) -> bool:
        return self.lifecycle == Lifecycle.LAUNCHED

    @property
    def visible_bricks(self) -> List[BrickView]:
        return [brick for brick in self.bricks if brick.visible]


def take_snapshot(state: GameState, field_width: int, field_height: int) -> GameSnapshot:
    """Copy the current game state into an immutable GameSnapshot."""
    ball = state.ball
    px, py, pw, ph = state.paddle.rect
    return GameSnapshot(
        lifecycle=state.lifecycle,
        score=state.score,
        lives=max(0, state.lives),
        message=state.message,
        field_width=field_width,
        field_height=field_height,
        paddle=PaddleView(x=px, y=py, width=pw, height=ph),
        ball=BallView(x=ball.x, y=ball.y, radius=ball.radius, dx=ball.dx, dy=ball.dy),
        bricks=tuple(_brick_view(brick) for brick in state.bricks),
    )


def _brick_view(brick: Brick) -> BrickView:
    x, y, width, height = brick.rect
    return BrickView(
        x=x,
        y=y,
        width=width,
        height=height,
        row=brick.row,
        col=brick.col,
        color=brick.color,
        visible=brick.visible,
    )
