"""Configuration for BrickBreaker game.

Contains field dimensions, physics constants, the brick palette, and
pydantic models for loading a game configuration from YAML.

All speeds are in pixels per tick; the simulation advances one fixed
step per rendered frame.
"""

import math
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

# Field dimensions
FIELD_WIDTH: int = 800
FIELD_HEIGHT: int = 600

# Paddle
PADDLE_WIDTH: float = 120.0
PADDLE_HEIGHT: float = 15.0
PADDLE_SPEED: float = 8.0
PADDLE_BOTTOM_OFFSET: float = 30.0  # Paddle top sits this far above the bottom edge

# Ball
BALL_RADIUS: float = 8.0
BALL_SPEED: float = 6.0
BALL_REST_OFFSET: float = 50.0  # Un-launched ball centre, measured from the bottom edge

# Launch and bounce angles (radians from straight up)
LAUNCH_ANGLE_SPREAD: float = 0.25
MAX_BOUNCE_ANGLE: float = math.pi / 3

# Brick grid
BRICK_ROWS: int = 6
BRICK_COLS: int = 10
BRICK_WIDTH: float = 75.0
BRICK_HEIGHT: float = 20.0
BRICK_PADDING: float = 5.0
BRICK_OFFSET_TOP: float = 60.0
POINTS_PER_ROW: int = 10

# Game rules
STARTING_LIVES: int = 3

# Row colours, top row first; cycles when there are more rows
ROW_COLORS: List[str] = [
    '#ff6b6b',
    '#4ecdc4',
    '#45b7d1',
    '#96ceb4',
    '#feca57',
    '#ff9ff3',
]

# Visual
BACKGROUND_COLOR = (0, 0, 0)
FPS: int = 60


class ConfigError(Exception):
    """Raised when a game configuration cannot be loaded."""
    pass


class FieldConfig(BaseModel):
    """Playing field size in pixels."""
    width: int = Field(FIELD_WIDTH, gt=0)
    height: int = Field(FIELD_HEIGHT, gt=0)

    model_config = ConfigDict(frozen=True)


class PaddleConfig(BaseModel):
    """Paddle geometry and speed."""
    width: float = Field(PADDLE_WIDTH, gt=0)
    height: float = Field(PADDLE_HEIGHT, gt=0)
    speed: float = Field(PADDLE_SPEED, gt=0)
    bottom_offset: float = Field(PADDLE_BOTTOM_OFFSET, gt=0)

    model_config = ConfigDict(frozen=True)


class BallConfig(BaseModel):
    """Ball geometry, speed and angle limits."""
    radius: float = Field(BALL_RADIUS, gt=0)
    speed: float = Field(BALL_SPEED, gt=0)
    rest_offset: float = Field(BALL_REST_OFFSET, gt=0)
    launch_angle_spread: float = Field(LAUNCH_ANGLE_SPREAD, ge=0, lt=math.pi / 2)
    max_bounce_angle: float = Field(MAX_BOUNCE_ANGLE, gt=0, lt=math.pi / 2)

    model_config = ConfigDict(frozen=True)


class BrickGridConfig(BaseModel):
    """Brick grid layout. Points for row k are (rows - k) * points_per_row."""
    rows: int = Field(BRICK_ROWS, ge=1)
    cols: int = Field(BRICK_COLS, ge=1)
    brick_width: float = Field(BRICK_WIDTH, gt=0)
    brick_height: float = Field(BRICK_HEIGHT, gt=0)
    padding: float = Field(BRICK_PADDING, ge=0)
    offset_top: float = Field(BRICK_OFFSET_TOP, ge=0)
    points_per_row: int = Field(POINTS_PER_ROW, ge=1)
    colors: List[str] = Field(default_factory=lambda: list(ROW_COLORS), min_length=1)

    model_config = ConfigDict(frozen=True)

    @property
    def total_width(self) -> float:
        """Width of the whole grid, padding between columns only."""
        return self.cols * (self.brick_width + self.padding) - self.padding

    @property
    def total_height(self) -> float:
        """Height of the whole grid, padding between rows only."""
        return self.rows * (self.brick_height + self.padding) - self.padding


class GameConfig(BaseModel):
    """Complete game configuration.

    Example YAML (every key optional):
        lives: 5
        field:
          width: 800
          height: 600
        paddle:
          width: 100
          speed: 10
        ball:
          speed: 7
        bricks:
          rows: 4
          cols: 8
    """
    lives: int = Field(STARTING_LIVES, ge=1)
    field: FieldConfig = Field(default_factory=FieldConfig)
    paddle: PaddleConfig = Field(default_factory=PaddleConfig)
    ball: BallConfig = Field(default_factory=BallConfig)
    bricks: BrickGridConfig = Field(default_factory=BrickGridConfig)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def _check_fits_field(self) -> 'GameConfig':
        """Paddle and brick grid must fit inside the field."""
        if self.paddle.width > self.field.width:
            raise ValueError(
                f'paddle width {self.paddle.width} exceeds field width {self.field.width}'
            )
        if self.bricks.total_width > self.field.width:
            raise ValueError(
                f'brick grid width {self.bricks.total_width} exceeds field width {self.field.width}'
            )
        grid_bottom = self.bricks.offset_top + self.bricks.total_height
        if grid_bottom >= self.field.height - self.paddle.bottom_offset:
            raise ValueError('brick grid overlaps the paddle area')
        return self

    def with_overrides(self, **overrides: Any) -> 'GameConfig':
        """Return a copy with top-level or dotted overrides applied.

        None values are skipped so argparse defaults can be passed straight
        through. Dotted keys address nested sections, e.g.
        ``with_overrides(**{'field.width': 1024})``.

        Raises:
            ConfigError: If a dotted key names no section, or the resulting
                configuration is invalid
        """
        data = self.model_dump()
        for key, value in overrides.items():
            if value is None:
                continue
            section, _, name = key.rpartition('.')
            target = data.get(section) if section else data
            if not isinstance(target, dict):
                raise ConfigError(f'Unknown config section in override: {key}')
            target[name] = value
        return _validate(data, source='overrides')


def _validate(data: Dict[str, Any], source: str) -> GameConfig:
    try:
        return GameConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f'Invalid configuration in {source}: {e}') from e


def load_config(path: Union[str, Path]) -> GameConfig:
    """Load a game configuration from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Validated GameConfig; keys missing from the file use defaults

    Raises:
        ConfigError: If the file is missing, unparsable or invalid
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f'Config file not found: {path}')

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f'Could not parse {path}: {e}') from e

    if not isinstance(data, dict):
        raise ConfigError(f'Config root in {path} must be a mapping')

    return _validate(data, source=str(path))
