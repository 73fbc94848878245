"""
BrickBreaker - single-screen brick breaking game.

Provides:
- game_mode: BrickBreakerGame, the per-tick simulation driver
- state_machine: lifecycle transitions, score and lives
- game: entities (paddle, ball, bricks) and physics
- config: defaults and YAML-loadable GameConfig
- input: per-tick input snapshots and sources
- skins: pygame renderers
"""

from brickbreaker.config import GameConfig, ConfigError, load_config
from brickbreaker.game_state import GameState, Lifecycle
from brickbreaker.game_mode import BrickBreakerGame
from brickbreaker.input import Action, InputSnapshot, InputManager
from brickbreaker.snapshot import GameSnapshot

__version__ = "1.0.0"

__all__ = [
    'GameConfig',
    'ConfigError',
    'load_config',
    'GameState',
    'Lifecycle',
    'BrickBreakerGame',
    'Action',
    'InputSnapshot',
    'InputManager',
    'GameSnapshot',
]
