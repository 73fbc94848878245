"""
Input abstraction layer.

The game reads a single immutable InputSnapshot per tick, whatever the
source behind it.
"""

from brickbreaker.input.input_snapshot import Action, InputSnapshot, NO_INPUT
from brickbreaker.input.input_manager import InputManager

__all__ = ['Action', 'InputSnapshot', 'NO_INPUT', 'InputManager']
