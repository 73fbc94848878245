"""
Input source implementations.
"""

from brickbreaker.input.sources.base import InputSource
from brickbreaker.input.sources.keyboard import KeyboardInputSource, DEFAULT_KEY_MAP

__all__ = ['InputSource', 'KeyboardInputSource', 'DEFAULT_KEY_MAP']
