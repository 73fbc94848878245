"""
Input Manager - samples the active input source once per tick.
"""
from typing import Optional

from brickbreaker.input.input_snapshot import InputSnapshot, NO_INPUT
from brickbreaker.input.sources.base import InputSource


class InputManager:
    """Holds the active input source and hands out per-tick snapshots.

    The source can be swapped at runtime (keyboard, scripted replay, ...)
    without changing game logic.
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize with an optional input source."""
        self._source = source

    def set_source(self, source: InputSource) -> None:
        """Set the input source."""
        self._source = source

    def get_source(self) -> Optional[InputSource]:
        """Get the currently active input source."""
        return self._source

    def has_source(self) -> bool:
        """Check if an input source is currently active."""
        return self._source is not None

    def sample(self) -> InputSnapshot:
        """Snapshot of held actions; no input when there is no source."""
        if self._source is None:
            return NO_INPUT
        return self._source.snapshot()
