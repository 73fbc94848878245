"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod

from brickbreaker.input.input_snapshot import InputSnapshot


class InputSource(ABC):
    """Abstract base class for input sources.

    Sources may change their held state at any time between ticks; the
    game only ever reads it through snapshot().
    """

    @abstractmethod
    def snapshot(self) -> InputSnapshot:
        """Return the actions currently held."""
        pass

    def clear(self) -> None:
        """Forget any held actions."""
        pass
