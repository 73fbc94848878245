"""
Input Snapshot - the logical actions held down at the start of a tick.

Uses a frozen dataclass so one tick can never observe a half-updated
key state.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Action(Enum):
    """Logical player actions."""

    LEFT = "left"
    RIGHT = "right"
    LAUNCH = "launch"


@dataclass(frozen=True)
class InputSnapshot:
    """Immutable set of active actions for one tick.

    Attributes:
        left: Move paddle left
        right: Move paddle right
        launch: Launch the ball (only meaningful while Ready)
    """
    left: bool = False
    right: bool = False
    launch: bool = False

    @classmethod
    def from_actions(cls, actions: Iterable[Action]) -> 'InputSnapshot':
        """Build a snapshot from a collection of active actions."""
        active = set(actions)
        return cls(
            left=Action.LEFT in active,
            right=Action.RIGHT in active,
            launch=Action.LAUNCH in active,
        )

    @property
    def is_idle(self) -> bool:
        return not (self.left or self.right or self.launch)

    def __str__(self) -> str:
        """String representation for debugging."""
        held = [name for name in ('left', 'right', 'launch') if getattr(self, name)]
        return f"InputSnapshot({', '.join(held) or 'none'})"


NO_INPUT = InputSnapshot()
