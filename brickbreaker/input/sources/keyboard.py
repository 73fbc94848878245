"""
Keyboard Input Source - held-key tracking from pygame key events.
"""
from typing import Dict, Iterable, Optional, Set

import pygame

from brickbreaker.input.input_snapshot import Action, InputSnapshot
from brickbreaker.input.sources.base import InputSource

# pygame key names -> logical action
DEFAULT_KEY_MAP: Dict[str, Action] = {
    'left': Action.LEFT,
    'a': Action.LEFT,
    'right': Action.RIGHT,
    'd': Action.RIGHT,
    'space': Action.LAUNCH,
}


class KeyboardInputSource(InputSource):
    """Tracks which mapped keys are held down.

    Key events are fed in with handle_event() as they arrive. Events this
    source doesn't consume are returned so the host loop can handle them
    (quit, reset, etc.).
    """

    def __init__(self, key_map: Optional[Dict[str, Action]] = None):
        """Initialize with an optional key name -> action mapping."""
        self._key_map = dict(key_map or DEFAULT_KEY_MAP)
        self._held: Set[str] = set()

    @property
    def held_keys(self) -> Set[str]:
        return set(self._held)

    def press(self, key_name: str) -> None:
        """Mark a key as held."""
        key_name = key_name.lower()
        if key_name in self._key_map:
            self._held.add(key_name)

    def release(self, key_name: str) -> None:
        """Mark a key as released."""
        self._held.discard(key_name.lower())

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Consume a pygame key event.

        Returns:
            True if the event was a mapped key and was consumed
        """
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False

        key_name = pygame.key.name(event.key).lower()
        if key_name not in self._key_map:
            return False

        if event.type == pygame.KEYDOWN:
            self.press(key_name)
        else:
            self.release(key_name)
        return True

    def handle_events(self, events: Iterable[pygame.event.Event]) -> list:
        """Consume mapped key events, returning the rest."""
        return [event for event in events if not self.handle_event(event)]

    def snapshot(self) -> InputSnapshot:
        """Return the actions for the keys held right now."""
        return InputSnapshot.from_actions(self._key_map[key] for key in self._held)

    def clear(self) -> None:
        """Release all keys (e.g. when the window loses focus)."""
        self._held.clear()
