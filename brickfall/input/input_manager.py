"""
Input Manager - Collects input from the active source.
"""
from typing import List, Optional

from brickfall.input.input_event import InputEvent
from brickfall.input.sources.base import InputSource


class InputManager:
    """Owns the active input source and hands its events to the game."""

    def __init__(self, source: Optional[InputSource] = None):
        self._source = source

    def set_source(self, source: InputSource) -> None:
        self._source = source

    def get_source(self) -> Optional[InputSource]:
        return self._source

    def has_source(self) -> bool:
        return self._source is not None

    def update(self, dt: float) -> None:
        """Update the active input source.

        Args:
            dt: Delta time in seconds since last update.
        """
        if self._source is not None:
            self._source.update(dt)

    def get_events(self) -> List[InputEvent]:
        """Events collected since the last call."""
        if self._source is None:
            return []
        return self._source.poll_events()
