"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod
from typing import List

from brickfall.input.input_event import InputEvent


class InputSource(ABC):
    """Abstract base class for input sources."""

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Return events collected since the last poll."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Collect new events from the backend.

        Args:
            dt: Delta time in seconds since last update.
        """
