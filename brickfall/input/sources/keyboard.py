"""
Keyboard Input Source - arrow keys and action keys via pygame.
"""
import time
from typing import Dict, List

import pygame

from brickfall.input.input_event import InputAction, InputEvent
from brickfall.input.sources.base import InputSource

KEY_DOWN_ACTIONS: Dict[int, InputAction] = {
    pygame.K_LEFT: InputAction.MOVE_LEFT,
    pygame.K_RIGHT: InputAction.MOVE_RIGHT,
    pygame.K_SPACE: InputAction.CONFIRM,
    pygame.K_RETURN: InputAction.CONFIRM,
    pygame.K_KP_ENTER: InputAction.CONFIRM,
    pygame.K_r: InputAction.RESTART,
    pygame.K_p: InputAction.PAUSE,
    pygame.K_ESCAPE: InputAction.QUIT,
}

ARROW_KEYS = (pygame.K_LEFT, pygame.K_RIGHT)


class KeyboardInputSource(InputSource):
    """Converts pygame keyboard events into InputEvent models.

    Releasing either arrow key stops the paddle. Window close is
    reported as QUIT.
    """

    def __init__(self):
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Drain the pygame event queue."""
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Translate one pygame event, ignoring anything unmapped."""
        action = None
        if event.type == pygame.QUIT:
            action = InputAction.QUIT
        elif event.type == pygame.KEYDOWN:
            action = KEY_DOWN_ACTIONS.get(event.key)
        elif event.type == pygame.KEYUP and event.key in ARROW_KEYS:
            action = InputAction.STOP

        if action is not None:
            self._event_queue.append(InputEvent(action=action, timestamp=time.monotonic()))

    def clear(self) -> None:
        self._event_queue.clear()
