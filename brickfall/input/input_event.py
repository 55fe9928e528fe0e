"""
Input Event - a single player action.

Uses Pydantic for validation and immutability.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class InputAction(str, Enum):
    """Actions an input source can report.

    Attributes:
        MOVE_LEFT: Start moving the paddle left
        MOVE_RIGHT: Start moving the paddle right
        STOP: Stop the paddle
        CONFIRM: Start / continue / restart, depending on the phase
        RESTART: Restart immediately
        PAUSE: Toggle pause
        QUIT: Leave the game
    """
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    STOP = "stop"
    CONFIRM = "confirm"
    RESTART = "restart"
    PAUSE = "pause"
    QUIT = "quit"


class InputEvent(BaseModel):
    """Immutable input event from any source.

    Attributes:
        action: What the player asked for
        timestamp: Time of the event (seconds, from monotonic clock)
    """
    action: InputAction
    timestamp: float

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v: float) -> float:
        """Validate timestamp is non-negative."""
        if v < 0:
            raise ValueError(f'Timestamp must be non-negative, got {v}')
        return v

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"InputEvent(action={self.action.value}, t={self.timestamp:.3f})"
