"""
Brickfall enumerations.

Brick and power-up variants, audio cue names, paddle directions and
session phases.
"""

from enum import Enum


class BrickType(str, Enum):
    """Brick variants.

    Attributes:
        NORMAL: Breaks on the first hit
        MULTI: Needs two hits
        UNBREAKABLE: Only a fireball can break it
    """
    NORMAL = "normal"
    MULTI = "multi"
    UNBREAKABLE = "unbreakable"


class PowerUpType(str, Enum):
    """Power-up variants dropped by broken bricks."""
    EXTRA_LIFE = "life"
    WIDE_PADDLE = "wide"
    FIREBALL = "fireball"


class SoundCue(str, Enum):
    """Audio cues the core asks the skin to play."""
    BRICK_HIT = "brick-hit"
    PADDLE_HIT = "paddle-hit"
    POWERUP_PICKUP = "powerup-pickup"
    LIFE_LOST = "life-lost"
    GAME_OVER = "game-over"
    LEVEL_UP = "level-up"


class PaddleDirection(str, Enum):
    """Horizontal direction requested by the input device."""
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


class SessionPhase(str, Enum):
    """Lifecycle phase of a game session.

    Attributes:
        READY: Start screen, nothing has been simulated yet
        RUNNING: Ticks are advancing the simulation
        PAUSED: Player paused the scheduler
        LEVEL_COMPLETE: Waiting for the player to continue to the next level
        GAME_OVER: Terminal until the game is restarted
    """
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    LEVEL_COMPLETE = "level_complete"
    GAME_OVER = "game_over"
