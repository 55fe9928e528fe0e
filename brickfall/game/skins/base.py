"""Base class for Brickfall skins.

Skins handle ALL rendering and audio - the simulation only manages
state and calls into the skin with fire-and-forget triggers.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from brickfall.models import RenderSnapshot, SoundCue

if TYPE_CHECKING:
    import pygame


class BrickBreakerSkin(ABC):
    """Base class for game skins (visuals + audio).

    The core never inspects what a skin returns and a skin must never
    raise back into the core: audio or display failures are the skin's
    own business.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    @abstractmethod
    def render(self, snapshot: RenderSnapshot) -> None:
        """Receive the state to draw for the current tick.

        Args:
            snapshot: Paddle, ball, bricks, power-ups, score and lives
        """

    def play_cue(self, cue: SoundCue) -> None:
        """Play the sound for a gameplay cue."""

    def show_title(self, message: str) -> None:
        """Show the start screen overlay."""

    def show_game_over(self, message: str) -> None:
        """Show the game over overlay."""

    def show_level_complete(self, message: str, show_continue: bool) -> None:
        """Show the level transition overlay.

        Args:
            message: Text such as "Level 2 Start!"
            show_continue: Whether to offer the continue action
        """

    def hide_overlay(self) -> None:
        """Remove any overlay."""

    def draw(self, screen: 'pygame.Surface') -> None:
        """Paint the most recent snapshot onto a pygame surface."""


class NullSkin(BrickBreakerSkin):
    """Headless skin that remembers what it was asked to do."""

    NAME = "null"
    DESCRIPTION = "No output (headless runs and tests)"

    def __init__(self):
        self.snapshot: Optional[RenderSnapshot] = None
        self.cues: List[SoundCue] = []
        self.overlay: Optional[str] = None
        self.show_continue = False

    def render(self, snapshot: RenderSnapshot) -> None:
        self.snapshot = snapshot

    def play_cue(self, cue: SoundCue) -> None:
        self.cues.append(cue)

    def show_title(self, message: str) -> None:
        self.overlay = message
        self.show_continue = False

    def show_game_over(self, message: str) -> None:
        self.overlay = message
        self.show_continue = False

    def show_level_complete(self, message: str, show_continue: bool) -> None:
        self.overlay = message
        self.show_continue = show_continue

    def hide_overlay(self) -> None:
        self.overlay = None
        self.show_continue = False
