"""Geometric skin - flat shapes and synthesized sounds.

Draws bricks, paddle, ball, power-ups and the HUD with pygame
primitives and plays procedurally generated tones for every cue.
"""

from typing import Dict, Optional, Tuple

import numpy as np
import pygame

from brickfall.config import (
    BACKGROUND_COLOR,
    BALL_COLOR,
    BRICK_BORDER_COLOR,
    BRICK_COLORS,
    FIREBALL_COLOR,
    LIFE_COLOR,
    PADDLE_COLOR,
    POWER_UP_COLORS,
    TEXT_COLOR,
)
from brickfall.logging import get_logger
from brickfall.models import BrickType, BrickView, RenderSnapshot, SoundCue

from .base import BrickBreakerSkin

log = get_logger('skin')

SAMPLE_RATE = 22050

# (start Hz, end Hz, seconds, volume) per cue
CUE_TONES: Dict[SoundCue, Tuple[float, float, float, float]] = {
    SoundCue.BRICK_HIT: (880.0, 660.0, 0.06, 0.3),
    SoundCue.PADDLE_HIT: (440.0, 440.0, 0.05, 0.5),
    SoundCue.POWERUP_PICKUP: (523.25, 1046.5, 0.2, 0.5),
    SoundCue.LIFE_LOST: (392.0, 196.0, 0.35, 0.5),
    SoundCue.GAME_OVER: (330.0, 110.0, 0.8, 0.5),
    SoundCue.LEVEL_UP: (523.25, 783.99, 0.4, 0.5),
}


def brick_color(brick: BrickView) -> Tuple[int, int, int]:
    """Fill color for a brick: fixed for special bricks, a hue sweep otherwise."""
    if brick.brick_type == BrickType.UNBREAKABLE:
        return BRICK_COLORS['unbreakable']
    if brick.brick_type == BrickType.MULTI:
        return BRICK_COLORS['multi']
    color = pygame.Color(0, 0, 0)
    color.hsla = ((brick.row + brick.column) * 20 % 360, 100, 60, 100)
    return (color.r, color.g, color.b)


class GeometricSkin(BrickBreakerSkin):
    """Simple geometric shapes in the classic arcade palette."""

    NAME = "geometric"
    DESCRIPTION = "Flat shapes and synthesized sounds"

    def __init__(self, audio_enabled: bool = True, volume: float = 1.0):
        """Initialize the skin.

        Args:
            audio_enabled: Whether to initialize the mixer and play cues
            volume: Master volume multiplier (0-1)
        """
        self.audio_enabled = audio_enabled
        self.volume = volume
        self.sounds: Dict[SoundCue, Optional[pygame.mixer.Sound]] = {}
        self._snapshot: Optional[RenderSnapshot] = None
        self._overlay: Optional[str] = None
        self._hint: Optional[str] = None
        self._fonts: Dict[int, pygame.font.Font] = {}

        if self.audio_enabled:
            self._init_audio()

    @property
    def snapshot(self) -> Optional[RenderSnapshot]:
        """Most recent snapshot received from the core."""
        return self._snapshot

    @property
    def overlay(self) -> Optional[str]:
        return self._overlay

    @property
    def hint(self) -> Optional[str]:
        """Action prompt shown under the overlay message."""
        return self._hint

    # =========================================================================
    # Audio
    # =========================================================================

    def _init_audio(self) -> None:
        """Initialize the mixer and synthesize one sound per cue.

        Any failure disables audio instead of raising.
        """
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
            for cue, (start, end, duration, volume) in CUE_TONES.items():
                sound = self._generate_sweep(start, end, duration)
                if sound is not None:
                    sound.set_volume(volume * self.volume)
                self.sounds[cue] = sound
        except Exception as e:
            log.warning("Audio initialization failed: %s", e)
            self.audio_enabled = False
            self.sounds = {}

    def _generate_sweep(
        self,
        frequency_start: float,
        frequency_end: float,
        duration: float,
    ) -> Optional[pygame.mixer.Sound]:
        """Synthesize a sine sweep with a short fade in and out.

        Returns:
            pygame.mixer.Sound or None if generation fails
        """
        try:
            num_samples = int(SAMPLE_RATE * duration)
            frequencies = np.linspace(frequency_start, frequency_end, num_samples)
            phase = np.cumsum(2.0 * np.pi * frequencies / SAMPLE_RATE)
            wave = np.sin(phase)

            envelope = np.ones(num_samples)
            fade_samples = max(1, int(num_samples * 0.1))
            envelope[:fade_samples] = np.linspace(0, 1, fade_samples)
            envelope[-fade_samples:] = np.linspace(1, 0, fade_samples)
            wave *= envelope

            wave = (wave * 32767 * 0.5).astype(np.int16)
            stereo_wave = np.column_stack((wave, wave))
            return pygame.sndarray.make_sound(stereo_wave)
        except Exception as e:
            log.warning("Could not generate sound: %s", e)
            return None

    def play_cue(self, cue: SoundCue) -> None:
        """Play the cue's sound from the start; never raises."""
        if not self.audio_enabled:
            return
        sound = self.sounds.get(cue)
        if sound is None:
            return
        try:
            sound.stop()
            sound.play()
        except pygame.error as e:
            log.warning("Could not play %s: %s", cue.value, e)

    # =========================================================================
    # Core signals
    # =========================================================================

    def render(self, snapshot: RenderSnapshot) -> None:
        self._snapshot = snapshot

    def show_title(self, message: str) -> None:
        self._overlay = message
        self._hint = "Press SPACE to start"

    def show_game_over(self, message: str) -> None:
        self._overlay = message
        self._hint = "Press ENTER to restart"

    def show_level_complete(self, message: str, show_continue: bool) -> None:
        self._overlay = message
        self._hint = "Press SPACE to continue" if show_continue else None

    def hide_overlay(self) -> None:
        self._overlay = None
        self._hint = None

    # =========================================================================
    # Drawing
    # =========================================================================

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def draw(self, screen: pygame.Surface) -> None:
        """Paint the latest snapshot and any overlay."""
        screen.fill(BACKGROUND_COLOR)
        snapshot = self._snapshot
        if snapshot is None:
            return

        for brick in snapshot.bricks:
            rect = pygame.Rect(brick.rect.x, brick.rect.y, brick.rect.width, brick.rect.height)
            pygame.draw.rect(screen, brick_color(brick), rect)
            pygame.draw.rect(screen, BRICK_BORDER_COLOR, rect, 1)

        paddle = snapshot.paddle
        pygame.draw.rect(
            screen, PADDLE_COLOR,
            pygame.Rect(paddle.x, paddle.y, paddle.width, paddle.height),
        )

        ball = snapshot.ball
        pygame.draw.circle(
            screen,
            FIREBALL_COLOR if ball.is_fireball else BALL_COLOR,
            (int(ball.center.x), int(ball.center.y)),
            int(ball.radius),
        )

        self._draw_hud(screen, snapshot)

        for power_up in snapshot.power_ups:
            pygame.draw.circle(
                screen,
                POWER_UP_COLORS.get(power_up.power_up_type.value, (0, 0, 255)),
                (int(power_up.position.x), int(power_up.position.y)),
                int(power_up.size / 2),
            )

        if self._overlay:
            self._draw_overlay(screen, snapshot)

    def _draw_hud(self, screen: pygame.Surface, snapshot: RenderSnapshot) -> None:
        font = self._font(22)
        width = int(snapshot.field_width)
        screen.blit(font.render(f"Score: {snapshot.score}", True, TEXT_COLOR), (20, 12))
        screen.blit(font.render(f"Level: {snapshot.level}", True, TEXT_COLOR), (width - 100, 12))
        for i in range(snapshot.lives):
            pygame.draw.circle(screen, LIFE_COLOR, (width - 20 - i * 20, 50), 8)

    def _draw_overlay(self, screen: pygame.Surface, snapshot: RenderSnapshot) -> None:
        center_x = int(snapshot.field_width) // 2
        center_y = int(snapshot.field_height) // 2

        shade = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 160))
        screen.blit(shade, (0, 0))

        text = self._font(64).render(self._overlay, True, TEXT_COLOR)
        screen.blit(text, text.get_rect(center=(center_x, center_y)))

        if self._hint:
            hint_text = self._font(28).render(self._hint, True, TEXT_COLOR)
            screen.blit(hint_text, hint_text.get_rect(center=(center_x, center_y + 50)))
