"""Brickfall - classic brick-breaking game mode.

Wires configuration, the session, the simulation subsystems, the frame
scheduler and a skin together behind the BaseGame interface.
"""

import random
import time
from dataclasses import replace
from typing import Callable, Dict, List, Optional

import pygame

from brickfall.base_game import BaseGame
from brickfall.config import (
    DIFFICULTY_PRESETS,
    GameConfig,
    MAX_TICKS_PER_FRAME,
    apply_difficulty,
    validate_config,
)
from brickfall.game.level_controller import LevelController
from brickfall.game.physics.motion import MotionEngine
from brickfall.game.power_ups import PowerUpSystem
from brickfall.game.scheduler import FrameScheduler
from brickfall.game.session import Session
from brickfall.game.skins import BrickBreakerSkin, GeometricSkin
from brickfall.input import InputAction, InputEvent
from brickfall.logging import emit_record, get_logger
from brickfall.models import PaddleDirection, SessionPhase

log = get_logger('game_mode')

TITLE_MESSAGE = "Brickfall"

_DIRECTIONS: Dict[InputAction, PaddleDirection] = {
    InputAction.MOVE_LEFT: PaddleDirection.LEFT,
    InputAction.MOVE_RIGHT: PaddleDirection.RIGHT,
    InputAction.STOP: PaddleDirection.NONE,
}


class BrickBreakerMode(BaseGame):
    """Brick breaker game mode.

    Features:
    - Keyboard paddle with fixed-rate physics
    - Normal, multi-hit and unbreakable bricks
    - Extra life, wide paddle and fireball power-ups
    - Endless levels with rising ball and paddle speed
    """

    NAME = "Brickfall"
    DESCRIPTION = "Classic brick-breaking with power-ups and endless levels."
    VERSION = "1.0.0"
    AUTHOR = "Brickfall Team"

    ARGUMENTS = [
        {
            'name': '--difficulty',
            'type': str,
            'default': None,
            'choices': sorted(DIFFICULTY_PRESETS),
            'help': 'Ball and paddle tuning preset (default: classic)'
        },
        {
            'name': '--config',
            'type': str,
            'default': None,
            'help': 'YAML config file'
        },
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for reproducible brick fields'
        },
        {
            'name': '--mute',
            'action': 'store_true',
            'help': 'Disable sound'
        },
    ]

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        difficulty: Optional[str] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        seed: Optional[int] = None,
        skin: Optional[BrickBreakerSkin] = None,
        clock: Callable[[], float] = time.monotonic,
        mute: bool = False,
        **kwargs,
    ):
        """Initialize the game.

        Args:
            config: Base configuration (defaults to GameConfig())
            difficulty: Preset applied on top of ``config``
            width: Field width override
            height: Field height override
            seed: Seed for the session's random source
            skin: Skin instance (defaults to GeometricSkin)
            clock: Wall-clock source for timed effects
            mute: Disable audio on the default skin
        """
        super().__init__()
        config = config or GameConfig()
        if difficulty is not None:
            config = apply_difficulty(config, difficulty)
        if width is not None or height is not None:
            config = replace(config, field=replace(
                config.field,
                width=float(width if width is not None else config.field.width),
                height=float(height if height is not None else config.field.height),
            ))
        validate_config(config)

        self._config = config
        self._skin: BrickBreakerSkin = skin or GeometricSkin(audio_enabled=not mute)
        self._session = Session(config, random.Random(seed), clock)

        self._power_ups = PowerUpSystem(config.power_ups, self._skin)
        self._levels = LevelController(config.progression, self._skin)
        self._motion = MotionEngine(self._skin, self._power_ups, self._levels)
        self._scheduler = FrameScheduler(
            self._session,
            self._motion,
            self._power_ups,
            self._levels,
            self._skin,
            tick_rate=config.tick_rate,
            max_ticks_per_frame=MAX_TICKS_PER_FRAME,
        )
        self._quit_requested = False

        self._show_start_screen()
        log.info("Created %.0fx%.0f field, seed=%s", config.field.width,
                 config.field.height, seed)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def session(self) -> Session:
        return self._session

    @property
    def scheduler(self) -> FrameScheduler:
        return self._scheduler

    @property
    def skin(self) -> BrickBreakerSkin:
        return self._skin

    @property
    def quit_requested(self) -> bool:
        """True once the player asked to leave."""
        return self._quit_requested

    def _get_internal_state(self) -> SessionPhase:
        return self._session.phase

    def get_score(self) -> int:
        return self._session.score

    # =========================================================================
    # Collaborator -> core signals
    # =========================================================================

    def start_game(self) -> bool:
        return self._scheduler.start()

    def continue_level(self) -> bool:
        return self._levels.continue_level(self._session)

    def restart_game(self) -> None:
        self._levels.restart_game(self._session)
        self._scheduler.start()

    def set_paddle_direction(self, direction: PaddleDirection) -> None:
        self._session.paddle.set_direction(direction)

    def toggle_pause(self) -> bool:
        return self._scheduler.toggle_pause()

    def _confirm(self) -> None:
        """Space/Enter: the action offered by the current screen."""
        phase = self._session.phase
        if phase == SessionPhase.READY:
            self.start_game()
        elif phase == SessionPhase.LEVEL_COMPLETE:
            self.continue_level()
        elif phase == SessionPhase.GAME_OVER:
            self.restart_game()
        elif phase == SessionPhase.PAUSED:
            self._scheduler.resume()

    # =========================================================================
    # BaseGame interface
    # =========================================================================

    def handle_input(self, events: List[InputEvent]) -> None:
        for event in events:
            action = event.action
            if action in _DIRECTIONS:
                self.set_paddle_direction(_DIRECTIONS[action])
            elif action == InputAction.CONFIRM:
                self._confirm()
            elif action == InputAction.RESTART:
                self.restart_game()
            elif action == InputAction.PAUSE:
                self.toggle_pause()
            elif action == InputAction.QUIT:
                self._quit_requested = True
                self._scheduler.stop()

    def update(self, dt: float) -> None:
        self._scheduler.advance(dt)

    def render(self, screen: pygame.Surface) -> None:
        self._skin.draw(screen)

    def reset(self) -> None:
        """Back to the start screen with a fresh session."""
        self._levels.reset_game(self._session)
        self._show_start_screen()

    def _show_start_screen(self) -> None:
        self._skin.show_title(TITLE_MESSAGE)
        self._skin.render(self._session.snapshot())
        emit_record('session', {'type': 'ready', 'lives': self._session.lives})
