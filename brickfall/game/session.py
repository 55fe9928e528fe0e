"""Session aggregate.

The Session owns every piece of mutable game state: paddle, ball,
brick grid, falling power-ups, pending timed effects, score, lives,
level and phase. Subsystems receive the session by reference and never
keep their own copy of any of it.
"""

from dataclasses import dataclass
import random
import time
from typing import Callable, List, Optional

from brickfall.config import GameConfig
from brickfall.models import (
    BallView,
    BrickView,
    Point2D,
    PowerUpType,
    PowerUpView,
    Rectangle,
    RenderSnapshot,
    SessionPhase,
)

from .brick_field import generate_brick_grid
from .entities import Ball, BrickGrid, Paddle, PowerUp


@dataclass(frozen=True)
class ExpiringEffect:
    """A timed power-up effect waiting to be reverted.

    Attributes:
        power_up_type: Which effect to revert
        expires_at: Absolute clock time at which the revert applies
    """
    power_up_type: PowerUpType
    expires_at: float


class Session:
    """All state for one game, from start screen to game over.

    Args:
        config: Game configuration
        rng: Random source for brick types, power-up drops and deflection
        clock: Wall-clock source in seconds, used for timed effects
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.clock = clock

        self.paddle: Paddle
        self.ball: Ball
        self.bricks: BrickGrid
        self.power_ups: List[PowerUp] = []
        self.effects: List[ExpiringEffect] = []
        self.score = 0
        self.lives = self.config.lives
        self.level = 1
        self.phase = SessionPhase.READY

        self.reset()

    @property
    def field_width(self) -> float:
        return self.config.field.width

    @property
    def field_height(self) -> float:
        return self.config.field.height

    @property
    def running(self) -> bool:
        """True while ticks should advance the simulation."""
        return self.phase == SessionPhase.RUNNING

    def now(self) -> float:
        return self.clock()

    def reset(self) -> None:
        """Rebuild everything from configuration.

        Lives, score and level return to their starting values, the
        paddle and ball are recreated (dropping wide mode, fireball mode
        and any per-level speed increases), falling power-ups and
        pending effects are discarded, and a new brick field is drawn.
        The phase returns to READY.
        """
        cfg = self.config
        self.paddle = Paddle(cfg.paddle, cfg.field.width, cfg.field.height)
        self.ball = Ball.spawn(cfg.ball, cfg.field.width, cfg.field.height)
        self.bricks = self.new_brick_grid()
        self.power_ups = []
        self.effects = []
        self.score = 0
        self.lives = cfg.lives
        self.level = 1
        self.phase = SessionPhase.READY

    def new_brick_grid(self) -> BrickGrid:
        return generate_brick_grid(self.config.bricks, self.rng, self.config.odds)

    def respawn_ball(self) -> None:
        """Put the ball back at the launch point and recentre the paddle."""
        self.ball = self.ball.respawn(self.field_width, self.field_height)
        self.paddle.recenter()

    def brick_rect(self, column: int, row: int) -> Rectangle:
        x, y, w, h = self.config.bricks.brick_rect(column, row)
        return Rectangle(x=x, y=y, width=w, height=h)

    def snapshot(self) -> RenderSnapshot:
        """Read-only view of the current state for the skin."""
        px, py, pw, ph = self.paddle.rect
        return RenderSnapshot(
            field_width=self.field_width,
            field_height=self.field_height,
            paddle=Rectangle(x=px, y=py, width=pw, height=ph),
            is_wide=self.paddle.is_wide,
            ball=BallView(
                center=Point2D(x=self.ball.x, y=self.ball.y),
                radius=self.ball.radius,
                is_fireball=self.ball.is_fireball,
            ),
            bricks=[
                BrickView(
                    column=brick.column,
                    row=brick.row,
                    rect=self.brick_rect(brick.column, brick.row),
                    brick_type=brick.brick_type,
                    status=brick.status,
                )
                for brick in self.bricks
                if brick.is_solid
            ],
            power_ups=[
                PowerUpView(
                    position=Point2D(x=p.x, y=p.y),
                    size=p.width,
                    power_up_type=p.power_up_type,
                )
                for p in self.power_ups
                if p.is_active
            ],
            score=self.score,
            lives=self.lives,
            level=self.level,
            phase=self.phase,
        )
