"""Motion and collision response.

Moves the paddle and ball one tick and resolves collisions in a fixed
order: walls, paddle, bricks, then the bottom edge.
"""

from typing import TYPE_CHECKING

from brickfall.logging import get_logger
from brickfall.models import SoundCue

from .collision import (
    check_ball_lost,
    check_paddle_collision,
    check_wall_collision,
    find_brick_collision,
)

if TYPE_CHECKING:
    from ..entities import Brick
    from ..level_controller import LevelController
    from ..power_ups import PowerUpSystem
    from ..session import Session
    from ..skins.base import BrickBreakerSkin

log = get_logger('motion')


class MotionEngine:
    """Per-tick paddle and ball movement.

    Args:
        skin: Receives paddle-hit and brick-hit cues
        power_ups: Rolls drops for broken bricks
        levels: Handles level completion and lost balls
    """

    def __init__(
        self,
        skin: 'BrickBreakerSkin',
        power_ups: 'PowerUpSystem',
        levels: 'LevelController',
    ):
        self._skin = skin
        self._power_ups = power_ups
        self._levels = levels

    def move_paddle(self, session: 'Session') -> None:
        session.paddle.update()

    def move_ball(self, session: 'Session') -> None:
        """Advance the ball and resolve its collisions for this tick."""
        session.ball = session.ball.update()
        session.ball = check_wall_collision(session.ball, session.field_width)

        if check_paddle_collision(session.ball, session.paddle):
            self._skin.play_cue(SoundCue.PADDLE_HIT)
            session.ball = session.ball.bounce_vertical()

        brick = find_brick_collision(session.ball, session.bricks, session.config.bricks)
        if brick is not None:
            if not self._hit_brick(session, brick):
                # Deflected by an unbreakable brick: nothing else this tick
                return

        if check_ball_lost(session.ball, session.field_height):
            self._levels.lose_life(session)

    def _hit_brick(self, session: 'Session', brick: 'Brick') -> bool:
        """Resolve a ball-brick hit.

        Returns:
            False if the ball bounced off an unbreakable brick, True if
            the brick took the hit
        """
        self._skin.play_cue(SoundCue.BRICK_HIT)
        ball = session.ball

        if brick.is_unbreakable and not ball.is_fireball:
            session.ball = ball.bounce_vertical()
            return False

        session.bricks.replace(brick.hit(fireball=ball.is_fireball))

        deflection = session.config.deflection
        ball = ball.bounce_vertical().nudge(session.rng.uniform(-deflection, deflection))
        session.score += session.config.points_per_brick
        self._power_ups.maybe_spawn(session, brick)
        session.ball = ball.increase_speed()

        log.trace("Hit %r, score %d", brick, session.score)
        self._levels.check_level_complete(session)
        return True
