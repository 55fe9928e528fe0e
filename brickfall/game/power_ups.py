"""Power-up system.

Spawns power-ups from broken bricks, moves them, detects pickups,
applies effects and reverts timed effects once their expiry time has
passed.

Timed effects are stored on the session as ExpiringEffect records with
an absolute expiry time and are checked on the simulation thread, so a
revert always sees the latest state. Pausing does not cancel them.
"""

from typing import Optional

from brickfall.config import PowerUpConfig
from brickfall.logging import get_logger
from brickfall.models import PowerUpType, SoundCue

from .entities import Brick, PowerUp
from .physics.collision import check_power_up_pickup
from .session import ExpiringEffect, Session
from .skins.base import BrickBreakerSkin

log = get_logger('power_ups')


class PowerUpSystem:
    """Lifecycle of falling power-ups and their effects.

    Args:
        config: Drop chance, fall speed, size, duration, wide bonus
        skin: Receives the pickup cue
    """

    def __init__(self, config: PowerUpConfig, skin: BrickBreakerSkin):
        self._config = config
        self._skin = skin

    def maybe_spawn(self, session: Session, brick: Brick) -> Optional[PowerUp]:
        """Roll the drop chance for a broken brick.

        The power-up appears at the horizontal centre of the brick's top
        edge with a uniformly chosen type.
        """
        if session.rng.random() >= self._config.drop_chance:
            return None

        power_up_type = session.rng.choice(list(PowerUpType))
        rect = session.brick_rect(brick.column, brick.row)
        power_up = PowerUp(
            power_up_type,
            rect.x + rect.width / 2,
            rect.y,
            self._config.size,
        )
        session.power_ups.append(power_up)
        log.debug("Dropped %s at (%.1f, %.1f)", power_up_type.value, power_up.x, power_up.y)
        return power_up

    def move(self, session: Session) -> None:
        """Drop every active power-up by one step."""
        for power_up in session.power_ups:
            power_up.fall(self._config.fall_speed)

    def collect(self, session: Session) -> int:
        """Apply every power-up that has reached the paddle.

        Returns:
            Number of power-ups collected this tick
        """
        collected = 0
        for power_up in session.power_ups:
            if not check_power_up_pickup(power_up, session.paddle):
                continue
            self._skin.play_cue(SoundCue.POWERUP_PICKUP)
            power_up.deactivate()
            self.apply(session, power_up.power_up_type)
            collected += 1
        return collected

    def apply(self, session: Session, power_up_type: PowerUpType) -> None:
        """Apply one effect.

        Wide paddle is skipped while already wide. Fireball has no such
        guard: each pickup schedules its own revert, and the earliest
        one clears the flag even if a later pickup is still pending.
        """
        now = session.now()
        duration = self._config.duration

        if power_up_type == PowerUpType.WIDE_PADDLE:
            if session.paddle.is_wide:
                log.debug("Wide paddle ignored, already wide")
                return
            session.paddle.widen(self._config.wide_bonus)
            session.effects.append(ExpiringEffect(power_up_type, now + duration))
        elif power_up_type == PowerUpType.EXTRA_LIFE:
            session.lives += 1
        elif power_up_type == PowerUpType.FIREBALL:
            session.ball = session.ball.set_fireball(True)
            session.effects.append(ExpiringEffect(power_up_type, now + duration))

        log.info("Power-up %s applied (lives=%d, width=%.0f, fireball=%s)",
                 power_up_type.value, session.lives, session.paddle.width,
                 session.ball.is_fireball)

    def cleanup(self, session: Session) -> None:
        """Drop power-ups that were collected or fell out of the field."""
        session.power_ups = [
            p for p in session.power_ups
            if p.is_active and p.y < session.field_height
        ]

    def expire_effects(self, session: Session) -> int:
        """Revert every effect whose expiry time has passed.

        Returns:
            Number of effects reverted
        """
        if not session.effects:
            return 0

        now = session.now()
        due = sorted(
            (e for e in session.effects if e.expires_at <= now),
            key=lambda e: e.expires_at,
        )
        if not due:
            return 0

        session.effects = [e for e in session.effects if e.expires_at > now]
        for effect in due:
            if effect.power_up_type == PowerUpType.WIDE_PADDLE:
                session.paddle.narrow(self._config.wide_bonus)
            elif effect.power_up_type == PowerUpType.FIREBALL:
                session.ball = session.ball.set_fireball(False)
            log.debug("Effect %s expired", effect.power_up_type.value)
        return len(due)
