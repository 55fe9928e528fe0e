"""Ball entity with per-tick velocity.

The ball moves a fixed number of pixels per tick on each axis and
bounces by reflecting one velocity component. Every operation returns
a new Ball so the session always swaps in a complete state.
"""

from dataclasses import dataclass
import math
from typing import Optional, Tuple


@dataclass
class BallConfig:
    """Ball configuration from config file or defaults."""

    radius: float = 8.0
    base_speed: float = 3.0        # Launch speed on each axis
    max_speed: float = 4.0         # Vertical speed cap for acceleration
    speed_increment: float = 0.1   # Vertical speed grows by this factor per brick
    spawn_offset: float = 30.0     # Spawn height above the field bottom


class Ball:
    """Ball with velocity-based movement and bouncing."""

    def __init__(
        self,
        config: BallConfig,
        x: float,
        y: float,
        dx: float = 0.0,
        dy: float = 0.0,
        max_speed: Optional[float] = None,
        is_fireball: bool = False,
    ):
        """Initialize ball.

        Args:
            config: Ball configuration
            x: Center X position
            y: Center Y position
            dx: X velocity (pixels/tick)
            dy: Y velocity (pixels/tick)
            max_speed: Current speed cap (defaults to config.max_speed)
            is_fireball: Whether fireball mode is active
        """
        self._config = config
        self._x = x
        self._y = y
        self._dx = dx
        self._dy = dy
        self._max_speed = config.max_speed if max_speed is None else max_speed
        self._is_fireball = is_fireball

    @classmethod
    def spawn(
        cls,
        config: BallConfig,
        field_width: float,
        field_height: float,
        max_speed: Optional[float] = None,
        is_fireball: bool = False,
    ) -> 'Ball':
        """Create a ball at the launch point heading up and to the right."""
        return cls(
            config,
            field_width / 2,
            field_height - config.spawn_offset,
            config.base_speed,
            -config.base_speed,
            max_speed,
            is_fireball,
        )

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def dx(self) -> float:
        return self._dx

    @property
    def dy(self) -> float:
        return self._dy

    @property
    def radius(self) -> float:
        return self._config.radius

    @property
    def base_speed(self) -> float:
        return self._config.base_speed

    @property
    def max_speed(self) -> float:
        return self._max_speed

    @property
    def speed_increment(self) -> float:
        return self._config.speed_increment

    @property
    def is_fireball(self) -> bool:
        return self._is_fireball

    @property
    def speed(self) -> float:
        """Magnitude of the velocity vector."""
        return math.hypot(self._dx, self._dy)

    def _replace(self, **changes) -> 'Ball':
        values = {
            'x': self._x,
            'y': self._y,
            'dx': self._dx,
            'dy': self._dy,
            'max_speed': self._max_speed,
            'is_fireball': self._is_fireball,
        }
        values.update(changes)
        return Ball(self._config, **values)

    def update(self) -> 'Ball':
        """Advance one tick along the current velocity."""
        return self._replace(x=self._x + self._dx, y=self._y + self._dy)

    def bounce_horizontal(self) -> 'Ball':
        """Bounce off a vertical surface (reverse X velocity)."""
        return self._replace(dx=-self._dx)

    def bounce_vertical(self) -> 'Ball':
        """Bounce off a horizontal surface (reverse Y velocity)."""
        return self._replace(dy=-self._dy)

    def nudge(self, amount: float) -> 'Ball':
        """Add ``amount`` to the X velocity."""
        return self._replace(dx=self._dx + amount)

    def increase_speed(self) -> 'Ball':
        """Scale vertical speed by (1 + speed_increment) while under the cap.

        The result is not clamped, so one step may overshoot max_speed.
        """
        if abs(self._dy) >= self._max_speed:
            return self
        return self._replace(dy=self._dy * (1 + self._config.speed_increment))

    def raise_max_speed(self, amount: float) -> 'Ball':
        return self._replace(max_speed=self._max_speed + amount)

    def set_fireball(self, active: bool) -> 'Ball':
        return self._replace(is_fireball=active)

    def respawn(self, field_width: float, field_height: float) -> 'Ball':
        """Back to the launch point at base speed.

        Max speed and fireball mode carry over.
        """
        return Ball.spawn(
            self._config, field_width, field_height,
            self._max_speed, self._is_fireball,
        )

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Bounding box (left, top, right, bottom)."""
        r = self._config.radius
        return (self._x - r, self._y - r, self._x + r, self._y + r)
