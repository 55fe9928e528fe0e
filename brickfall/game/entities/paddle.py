"""Paddle entity driven by left/right input.

The paddle moves by its horizontal velocity every tick and is clamped
so it always stays fully inside the field.
"""

from dataclasses import dataclass
from typing import Tuple

from brickfall.models import PaddleDirection


@dataclass
class PaddleConfig:
    """Paddle configuration from config file or defaults."""

    width: float = 100.0
    height: float = 10.0
    speed: float = 6.0            # Pixels per tick while a key is held
    bottom_offset: float = 20.0   # Paddle top sits this far above the field bottom


class Paddle:
    """Player paddle. Position is the top-left corner."""

    def __init__(
        self,
        config: PaddleConfig,
        field_width: float,
        field_height: float,
    ):
        """Initialize paddle centred at the bottom of the field.

        Args:
            config: Paddle configuration
            field_width: Field width in pixels
            field_height: Field height in pixels
        """
        self._config = config
        self._field_width = field_width
        self._width = config.width
        self._height = config.height
        self._speed = config.speed
        self._y = field_height - config.bottom_offset
        self._x = field_width / 2 - self._width / 2
        self._dx = 0.0
        self._is_wide = False

    @property
    def x(self) -> float:
        """Left edge X."""
        return self._x

    @property
    def y(self) -> float:
        """Top edge Y."""
        return self._y

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def dx(self) -> float:
        """Horizontal velocity (pixels per tick)."""
        return self._dx

    @property
    def is_wide(self) -> bool:
        """True while the wide-paddle power-up is in effect."""
        return self._is_wide

    @property
    def right(self) -> float:
        return self._x + self._width

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._width, self._height)

    def set_direction(self, direction: PaddleDirection) -> None:
        """Set velocity from an input direction.

        The current speed is sampled now, so a speed increase only
        takes effect on the next key press.
        """
        if direction == PaddleDirection.LEFT:
            self._dx = -self._speed
        elif direction == PaddleDirection.RIGHT:
            self._dx = self._speed
        else:
            self._dx = 0.0

    def update(self) -> None:
        """Move one tick and clamp to the field."""
        self._x += self._dx
        if self._x < 0:
            self._x = 0.0
        if self._x + self._width > self._field_width:
            self._x = self._field_width - self._width

    def recenter(self) -> None:
        """Move the paddle back to the middle of the field."""
        self._x = self._field_width / 2 - self._width / 2

    def widen(self, amount: float) -> None:
        """Grow by ``amount`` and enter wide mode."""
        self._width += amount
        self._is_wide = True

    def narrow(self, amount: float) -> None:
        """Shrink by ``amount`` and leave wide mode."""
        self._width -= amount
        self._is_wide = False

    def increase_speed(self, amount: float) -> None:
        self._speed += amount
