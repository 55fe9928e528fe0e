"""Falling power-up dropped by a broken brick."""

from brickfall.models import PowerUpType


class PowerUp:
    """A power-up capsule.

    Position is the horizontal centre and the top edge, which is where
    it leaves the brick that dropped it.
    """

    def __init__(
        self,
        power_up_type: PowerUpType,
        x: float,
        y: float,
        size: float = 12.0,
    ):
        self._type = power_up_type
        self._x = x
        self._y = y
        self._size = size
        self._active = True

    @property
    def power_up_type(self) -> PowerUpType:
        return self._type

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def width(self) -> float:
        return self._size

    @property
    def height(self) -> float:
        return self._size

    @property
    def is_active(self) -> bool:
        return self._active

    def fall(self, step: float) -> None:
        """Move down by ``step`` pixels if still active."""
        if self._active:
            self._y += step

    def deactivate(self) -> None:
        self._active = False

    def __repr__(self) -> str:
        return (f"PowerUp(type={self._type.value}, x={self._x:.1f}, "
                f"y={self._y:.1f}, active={self._active})")
