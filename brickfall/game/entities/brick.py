"""Brick entity and the brick grid.

A brick only knows its grid indices. Its rectangle on screen is always
computed from the indices and a BrickLayout, so it never drifts out of
sync with the grid.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from brickfall.models import BrickType


UNBREAKABLE_STATUS = -1

INITIAL_STATUS: Dict[BrickType, int] = {
    BrickType.NORMAL: 1,
    BrickType.MULTI: 2,
    BrickType.UNBREAKABLE: UNBREAKABLE_STATUS,
}


@dataclass
class BrickLayout:
    """Grid dimensions and spacing."""

    columns: int = 8
    rows: int = 5
    brick_width: float = 75.0
    brick_height: float = 20.0
    padding: float = 10.0
    offset_top: float = 40.0
    offset_left: float = 35.0

    def brick_rect(self, column: int, row: int) -> Tuple[float, float, float, float]:
        """Rectangle (x, y, width, height) of the cell at (column, row)."""
        x = column * (self.brick_width + self.padding) + self.offset_left
        y = row * (self.brick_height + self.padding) + self.offset_top
        return (x, y, self.brick_width, self.brick_height)


class Brick:
    """A single brick.

    Status is the number of hits left. Unbreakable bricks hold the
    UNBREAKABLE_STATUS sentinel, which normal play never changes.
    """

    def __init__(
        self,
        column: int,
        row: int,
        brick_type: BrickType,
        status: Optional[int] = None,
    ):
        self._column = column
        self._row = row
        self._brick_type = brick_type
        self._status = INITIAL_STATUS[brick_type] if status is None else status

    @property
    def column(self) -> int:
        return self._column

    @property
    def row(self) -> int:
        return self._row

    @property
    def grid_position(self) -> Tuple[int, int]:
        """(column, row) in the grid."""
        return (self._column, self._row)

    @property
    def brick_type(self) -> BrickType:
        return self._brick_type

    @property
    def status(self) -> int:
        """Hits remaining (UNBREAKABLE_STATUS for unbreakable bricks)."""
        return self._status

    @property
    def is_unbreakable(self) -> bool:
        return self._brick_type == BrickType.UNBREAKABLE

    @property
    def is_active(self) -> bool:
        """Has hit points left."""
        return self._status > 0

    @property
    def is_solid(self) -> bool:
        """Can collide with the ball and is drawn.

        Unbreakable bricks stay solid even after a fireball sets their
        status to 0.
        """
        return self.is_active or self.is_unbreakable

    @property
    def is_cleared(self) -> bool:
        """Counts as done for level completion."""
        return self.is_unbreakable or self._status == 0

    def hit(self, fireball: bool = False) -> 'Brick':
        """Apply one hit.

        Args:
            fireball: Whether the ball is in fireball mode

        Returns:
            New Brick with updated status
        """
        if self.is_unbreakable and not fireball:
            return self
        if self._brick_type == BrickType.MULTI:
            status = self._status - 1
        else:
            status = 0
        return Brick(self._column, self._row, self._brick_type, status)

    def __repr__(self) -> str:
        return (f"Brick(column={self._column}, row={self._row}, "
                f"type={self._brick_type.value}, status={self._status})")


class BrickGrid:
    """Bricks indexed [column][row].

    Iteration is column-major: every row of column 0, then column 1, ...
    """

    def __init__(self, columns: List[List[Brick]]):
        self._columns = columns

    @property
    def column_count(self) -> int:
        return len(self._columns)

    @property
    def row_count(self) -> int:
        return len(self._columns[0]) if self._columns else 0

    def get(self, column: int, row: int) -> Brick:
        return self._columns[column][row]

    def replace(self, brick: Brick) -> None:
        """Store ``brick`` in the cell named by its own grid position."""
        self._columns[brick.column][brick.row] = brick

    def __iter__(self) -> Iterator[Brick]:
        for column in self._columns:
            yield from column

    def __len__(self) -> int:
        return sum(len(column) for column in self._columns)

    def all_cleared(self) -> bool:
        """True when every breakable brick is down to status 0."""
        return all(brick.is_cleared for brick in self)

    def remaining(self) -> int:
        """Number of breakable bricks still standing."""
        return sum(1 for brick in self if not brick.is_cleared)
