"""Brick field generator.

Fills a fresh grid, drawing each cell's type independently from the
configured odds. Called at game start, on every level transition and
on restart.
"""

import random
from typing import List, Optional

from brickfall.config import BrickOdds
from brickfall.models import BrickType

from .entities.brick import Brick, BrickGrid, BrickLayout


def draw_brick_type(rng: random.Random, odds: BrickOdds) -> BrickType:
    """Pick a brick type with one uniform draw in [0, 1).

    The draw is compared against running thresholds in the order
    unbreakable, multi; anything above both is normal.
    """
    roll = rng.random()
    if roll < odds.unbreakable:
        return BrickType.UNBREAKABLE
    if roll < odds.unbreakable + odds.multi:
        return BrickType.MULTI
    return BrickType.NORMAL


def generate_brick_grid(
    layout: BrickLayout,
    rng: random.Random,
    odds: Optional[BrickOdds] = None,
) -> BrickGrid:
    """Build a new grid of ``layout.columns`` x ``layout.rows`` bricks.

    Args:
        layout: Grid dimensions
        rng: Random source (seed it for reproducible fields)
        odds: Brick type odds (defaults to BrickOdds())

    Returns:
        BrickGrid indexed [column][row]
    """
    odds = odds or BrickOdds()
    columns: List[List[Brick]] = []
    for column in range(layout.columns):
        columns.append([
            Brick(column, row, draw_brick_type(rng, odds))
            for row in range(layout.rows)
        ])
    return BrickGrid(columns)
