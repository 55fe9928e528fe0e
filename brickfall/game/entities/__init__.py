"""Brickfall game entities."""

from .paddle import Paddle, PaddleConfig
from .ball import Ball, BallConfig
from .brick import Brick, BrickGrid, BrickLayout, INITIAL_STATUS, UNBREAKABLE_STATUS
from .power_up import PowerUp

__all__ = [
    'Paddle', 'PaddleConfig',
    'Ball', 'BallConfig',
    'Brick', 'BrickGrid', 'BrickLayout', 'INITIAL_STATUS', 'UNBREAKABLE_STATUS',
    'PowerUp',
]
