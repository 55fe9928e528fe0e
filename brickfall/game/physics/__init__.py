"""Brickfall physics: collision tests and the motion engine."""

from .collision import (
    check_wall_collision,
    check_paddle_collision,
    check_brick_collision,
    find_brick_collision,
    check_ball_lost,
    check_power_up_pickup,
)

__all__ = [
    'check_wall_collision',
    'check_paddle_collision',
    'check_brick_collision',
    'find_brick_collision',
    'check_ball_lost',
    'check_power_up_pickup',
]
