"""Collision detection for Brickfall.

Handles ball-wall, ball-paddle, ball-brick and power-up-paddle tests.
All tests are axis-aligned; the ball is treated as its centre point
against bricks and as its lower edge against the paddle.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.brick import Brick, BrickGrid, BrickLayout
    from ..entities.paddle import Paddle
    from ..entities.power_up import PowerUp


def check_wall_collision(ball: 'Ball', field_width: float) -> 'Ball':
    """Bounce the ball off the side walls and the ceiling.

    Args:
        ball: Ball after this tick's movement
        field_width: Field width in pixels

    Returns:
        Ball with reflected velocity where an edge crossed a wall
    """
    new_ball = ball

    if ball.x + ball.radius > field_width or ball.x - ball.radius < 0:
        new_ball = new_ball.bounce_horizontal()

    if ball.y - ball.radius < 0:
        new_ball = new_ball.bounce_vertical()

    return new_ball


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """True when the ball centre is over the paddle and its lower edge
    has reached the paddle top.

    Direction of travel is not considered.
    """
    return (paddle.x < ball.x < paddle.right and
            ball.y + ball.radius > paddle.y)


def check_brick_collision(ball: 'Ball', brick: 'Brick', layout: 'BrickLayout') -> bool:
    """True when ``brick`` is solid and strictly contains the ball centre."""
    if not brick.is_solid:
        return False
    x, y, width, height = layout.brick_rect(brick.column, brick.row)
    return x < ball.x < x + width and y < ball.y < y + height


def find_brick_collision(
    ball: 'Ball',
    bricks: 'BrickGrid',
    layout: 'BrickLayout',
) -> Optional['Brick']:
    """First brick in column-major order that the ball centre is inside.

    Only one brick is ever reported per tick, even if the ball overlaps
    several.
    """
    for brick in bricks:
        if check_brick_collision(ball, brick, layout):
            return brick
    return None


def check_ball_lost(ball: 'Ball', field_height: float) -> bool:
    """True when the ball's lower edge has passed the field bottom."""
    return ball.y + ball.radius > field_height


def check_power_up_pickup(power_up: 'PowerUp', paddle: 'Paddle') -> bool:
    """True when an active power-up has reached the paddle within its span."""
    return (power_up.is_active and
            power_up.y + power_up.height >= paddle.y and
            paddle.x <= power_up.x <= paddle.right)
