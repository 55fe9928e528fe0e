"""Tests for collision detection."""

from brickfall.game.entities import (
    Ball,
    BallConfig,
    Brick,
    BrickLayout,
    Paddle,
    PaddleConfig,
    PowerUp,
)
from brickfall.game.physics import (
    check_ball_lost,
    check_brick_collision,
    check_paddle_collision,
    check_power_up_pickup,
    check_wall_collision,
    find_brick_collision,
)
from brickfall.models import BrickType, PowerUpType

from tests.conftest import make_grid


def _ball(x, y, dx=3.0, dy=-3.0):
    return Ball(BallConfig(), x, y, dx, dy)


def _paddle():
    return Paddle(PaddleConfig(), 800, 600)  # x=350..450, y=580


class TestWallCollision:
    """Tests for check_wall_collision."""

    def test_right_wall(self):
        ball = check_wall_collision(_ball(795, 300), 800)
        assert ball.dx == -3

    def test_left_wall(self):
        ball = check_wall_collision(_ball(5, 300, dx=-3), 800)
        assert ball.dx == 3

    def test_touching_wall_is_not_a_hit(self):
        """Edge exactly on the wall does not bounce."""
        ball = check_wall_collision(_ball(792, 300), 800)
        assert ball.dx == 3

    def test_ceiling(self):
        ball = check_wall_collision(_ball(400, 5), 800)
        assert ball.dy == 3
        assert ball.dx == 3

    def test_corner_flips_both(self):
        ball = check_wall_collision(_ball(795, 5), 800)
        assert (ball.dx, ball.dy) == (-3, 3)

    def test_open_field(self):
        ball = _ball(400, 300)
        assert check_wall_collision(ball, 800) is ball


class TestPaddleCollision:
    """Tests for check_paddle_collision."""

    def test_hit(self):
        assert check_paddle_collision(_ball(400, 573), _paddle())

    def test_above_paddle(self):
        assert not check_paddle_collision(_ball(400, 572), _paddle())

    def test_paddle_edges_are_excluded(self):
        assert not check_paddle_collision(_ball(350, 575), _paddle())
        assert not check_paddle_collision(_ball(450, 575), _paddle())

    def test_direction_not_considered(self):
        """An upward-moving ball below the paddle top still counts."""
        assert check_paddle_collision(_ball(400, 585, dy=-3), _paddle())


class TestBrickCollision:
    """Tests for ball-brick detection."""

    def test_centre_inside(self):
        assert check_brick_collision(_ball(70, 50), Brick(0, 0, BrickType.NORMAL), BrickLayout())

    def test_edge_is_outside(self):
        layout = BrickLayout()
        brick = Brick(0, 0, BrickType.NORMAL)
        assert not check_brick_collision(_ball(35, 50), brick, layout)
        assert not check_brick_collision(_ball(70, 40), brick, layout)

    def test_broken_brick_is_ignored(self):
        brick = Brick(0, 0, BrickType.NORMAL).hit()
        assert not check_brick_collision(_ball(70, 50), brick, BrickLayout())

    def test_fireballed_unbreakable_still_collides(self):
        brick = Brick(0, 0, BrickType.UNBREAKABLE).hit(fireball=True)
        assert check_brick_collision(_ball(70, 50), brick, BrickLayout())

    def test_find_returns_matching_brick(self):
        grid = make_grid([[BrickType.NORMAL] * 2, [BrickType.MULTI] * 2])
        brick = find_brick_collision(_ball(155, 80), grid, BrickLayout())
        assert brick.grid_position == (1, 1)

    def test_find_none(self):
        grid = make_grid([[BrickType.NORMAL]])
        assert find_brick_collision(_ball(400, 300), grid, BrickLayout()) is None

    def test_find_first_in_column_major_order(self):
        """Overlapping cells resolve to the earliest column."""
        layout = BrickLayout(padding=-20.0)
        grid = make_grid([[BrickType.NORMAL], [BrickType.NORMAL]])
        # Column 0 spans x 35..110, column 1 spans x 90..165
        brick = find_brick_collision(_ball(100, 50), grid, layout)
        assert brick.grid_position == (0, 0)


class TestBallLost:
    """Tests for check_ball_lost."""

    def test_lost(self):
        assert check_ball_lost(_ball(100, 593), 600)

    def test_touching_bottom_is_not_lost(self):
        assert not check_ball_lost(_ball(100, 592), 600)


class TestPowerUpPickup:
    """Tests for check_power_up_pickup."""

    def test_pickup_at_paddle_top(self):
        assert check_power_up_pickup(PowerUp(PowerUpType.EXTRA_LIFE, 400, 568), _paddle())

    def test_above_paddle(self):
        assert not check_power_up_pickup(PowerUp(PowerUpType.EXTRA_LIFE, 400, 567), _paddle())

    def test_paddle_edges_are_inclusive(self):
        assert check_power_up_pickup(PowerUp(PowerUpType.FIREBALL, 350, 570), _paddle())
        assert check_power_up_pickup(PowerUp(PowerUpType.FIREBALL, 450, 570), _paddle())

    def test_outside_span(self):
        assert not check_power_up_pickup(PowerUp(PowerUpType.FIREBALL, 451, 570), _paddle())

    def test_inactive_is_ignored(self):
        power_up = PowerUp(PowerUpType.WIDE_PADDLE, 400, 570)
        power_up.deactivate()
        assert not check_power_up_pickup(power_up, _paddle())
