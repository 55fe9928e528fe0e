"""Tests for the motion engine: ball movement and collision response."""

from dataclasses import replace

import pytest

from brickfall.game.physics.motion import MotionEngine
from brickfall.game.power_ups import PowerUpSystem
from brickfall.models import BrickType, PaddleDirection, SessionPhase, SoundCue

from tests.conftest import ball_at, make_grid, single_target_grid


class TestMovePaddle:
    """Tests for paddle movement."""

    def test_moves_with_direction(self, running_session, motion):
        running_session.paddle.set_direction(PaddleDirection.LEFT)
        motion.move_paddle(running_session)
        assert running_session.paddle.x == 344


class TestMoveBall:
    """Tests for the per-tick ball step."""

    def test_free_flight(self, running_session, motion, skin):
        ball_at(running_session, 400, 300, 3, -3)
        motion.move_ball(running_session)
        assert (running_session.ball.x, running_session.ball.y) == (403, 297)
        assert skin.cues == []

    def test_wall_bounce(self, running_session, motion):
        ball_at(running_session, 790, 300, 3, -3)
        motion.move_ball(running_session)
        assert running_session.ball.dx == -3

    def test_paddle_bounce(self, running_session, motion, skin):
        ball_at(running_session, 400, 570, 0, 3)
        motion.move_ball(running_session)
        assert running_session.ball.dy == -3
        assert skin.cues == [SoundCue.PADDLE_HIT]

    def test_ball_lost(self, running_session, motion, skin):
        running_session.paddle.set_direction(PaddleDirection.LEFT)
        running_session.paddle.update()
        ball_at(running_session, 100, 590, 0, 3)

        motion.move_ball(running_session)

        assert running_session.lives == 2
        assert SoundCue.LIFE_LOST in skin.cues
        assert (running_session.ball.x, running_session.ball.y) == (400, 570)
        assert running_session.paddle.x == 350


class TestBrickHits:
    """Tests for ball-brick collision response."""

    def test_normal_brick(self, running_session, motion, skin):
        running_session.bricks = make_grid([[BrickType.NORMAL] * 5] * 8)
        ball_at(running_session, 70, 53, 0, -3)

        motion.move_ball(running_session)

        assert running_session.bricks.get(0, 0).status == 0
        assert running_session.score == 10
        assert running_session.ball.dy == pytest.approx(3.3)
        assert abs(running_session.ball.dx) <= 0.1
        assert skin.cues == [SoundCue.BRICK_HIT]

    def test_multi_brick(self, running_session, motion):
        running_session.bricks = make_grid([[BrickType.MULTI] * 5] * 8)
        ball_at(running_session, 70, 53, 0, -3)

        motion.move_ball(running_session)

        assert running_session.bricks.get(0, 0).status == 1
        assert running_session.score == 10

    def test_unbreakable_brick_only_deflects(self, running_session, motion, skin):
        running_session.bricks = make_grid([[BrickType.UNBREAKABLE] * 5] * 8)
        ball_at(running_session, 70, 53, 0, -3)

        motion.move_ball(running_session)

        assert running_session.bricks.get(0, 0).status == -1
        assert running_session.score == 0
        assert running_session.ball.dy == 3
        assert running_session.ball.dx == 0
        assert skin.cues == [SoundCue.BRICK_HIT]

    def test_fireball_breaks_unbreakable(self, running_session, motion):
        running_session.bricks = make_grid(
            [[BrickType.UNBREAKABLE] * 5] * 7 + [[BrickType.NORMAL] * 5]
        )
        ball_at(running_session, 70, 53, 0, -3, is_fireball=True)

        motion.move_ball(running_session)

        brick = running_session.bricks.get(0, 0)
        assert brick.status == 0
        assert brick.is_solid
        assert running_session.score == 10

    def test_one_brick_per_tick(self, running_session, motion):
        running_session.config = replace(
            running_session.config,
            bricks=replace(running_session.config.bricks, padding=-20.0),
        )
        running_session.bricks = make_grid([[BrickType.NORMAL], [BrickType.NORMAL]])
        ball_at(running_session, 100, 53, 0, -3)

        motion.move_ball(running_session)

        assert running_session.bricks.get(0, 0).status == 0
        assert running_session.bricks.get(1, 0).status == 1

    def test_broken_brick_may_drop_power_up(self, running_session, skin, levels, config):
        power_ups = PowerUpSystem(replace(config.power_ups, drop_chance=1.0), skin)
        motion = MotionEngine(skin, power_ups, levels)
        running_session.bricks = make_grid([[BrickType.NORMAL] * 5] * 8)
        ball_at(running_session, 70, 53, 0, -3)

        motion.move_ball(running_session)

        assert len(running_session.power_ups) == 1
        assert running_session.power_ups[0].x == 72.5
        assert running_session.power_ups[0].y == 40

    def test_last_brick_completes_level(self, running_session, motion, skin):
        running_session.bricks = single_target_grid()
        ball_at(running_session, 70, 53, 0, -3)

        motion.move_ball(running_session)

        assert running_session.phase == SessionPhase.LEVEL_COMPLETE
        assert running_session.level == 2
        assert running_session.score == 0
        assert SoundCue.LEVEL_UP in skin.cues
