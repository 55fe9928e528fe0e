"""Pytest fixtures shared by the Brickfall tests."""
import os

# Headless pygame for skin and keyboard tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import random
from dataclasses import replace
from typing import List

import pytest

from brickfall.config import GameConfig
from brickfall.game.entities import Ball, Brick, BrickGrid
from brickfall.game.level_controller import LevelController
from brickfall.game.physics.motion import MotionEngine
from brickfall.game.power_ups import PowerUpSystem
from brickfall.game.scheduler import FrameScheduler
from brickfall.game.session import Session
from brickfall.game.skins.base import NullSkin
from brickfall.models import BrickType, SessionPhase


class FakeClock:
    """Manually advanced wall clock."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_grid(types: List[List[BrickType]]) -> BrickGrid:
    """Grid from brick types indexed [column][row]."""
    return BrickGrid([
        [Brick(column, row, brick_type) for row, brick_type in enumerate(column_types)]
        for column, column_types in enumerate(types)
    ])


def single_target_grid(columns: int = 8, rows: int = 5) -> BrickGrid:
    """Every brick unbreakable except a normal one at (0, 0)."""
    types = [[BrickType.UNBREAKABLE] * rows for _ in range(columns)]
    types[0][0] = BrickType.NORMAL
    return make_grid(types)


def ball_at(session: Session, x: float, y: float, dx: float = 0.0, dy: float = 0.0,
            is_fireball: bool = False) -> Ball:
    """Place the session ball at a position with a velocity."""
    session.ball = Ball(session.config.ball, x, y, dx, dy, is_fireball=is_fireball)
    return session.ball


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def config():
    """Default config without power-up drops so tests stay deterministic."""
    config = GameConfig()
    return replace(config, power_ups=replace(config.power_ups, drop_chance=0.0))


@pytest.fixture
def session(config, clock):
    return Session(config, random.Random(1234), clock)


@pytest.fixture
def running_session(session):
    session.phase = SessionPhase.RUNNING
    return session


@pytest.fixture
def skin():
    return NullSkin()


@pytest.fixture
def power_up_system(config, skin):
    return PowerUpSystem(config.power_ups, skin)


@pytest.fixture
def levels(config, skin):
    return LevelController(config.progression, skin)


@pytest.fixture
def motion(skin, power_up_system, levels):
    return MotionEngine(skin, power_up_system, levels)


@pytest.fixture
def scheduler(session, motion, power_up_system, levels, skin):
    return FrameScheduler(session, motion, power_up_system, levels, skin)
