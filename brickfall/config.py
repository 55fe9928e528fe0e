"""Configuration for Brickfall.

Contains field dimensions, physics constants, brick odds, power-up and
level progression tuning, difficulty presets, colors, and the YAML
config file loader.
"""

import os
from dataclasses import dataclass, field as dc_field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml
from dotenv import find_dotenv, load_dotenv

from brickfall.game.entities.ball import BallConfig
from brickfall.game.entities.brick import BrickLayout
from brickfall.game.entities.paddle import PaddleConfig

# Load .env from the working directory (BRICKFALL_* overrides)
load_dotenv(find_dotenv(usecwd=True))


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Field dimensions
FIELD_WIDTH: int = _get_int("BRICKFALL_FIELD_WIDTH", 800)
FIELD_HEIGHT: int = _get_int("BRICKFALL_FIELD_HEIGHT", 600)

# Simulation cadence
TICK_RATE: float = _get_float("BRICKFALL_TICK_RATE", 60.0)  # Ticks per second
MAX_TICKS_PER_FRAME: int = 5     # Backlog cap after a slow host frame

# Scoring and starting state
POINTS_PER_BRICK: int = 10
STARTING_LIVES: int = _get_int("BRICKFALL_LIVES", 3)

# Brick type odds (cumulative thresholds are built from these in order)
UNBREAKABLE_CHANCE: float = 0.10
MULTI_CHANCE: float = 0.15

# Power-ups
POWER_UP_DROP_CHANCE: float = 0.4
POWER_UP_FALL_SPEED: float = 2.0     # Pixels per tick
POWER_UP_SIZE: float = 12.0
POWER_UP_DURATION: float = 10.0      # Seconds of wall-clock time
WIDE_PADDLE_BONUS: float = 40.0

# Level progression
BALL_MAX_SPEED_STEP: float = 0.5
PADDLE_SPEED_STEP: float = 0.5

# Random horizontal kick applied when a brick breaks
BRICK_DEFLECTION: float = 0.1

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (17, 17, 17)
TEXT_COLOR: Tuple[int, int, int] = (255, 255, 255)
PADDLE_COLOR: Tuple[int, int, int] = (0, 255, 255)
BALL_COLOR: Tuple[int, int, int] = (255, 110, 199)
FIREBALL_COLOR: Tuple[int, int, int] = (255, 69, 0)
LIFE_COLOR: Tuple[int, int, int] = (255, 0, 0)
BRICK_BORDER_COLOR: Tuple[int, int, int] = (255, 255, 255)

BRICK_COLORS: Dict[str, Tuple[int, int, int]] = {
    'unbreakable': (68, 68, 68),
    'multi': (243, 156, 18),
}

POWER_UP_COLORS: Dict[str, Tuple[int, int, int]] = {
    'life': (255, 0, 0),
    'wide': (0, 255, 0),
    'fireball': (255, 165, 0),
}


class ConfigError(ValueError):
    """Raised when a config file holds invalid values."""


@dataclass
class FieldConfig:
    """Playable area in pixels."""

    width: float = float(FIELD_WIDTH)
    height: float = float(FIELD_HEIGHT)


@dataclass
class BrickOdds:
    """Probability of each non-normal brick type; the rest are normal."""

    unbreakable: float = UNBREAKABLE_CHANCE
    multi: float = MULTI_CHANCE

    @property
    def normal(self) -> float:
        return 1.0 - self.unbreakable - self.multi


@dataclass
class PowerUpConfig:
    """Power-up drop and effect tuning."""

    drop_chance: float = POWER_UP_DROP_CHANCE
    fall_speed: float = POWER_UP_FALL_SPEED
    size: float = POWER_UP_SIZE
    duration: float = POWER_UP_DURATION
    wide_bonus: float = WIDE_PADDLE_BONUS


@dataclass
class LevelProgression:
    """Difficulty increase applied on each level transition."""

    ball_max_speed_step: float = BALL_MAX_SPEED_STEP
    paddle_speed_step: float = PADDLE_SPEED_STEP


@dataclass
class GameConfig:
    """Everything needed to build a session."""

    field: FieldConfig = dc_field(default_factory=FieldConfig)
    paddle: PaddleConfig = dc_field(default_factory=PaddleConfig)
    ball: BallConfig = dc_field(default_factory=BallConfig)
    bricks: BrickLayout = dc_field(default_factory=BrickLayout)
    odds: BrickOdds = dc_field(default_factory=BrickOdds)
    power_ups: PowerUpConfig = dc_field(default_factory=PowerUpConfig)
    progression: LevelProgression = dc_field(default_factory=LevelProgression)
    lives: int = STARTING_LIVES
    points_per_brick: int = POINTS_PER_BRICK
    deflection: float = BRICK_DEFLECTION
    tick_rate: float = TICK_RATE


@dataclass
class DifficultyPreset:
    """Ball and paddle tuning for a skill level.

    - relaxed: slower ball, wider paddle
    - classic: the arcade defaults
    - frantic: fast ball, narrow paddle
    """

    name: str
    ball_speed: float       # Base ball speed in pixels/tick
    ball_max_speed: float   # Starting speed cap
    paddle_speed: float     # Paddle movement speed
    paddle_width: float     # Paddle width (wider = easier)


DIFFICULTY_PRESETS: Dict[str, DifficultyPreset] = {
    'relaxed': DifficultyPreset(
        name='relaxed',
        ball_speed=2.5,
        ball_max_speed=3.5,
        paddle_speed=6.0,
        paddle_width=130.0,
    ),
    'classic': DifficultyPreset(
        name='classic',
        ball_speed=3.0,
        ball_max_speed=4.0,
        paddle_speed=6.0,
        paddle_width=100.0,
    ),
    'frantic': DifficultyPreset(
        name='frantic',
        ball_speed=4.0,
        ball_max_speed=5.5,
        paddle_speed=8.0,
        paddle_width=80.0,
    ),
}


def get_difficulty_preset(name: str) -> DifficultyPreset:
    """Get difficulty preset by name, with fallback to classic."""
    return DIFFICULTY_PRESETS.get(name, DIFFICULTY_PRESETS['classic'])


def apply_difficulty(config: GameConfig, name: str) -> GameConfig:
    """Return a copy of ``config`` tuned to the named difficulty."""
    preset = get_difficulty_preset(name)
    return replace(
        config,
        ball=replace(
            config.ball,
            base_speed=preset.ball_speed,
            max_speed=preset.ball_max_speed,
        ),
        paddle=replace(
            config.paddle,
            speed=preset.paddle_speed,
            width=preset.paddle_width,
        ),
    )


_SECTIONS = {
    'field': FieldConfig,
    'paddle': PaddleConfig,
    'ball': BallConfig,
    'bricks': BrickLayout,
    'odds': BrickOdds,
    'power_ups': PowerUpConfig,
    'progression': LevelProgression,
}

_SCALARS = ('lives', 'points_per_brick', 'deflection', 'tick_rate')

# Float slack when checking that brick odds sum to at most 1
ODDS_TOLERANCE = 1e-9


def _parse_section(name: str, cls: type, data: Any) -> Any:
    if not isinstance(data, dict):
        raise ConfigError(f"Section '{name}' must be a mapping, got {type(data).__name__}")

    known = {f.name: f for f in fields(cls)}
    values: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            raise ConfigError(f"Unknown key '{name}.{key}'")
        default = known[key].default
        if isinstance(default, int) and not isinstance(default, bool):
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigError(f"'{name}.{key}' must be an integer, got {value!r}")
        elif isinstance(default, float):
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ConfigError(f"'{name}.{key}' must be a number, got {value!r}")
            value = float(value)
        values[key] = value
    return cls(**values)


def _parse_scalar(name: str, value: Any) -> Any:
    if isinstance(value, bool):
        raise ConfigError(f"'{name}' must be a number, got {value!r}")
    if name in ('lives', 'points_per_brick'):
        if not isinstance(value, int):
            raise ConfigError(f"'{name}' must be an integer, got {value!r}")
        return value
    if not isinstance(value, (int, float)):
        raise ConfigError(f"'{name}' must be a number, got {value!r}")
    return float(value)


def validate_config(config: GameConfig) -> None:
    """Check cross-field constraints.

    Raises:
        ConfigError: If any value is out of range
    """
    if config.field.width <= 0 or config.field.height <= 0:
        raise ConfigError("Field dimensions must be positive")
    if config.bricks.columns < 1 or config.bricks.rows < 1:
        raise ConfigError("Brick grid needs at least one column and one row")
    if config.bricks.brick_width <= 0 or config.bricks.brick_height <= 0:
        raise ConfigError("Brick dimensions must be positive")
    odds = config.odds
    if (odds.unbreakable < 0 or odds.multi < 0 or
            odds.unbreakable + odds.multi > 1.0 + ODDS_TOLERANCE):
        raise ConfigError("Brick odds must be non-negative and sum to at most 1")
    if not 0.0 <= config.power_ups.drop_chance <= 1.0:
        raise ConfigError("power_ups.drop_chance must be within [0, 1]")
    if config.paddle.width <= 0 or config.paddle.width > config.field.width:
        raise ConfigError("Paddle width must be positive and fit the field")
    if config.paddle.height <= 0:
        raise ConfigError("paddle.height must be positive")
    if config.ball.radius <= 0:
        raise ConfigError("ball.radius must be positive")
    if config.power_ups.size <= 0:
        raise ConfigError("power_ups.size must be positive")
    if config.lives < 1:
        raise ConfigError("lives must be at least 1")
    if config.tick_rate <= 0:
        raise ConfigError("tick_rate must be positive")


def parse_game_config(data: Dict[str, Any]) -> GameConfig:
    """Build a GameConfig from a parsed YAML mapping.

    A ``difficulty`` key applies a preset first; explicit sections then
    override individual values.
    """
    config = GameConfig()
    difficulty = data.get('difficulty')
    if difficulty is not None:
        if difficulty not in DIFFICULTY_PRESETS:
            raise ConfigError(f"Unknown difficulty '{difficulty}'")
        config = apply_difficulty(config, difficulty)

    for key in data:
        if key != 'difficulty' and key not in _SECTIONS and key not in _SCALARS:
            raise ConfigError(f"Unknown config section '{key}'")

    overrides: Dict[str, Any] = {}
    for name, cls in _SECTIONS.items():
        if name in data:
            section = _parse_section(name, cls, data[name])
            # Preset values survive unless the file names them explicitly
            base = getattr(config, name)
            overrides[name] = replace(base, **{k: getattr(section, k) for k in data[name]})
    for name in _SCALARS:
        if name in data:
            overrides[name] = _parse_scalar(name, data[name])

    config = replace(config, **overrides)
    validate_config(config)
    return config


def load_game_config(
    path: Union[str, Path],
    difficulty: Optional[str] = None,
) -> GameConfig:
    """Load a YAML config file.

    Args:
        path: Path to the YAML file
        difficulty: Preset name overriding the file's own ``difficulty``

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty or not a mapping
        ConfigError: If any value is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        raise ValueError(f"Empty config file: {path}")
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    if difficulty is not None:
        data = {**data, 'difficulty': difficulty}
    return parse_game_config(data)
