"""Tests for BrickBreakerMode and the command line entry point."""

from unittest.mock import Mock

import pytest

from brickfall.game.skins import NullSkin
from brickfall.game_mode import BrickBreakerMode, TITLE_MESSAGE
from brickfall.input import InputAction, InputEvent
from brickfall.main import build_parser, game_kwargs, main
from brickfall.models import SessionPhase

from tests.conftest import FakeClock, ball_at


def _events(*actions):
    return [InputEvent(action=action, timestamp=0) for action in actions]


@pytest.fixture
def game():
    return BrickBreakerMode(skin=NullSkin(), seed=7, clock=FakeClock())


class TestMetadata:
    """Tests for class-level game metadata."""

    def test_info(self):
        info = BrickBreakerMode.get_info()
        assert info['name'] == "Brickfall"
        assert info['version'] == "1.0.0"

    def test_arguments_include_base(self):
        names = [arg['name'] for arg in BrickBreakerMode.get_arguments()]
        assert names == ['--difficulty', '--config', '--seed', '--mute', '--log-level']


class TestConstruction:
    """Tests for building a game."""

    def test_starts_on_title_screen(self, game):
        assert game.state == SessionPhase.READY
        assert game.skin.overlay == TITLE_MESSAGE
        assert game.skin.snapshot is not None
        assert game.get_score() == 0

    def test_difficulty(self):
        game = BrickBreakerMode(difficulty='frantic', skin=NullSkin())
        assert game.session.paddle.width == 80

    def test_field_size_override(self):
        game = BrickBreakerMode(width=1000, height=700, skin=NullSkin())
        assert game.session.ball.x == 500
        assert game.session.ball.y == 670

    def test_field_too_small_for_paddle(self):
        from brickfall.config import ConfigError

        with pytest.raises(ConfigError):
            BrickBreakerMode(width=50, skin=NullSkin())

    def test_seed_repeats_field(self):
        a = BrickBreakerMode(seed=3, skin=NullSkin())
        b = BrickBreakerMode(seed=3, skin=NullSkin())
        assert [x.brick_type for x in a.session.bricks] == \
            [y.brick_type for y in b.session.bricks]


class TestInput:
    """Tests for translating input events into game signals."""

    def test_confirm_starts(self, game):
        game.handle_input(_events(InputAction.CONFIRM))
        assert game.state == SessionPhase.RUNNING
        assert game.skin.overlay is None

    def test_paddle_direction(self, game):
        game.handle_input(_events(InputAction.MOVE_RIGHT))
        assert game.session.paddle.dx == 6
        game.handle_input(_events(InputAction.STOP))
        assert game.session.paddle.dx == 0

    def test_pause_and_confirm_resume(self, game):
        game.handle_input(_events(InputAction.CONFIRM, InputAction.PAUSE))
        assert game.state == SessionPhase.PAUSED
        game.handle_input(_events(InputAction.CONFIRM))
        assert game.state == SessionPhase.RUNNING

    def test_confirm_continues_level(self, game):
        game.session.phase = SessionPhase.LEVEL_COMPLETE
        game.handle_input(_events(InputAction.CONFIRM))
        assert game.state == SessionPhase.RUNNING

    def test_confirm_restarts_after_game_over(self, game):
        game.start_game()
        game.session.lives = 1
        game.session.score = 30
        ball_at(game.session, 100, 590, 0, 3)
        game.update(1.0)
        assert game.state == SessionPhase.GAME_OVER

        game.handle_input(_events(InputAction.CONFIRM))

        assert game.state == SessionPhase.RUNNING
        assert game.session.lives == 3
        assert game.get_score() == 0

    def test_restart_key(self, game):
        game.start_game()
        game.session.level = 3
        game.handle_input(_events(InputAction.RESTART))
        assert game.state == SessionPhase.RUNNING
        assert game.session.level == 1

    def test_quit(self, game):
        game.handle_input(_events(InputAction.QUIT))
        assert game.quit_requested
        assert game.scheduler.is_stopped


class TestLoop:
    """Tests for update, render and reset."""

    def test_update_advances_running_game(self, game):
        game.start_game()
        game.update(game.scheduler.tick_interval * 1.5)
        assert game.scheduler.tick_count == 1

    def test_update_before_start_does_nothing(self, game):
        game.update(1.0)
        assert game.scheduler.tick_count == 0

    def test_render_delegates_to_skin(self):
        skin = Mock(spec=NullSkin)
        game = BrickBreakerMode(skin=skin)
        screen = Mock()
        game.render(screen)
        skin.draw.assert_called_once_with(screen)

    def test_reset_returns_to_title(self, game):
        game.start_game()
        game.session.score = 50
        game.reset()
        assert game.state == SessionPhase.READY
        assert game.get_score() == 0
        assert game.skin.overlay == TITLE_MESSAGE


class TestCommandLine:
    """Tests for the argument parser and startup errors."""

    def test_parser(self):
        args = build_parser().parse_args(
            ['--difficulty', 'frantic', '--seed', '3', '--mute', '--fps', '30'])
        assert args.difficulty == 'frantic'
        assert args.seed == 3
        assert args.mute
        assert args.fps == 30
        assert args.config is None
        assert args.log_level is None

    def test_parser_rejects_unknown_difficulty(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['--difficulty', 'nightmare'])

    def test_missing_config_file(self, tmp_path):
        assert main(['--config', str(tmp_path / 'missing.yaml')]) == 2

    def test_config_file_values_win_over_difficulty(self, tmp_path):
        path = tmp_path / 'game.yaml'
        path.write_text("paddle:\n  width: 90\n")
        args = build_parser().parse_args(
            ['--config', str(path), '--difficulty', 'frantic'])

        kwargs = game_kwargs(args)

        assert kwargs['difficulty'] is None
        assert kwargs['config'].paddle.width == 90
        assert kwargs['config'].paddle.speed == 8.0
        assert kwargs['config'].ball.base_speed == 4.0

    def test_difficulty_without_config_file(self):
        kwargs = game_kwargs(build_parser().parse_args(['--difficulty', 'relaxed']))
        assert kwargs['config'] is None
        assert kwargs['difficulty'] == 'relaxed'
