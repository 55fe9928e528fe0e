"""Tests for console logging and structured record sinks."""

import copy
import json

import pytest

from brickfall import logging as bf_logging
from brickfall.logging import (
    FileSink,
    LogLevel,
    NullSink,
    close_all_sinks,
    configure_logging,
    create_sink,
    emit_record,
    get_logger,
    get_sink,
    register_sink,
)


@pytest.fixture(autouse=True)
def restore_config():
    """Put the global logging config back after each test."""
    saved = copy.deepcopy(bf_logging._config)
    yield
    bf_logging._config.clear()
    bf_logging._config.update(saved)
    close_all_sinks()


class TestLogger:
    """Tests for module loggers."""

    def test_cached(self):
        assert get_logger('session') is get_logger('session')

    def test_format(self, capsys):
        configure_logging(level='INFO')
        get_logger('unit_format').info("Level %d started", 2)
        assert capsys.readouterr().out == "[unit_format] INFO: Level 2 started\n"

    def test_below_level_is_dropped(self, capsys):
        configure_logging(level='WARNING')
        get_logger('unit_quiet').info("hidden")
        assert capsys.readouterr().out == ""

    def test_module_override(self, capsys):
        configure_logging(level='WARNING', modules={'unit_loud': 'TRACE'})
        get_logger('unit_loud').trace("tick %d", 5)
        assert "[unit_loud] TRACE: tick 5" in capsys.readouterr().out

    def test_bad_format_args_do_not_raise(self, capsys):
        configure_logging(level='INFO')
        get_logger('unit_args').info("no placeholders", 1)
        assert "no placeholders (1,)" in capsys.readouterr().out

    def test_disable(self, capsys):
        bf_logging.disable_logging()
        get_logger('unit_off').critical("nope")
        assert capsys.readouterr().out == ""

    def test_unknown_level_name(self):
        assert bf_logging._level_from_string('chatty') == LogLevel.INFO
        assert bf_logging._level_from_string('warn') == LogLevel.WARNING


class TestEnvParsing:
    """Tests for environment value parsing."""

    @pytest.mark.parametrize("raw,expected", [
        ("true", True),
        ("OFF", False),
        ("42", 42),
        ("0.5", 0.5),
        ("/tmp/logs", "/tmp/logs"),
    ])
    def test_parse_env_value(self, raw, expected):
        assert bf_logging._parse_env_value(raw) == expected

    def test_env_module_settings(self, monkeypatch):
        monkeypatch.setenv('BRICKFALL_LOGGING_SESSION_ENABLED', 'true')
        monkeypatch.setenv('BRICKFALL_LOG_SCHEDULER', 'TRACE')
        bf_logging._load_env_config()
        assert bf_logging.get_module_config('session') == {'enabled': True}
        assert get_logger('scheduler').level == LogLevel.TRACE

    def test_log_dir_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv('BRICKFALL_LOG_DIR', str(tmp_path))
        assert bf_logging.get_log_dir() == str(tmp_path)


class TestSinks:
    """Tests for structured record sinks."""

    def test_emit_without_sink(self):
        assert not emit_record('unit_nosink', {'type': 'x'})

    def test_emit_to_registered_sink(self):
        register_sink('unit_null', NullSink())
        assert emit_record('unit_null', {'type': 'x'})
        assert isinstance(get_sink('unit_null'), NullSink)

    def test_close_all_sinks(self):
        register_sink('unit_null', NullSink())
        close_all_sinks()
        assert get_sink('unit_null') is None

    def test_create_sink_disabled(self):
        assert isinstance(create_sink('unit_disabled'), NullSink)

    def test_create_sink_enabled(self):
        bf_logging._config['modules']['unit_enabled'] = {'enabled': True}
        assert isinstance(create_sink('unit_enabled'), FileSink)

    def test_file_sink_writes_jsonl(self, tmp_path):
        sink = FileSink(log_dir=str(tmp_path), session_name='run1')
        sink.emit('session', {'type': 'life_lost', 'lives': 2})
        sink.flush()
        sink.close()

        path = tmp_path / 'run1_session.jsonl'
        lines = [json.loads(line) for line in path.read_text().splitlines()]
        assert [line['type'] for line in lines] == ['header', 'life_lost', 'footer']
        assert lines[1]['lives'] == 2
        assert 'wall_time' in lines[1]

    def test_file_sink_context_manager(self, tmp_path):
        with FileSink(log_dir=str(tmp_path), session_name='run2') as sink:
            sink.emit('session', {'type': 'reset'})
        assert (tmp_path / 'run2_session.jsonl').exists()

    def test_level_controller_records(self, tmp_path, running_session, levels):
        sink = FileSink(log_dir=str(tmp_path), session_name='game')
        register_sink('session', sink)
        running_session.lives = 1

        levels.lose_life(running_session)
        close_all_sinks()

        lines = (tmp_path / 'game_session.jsonl').read_text().splitlines()
        types = [json.loads(line)['type'] for line in lines]
        assert types == ['header', 'life_lost', 'game_over', 'footer']
