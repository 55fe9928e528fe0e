"""
Brickfall Logging

Module-scoped console logging plus structured gameplay records.

Usage:
    from brickfall.logging import get_logger

    log = get_logger('session')
    log.debug("Tick %d", tick)
    log.info("Level %d started", level)

    # Structured records (level transitions, life lost, etc.)
    from brickfall.logging import emit_record
    emit_record('session', {'type': 'level_complete', 'level': 2})

Configuration:
    Environment variables:
        BRICKFALL_LOG_LEVEL=DEBUG          # Global default level
        BRICKFALL_LOG_SCHEDULER=TRACE      # Module-specific level
        BRICKFALL_LOG_DIR=/tmp/brickfall   # Where FileSink writes JSONL

        # Module-specific structured logging
        BRICKFALL_LOGGING_SESSION_ENABLED=true

    Or programmatically:
        from brickfall.logging import configure_logging
        configure_logging(level='DEBUG', modules={'skin': 'WARNING'})
"""

import json
import os
import sys
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


# =============================================================================
# Structured record sinks
# =============================================================================

class LogSink(ABC):
    """Destination for structured log records."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """Write one record (must be JSON-serializable)."""

    @abstractmethod
    def flush(self) -> None:
        """Flush any buffered records."""

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""

    def __enter__(self) -> 'LogSink':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class FileSink(LogSink):
    """
    Writes structured records as JSON Lines, one file per module.

    Args:
        log_dir: Directory for log files (default: get_log_dir())
        session_name: Prefix for file names (default: start timestamp)
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        session_name: Optional[str] = None,
    ):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, Any] = {}

    def _ensure_dir(self) -> Path:
        if self._log_dir is None:
            self._log_dir = Path(get_log_dir())
        self._log_dir.mkdir(parents=True, exist_ok=True)
        return self._log_dir

    def path_for(self, module: str) -> Path:
        """Path of the JSONL file used for a module."""
        return self._ensure_dir() / f"{self._session_name}_{module}.jsonl"

    def _get_file(self, module: str):
        if module not in self._files:
            handle = open(self.path_for(module), 'a')
            header = {
                "type": "header",
                "module": module,
                "session_name": self._session_name,
                "start_time": time.time(),
            }
            handle.write(json.dumps(header) + "\n")
            self._files[module] = handle
        return self._files[module]

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        f = self._get_file(module)
        if 'wall_time' not in record:
            record = {'wall_time': time.time(), **record}
        f.write(json.dumps(record) + "\n")

    def flush(self) -> None:
        for f in self._files.values():
            f.flush()

    def close(self) -> None:
        for module, f in self._files.items():
            f.write(json.dumps({"type": "footer", "module": module,
                                "end_time": time.time()}) + "\n")
            f.close()
        self._files.clear()


class NullSink(LogSink):
    """No-op sink when structured logging is disabled."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}


def register_sink(module: str, sink: LogSink) -> None:
    """Route structured records for ``module`` to ``sink``."""
    _sinks[module] = sink


def get_sink(module: str) -> Optional[LogSink]:
    return _sinks.get(module)


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """
    Emit a structured record to the module's sink.

    Returns:
        True if a sink received the record, False otherwise
    """
    sink = get_sink(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close and forget every registered sink."""
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()


def create_sink(module: str, session_name: Optional[str] = None) -> LogSink:
    """FileSink if structured logging is enabled for ``module``, else NullSink."""
    if not get_module_config(module).get('enabled', False):
        return NullSink()
    return FileSink(session_name=session_name)


# =============================================================================
# Global configuration
# =============================================================================

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'log_dir': None,
    'modules': {},
}


def get_log_dir() -> str:
    """Log directory: configured value, BRICKFALL_LOG_DIR, or XDG data dir."""
    if _config.get('log_dir'):
        return str(Path(_config['log_dir']).expanduser())

    env_dir = os.environ.get('BRICKFALL_LOG_DIR')
    if env_dir:
        return str(Path(env_dir).expanduser())

    if sys.platform == 'darwin':
        user_data = Path.home() / 'Library' / 'Application Support' / 'Brickfall'
    elif sys.platform == 'win32':
        user_data = Path(os.environ.get('APPDATA', str(Path.home()))) / 'Brickfall'
    else:
        xdg_data = os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))
        user_data = Path(xdg_data) / 'brickfall'
    return str(user_data / 'logs')


def get_module_config(module: str) -> Dict[str, Any]:
    """Settings from BRICKFALL_LOGGING_<MODULE>_<KEY> variables."""
    return _config['modules'].get(module.lower(), {})


def _parse_env_value(value: str) -> Any:
    lower = value.lower()
    if lower in ('true', '1', 'yes', 'on'):
        return True
    if lower in ('false', '0', 'no', 'off'):
        return False
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value


def _level_from_string(level_str: str) -> LogLevel:
    mapping = {
        'TRACE': LogLevel.TRACE,
        'DEBUG': LogLevel.DEBUG,
        'INFO': LogLevel.INFO,
        'WARNING': LogLevel.WARNING,
        'WARN': LogLevel.WARNING,
        'ERROR': LogLevel.ERROR,
        'CRITICAL': LogLevel.CRITICAL,
        'OFF': LogLevel.OFF,
    }
    return mapping.get(level_str.upper(), LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: module_name -> level overrides
        log_dir: Directory for FileSink output
    """
    _config['default_level'] = _level_from_string(level)
    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][mod] = _level_from_string(mod_level)
    if log_dir is not None:
        _config['log_dir'] = log_dir


def _load_env_config() -> None:
    if 'BRICKFALL_LOG_LEVEL' in os.environ:
        _config['default_level'] = _level_from_string(os.environ['BRICKFALL_LOG_LEVEL'])

    reserved = ('BRICKFALL_LOG_LEVEL', 'BRICKFALL_LOG_DIR')
    for key, value in os.environ.items():
        if key.startswith('BRICKFALL_LOG_') and key not in reserved:
            _config['module_levels'][key[len('BRICKFALL_LOG_'):].lower()] = \
                _level_from_string(value)
        elif key.startswith('BRICKFALL_LOGGING_'):
            parts = key[len('BRICKFALL_LOGGING_'):].lower().split('_', 1)
            if len(parts) == 2:
                module, setting = parts
                _config['modules'].setdefault(module, {})[setting] = _parse_env_value(value)


_load_env_config()


class BrickfallLogger:
    """Logger bound to one module name."""

    def __init__(self, module: str):
        self.module = module
        self._module_key = module.lower().replace('.', '_')

    @property
    def level(self) -> LogLevel:
        """Effective level for this module."""
        return _config['module_levels'].get(self._module_key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {level_name}: {msg}")

    def trace(self, msg: str, *args) -> None:
        """Log at TRACE level (per-tick detail)."""
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def critical(self, msg: str, *args) -> None:
        self._log(LogLevel.CRITICAL, 'CRIT', msg, *args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> BrickfallLogger:
    """
    Get the cached logger for a module.

    Args:
        module: Module name (e.g., 'session', 'scheduler', 'skin')
    """
    return BrickfallLogger(module)


def disable_logging() -> None:
    """Silence all console logging."""
    _config['default_level'] = LogLevel.OFF
