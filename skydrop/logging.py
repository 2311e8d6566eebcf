"""
Skydrop logging.

Two kinds of output:

- Log lines: ``get_logger(module)`` returns a logger that prints
  ``[module] LEVEL: message`` to stdout when the message is at or above the
  module's level.
- Session records: ``emit_record(module, record)`` hands a JSON-serializable
  dict to the sink registered for that module. A game session registers a
  sink for ``'session'`` and records every catch, miss and the final game
  over, so a play-through can be replayed from its JSONL file.

Usage:
    from skydrop.logging import get_logger, emit_record

    log = get_logger('spawner')
    log.debug("Next spawn in %d ms", 1200)
    emit_record('session', {'type': 'catch', 'score': 3, 'lives': 2})

Environment:
    SKYDROP_LOG_LEVEL=DEBUG                  # default level for every module
    SKYDROP_LOG_SPAWNER=TRACE                # level for one module
    SKYDROP_LOG_DIR=/tmp/skydrop             # where session files go
    SKYDROP_LOGGING_SESSION_ENABLED=true     # write session records to disk
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
    """Log levels, numbered like the standard logging module."""
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


_LEVEL_LABELS = {
    LogLevel.TRACE: 'TRACE',
    LogLevel.DEBUG: 'DEBUG',
    LogLevel.INFO: 'INFO',
    LogLevel.WARNING: 'WARN',
    LogLevel.ERROR: 'ERROR',
}

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'log_dir': None,   # None: platform data directory
    'modules': {},     # module -> settings from SKYDROP_LOGGING_*
}


# =============================================================================
# Session record sinks
# =============================================================================

class LogSink(ABC):
    """Destination for session records."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    def flush(self) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass


class FileSink(LogSink):
    """
    Appends records to ``<session>_<module>.jsonl`` in the log directory.

    The first record of each file is a header naming the session, the last
    (written by close()) is a footer with the end time.

    Args:
        log_dir: Directory for the files (default: get_log_dir())
        session_name: File name prefix (default: start timestamp)
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, Any] = {}

    def _open(self, module: str):
        if module not in self._files:
            if self._log_dir is None:
                self._log_dir = Path(get_log_dir())
            self._log_dir.mkdir(parents=True, exist_ok=True)
            handle = open(self._log_dir / f"{self._session_name}_{module}.jsonl", 'a', encoding='utf-8')
            handle.write(json.dumps({
                'type': 'header',
                'module': module,
                'session_name': self._session_name,
                'start_time': time.time(),
            }) + "\n")
            self._files[module] = handle
        return self._files[module]

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        if 'wall_time' not in record:
            record = {'wall_time': time.time(), **record}
        self._open(module).write(json.dumps(record) + "\n")

    def flush(self) -> None:
        for handle in self._files.values():
            handle.flush()

    def close(self) -> None:
        for module, handle in self._files.items():
            handle.write(json.dumps({'type': 'footer', 'module': module, 'end_time': time.time()}) + "\n")
            handle.close()
        self._files.clear()


class NullSink(LogSink):
    """Drops every record; used when a module's records are disabled."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}


def register_sink(module: str, sink: LogSink) -> None:
    """Route records for module to sink, replacing any previous sink."""
    _sinks[module] = sink


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """
    Send a record to the module's sink.

    Returns:
        False when no sink is registered for the module
    """
    sink = _sinks.get(module)
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
    """FileSink when SKYDROP_LOGGING_<MODULE>_ENABLED is true, else NullSink."""
    if not get_module_config(module).get('enabled', False):
        return NullSink()
    return FileSink(session_name=session_name)


# =============================================================================
# Configuration
# =============================================================================

def get_log_dir() -> str:
    """
    Directory for session files.

    Checked in order: configure_logging(log_dir=...), SKYDROP_LOG_DIR, then
    the platform data directory (``~/.local/share/skydrop/logs`` on Linux).
    """
    if _config['log_dir']:
        return str(Path(_config['log_dir']).expanduser())

    env_dir = os.environ.get('SKYDROP_LOG_DIR')
    if env_dir:
        return str(Path(env_dir).expanduser())

    if sys.platform == 'darwin':
        base = Path.home() / 'Library' / 'Application Support' / 'Skydrop'
    elif sys.platform == 'win32':
        base = Path(os.environ.get('APPDATA', str(Path.home()))) / 'Skydrop'
    else:
        base = Path(os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))) / 'skydrop'
    return str(base / 'logs')


def get_module_config(module: str) -> Dict[str, Any]:
    """Settings for a module, e.g. ``{'enabled': True}`` for 'session'."""
    return _config['modules'].get(module.lower(), {})


def _parse_env_value(value: str) -> Any:
    lower = value.lower()
    if lower in ('true', '1', 'yes', 'on'):
        return True
    if lower in ('false', '0', 'no', 'off'):
        return False
    return value


def _level_from_string(level_str: str) -> LogLevel:
    """Level by name; unknown names fall back to INFO."""
    try:
        return LogLevel[level_str.upper()]
    except KeyError:
        return LogLevel.INFO


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """
    Set the default level, per-module levels and the session file directory.

    Args:
        level: Default level name
        modules: Module name -> level name
        log_dir: Directory for session files
    """
    _config['default_level'] = _level_from_string(level)
    for module, module_level in (modules or {}).items():
        _config['module_levels'][module] = _level_from_string(module_level)
    if log_dir:
        _config['log_dir'] = log_dir


def _load_env_config() -> None:
    """Read SKYDROP_LOG_* levels and SKYDROP_LOGGING_<MODULE>_<KEY> settings."""
    reserved = ('SKYDROP_LOG_LEVEL', 'SKYDROP_LOG_DIR')
    for key, value in os.environ.items():
        if key == 'SKYDROP_LOG_LEVEL':
            _config['default_level'] = _level_from_string(value)
        elif key.startswith('SKYDROP_LOG_') and key not in reserved:
            _config['module_levels'][key[len('SKYDROP_LOG_'):].lower()] = _level_from_string(value)
        elif key.startswith('SKYDROP_LOGGING_'):
            module, _, setting = key[len('SKYDROP_LOGGING_'):].lower().partition('_')
            if setting:
                _config['modules'].setdefault(module, {})[setting] = _parse_env_value(value)


_load_env_config()


# =============================================================================
# Loggers
# =============================================================================

class SkydropLogger:
    """Prints ``[module] LEVEL: message`` lines for one module."""

    def __init__(self, module: str):
        self.module = module
        self._key = module.lower()

    @property
    def level(self) -> LogLevel:
        return _config['module_levels'].get(self._key, _config['default_level'])

    def _log(self, level: LogLevel, msg: str, *args) -> None:
        if level < self.level:
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {_LEVEL_LABELS[level]}: {msg}")

    def trace(self, msg: str, *args) -> None:
        """Per-frame detail (movement, timer arming)."""
        self._log(LogLevel.TRACE, msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, msg, *args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> SkydropLogger:
    """Get the (cached) logger for a module."""
    return SkydropLogger(module)


def disable_logging() -> None:
    """Silence every log line."""
    _config['default_level'] = LogLevel.OFF
