"""
Playfield Logging

Console logging with per-module levels, plus structured session records
routed to pluggable sinks.

Structured Record Logging:
    Gameplay events (bricks destroyed, lives lost, session outcomes) can be
    written as structured records. A FileSink writes one JSONL file per
    module; a NullSink discards everything.

Usage:
    from playfield.logging import get_logger

    log = get_logger('breakout.engine')
    log.debug("Frame %d", frame)
    log.info("Session started")

    # Structured records
    from playfield.logging import emit_record
    emit_record('session', {'type': 'brick_destroyed', 'frame': 120, ...})

Configuration:
    Environment variables:
        PLAYFIELD_LOG_LEVEL=DEBUG             # Global default level
        PLAYFIELD_LOG_BREAKOUT_ENGINE=DEBUG   # Module-specific level
        PLAYFIELD_LOG_DIR=~/breakout-logs     # Directory for JSONL sinks

        # Module-specific structured logging
        PLAYFIELD_LOGGING_SESSION_ENABLED=true

    Or programmatically:
        from playfield.logging import configure_logging
        configure_logging(level='DEBUG', modules={'breakout.engine': 'INFO'})
"""

import json
import os
import sys
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, TextIO


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Even more verbose than DEBUG
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100      # Disable logging


# =============================================================================
# Sink-Based Structured Logging
# =============================================================================

class LogSink(ABC):
    """
    Abstract base class for log record sinks.

    Sinks receive structured log records and write them to their destination.
    """

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """
        Emit a structured log record.

        Args:
            module: Module name (e.g., 'session')
            record: Structured data to log (must be JSON-serializable)
        """
        pass

    @abstractmethod
    def flush(self) -> None:
        """Flush any buffered records."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""
        pass

    def __enter__(self) -> 'LogSink':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class FileSink(LogSink):
    """
    Writes structured log records to JSONL files.

    Each module gets its own file in the log directory. Records are written
    as JSON Lines (one JSON object per line).

    Args:
        log_dir: Directory for log files (default: from get_log_dir())
        session_name: Session identifier for file naming (default: timestamp)
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        session_name: Optional[str] = None,
    ):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, TextIO] = {}

    def _ensure_dir(self) -> Path:
        """Lazily initialize log directory."""
        if self._log_dir is None:
            self._log_dir = Path(get_log_dir())
        self._log_dir.mkdir(parents=True, exist_ok=True)
        return self._log_dir

    def _get_file(self, module: str) -> TextIO:
        """Get or create file handle for module."""
        if module not in self._files:
            log_dir = self._ensure_dir()
            path = log_dir / f"{self._session_name}_{module}.jsonl"
            self._files[module] = open(path, 'a', encoding='utf-8')

            header = {
                "type": "header",
                "module": module,
                "session_name": self._session_name,
                "start_time": time.time(),
                "start_time_iso": time.strftime("%Y-%m-%dT%H:%M:%S"),
            }
            self._files[module].write(json.dumps(header) + "\n")

        return self._files[module]

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """Write record to module's JSONL file."""
        f = self._get_file(module)
        if 'wall_time' not in record:
            record = {'wall_time': time.time(), **record}
        f.write(json.dumps(record) + "\n")

    def flush(self) -> None:
        """Flush all open files."""
        for f in self._files.values():
            f.flush()

    def close(self) -> None:
        """Close all open files."""
        for module, f in self._files.items():
            footer = {
                "type": "footer",
                "module": module,
                "end_time": time.time(),
                "end_time_iso": time.strftime("%Y-%m-%dT%H:%M:%S"),
            }
            f.write(json.dumps(footer) + "\n")
            f.close()
        self._files.clear()

    @property
    def log_paths(self) -> Dict[str, Path]:
        """Get paths to all log files."""
        log_dir = self._ensure_dir()
        return {
            module: log_dir / f"{self._session_name}_{module}.jsonl"
            for module in self._files
        }


class NullSink(LogSink):
    """No-op sink when logging is disabled."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


# Sink registry - active sinks by module
_sinks: Dict[str, LogSink] = {}
_default_sink: Optional[LogSink] = None


def register_sink(module: str, sink: LogSink) -> None:
    """
    Register a sink for a specific module.

    Args:
        module: Module name (e.g., 'session')
        sink: Sink instance to receive records
    """
    _sinks[module] = sink


def set_default_sink(sink: Optional[LogSink]) -> None:
    """Set the default sink for modules without specific sinks."""
    global _default_sink
    _default_sink = sink


def get_sink(module: str) -> Optional[LogSink]:
    """Get the sink for a module, or default sink."""
    return _sinks.get(module, _default_sink)


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """
    Emit a structured log record to the appropriate sink.

    Args:
        module: Module name (e.g., 'session')
        record: Structured data to log (must be JSON-serializable)

    Returns:
        True if record was emitted, False if no sink available
    """
    sink = get_sink(module)
    if sink:
        sink.emit(module, record)
        return True
    return False


def close_all_sinks() -> None:
    """Close all registered sinks."""
    global _default_sink
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()
    if _default_sink:
        _default_sink.close()
        _default_sink = None


def create_sink_for_module(
    module: str,
    session_name: Optional[str] = None,
) -> LogSink:
    """
    Create the sink configured for a module.

    Returns a FileSink when PLAYFIELD_LOGGING_<MODULE>_ENABLED is set,
    otherwise a NullSink.

    Args:
        module: Module name for configuration lookup
        session_name: Optional session identifier

    Returns:
        LogSink for the module
    """
    config = get_module_config(module)
    if not config.get('enabled', False):
        return NullSink()
    return FileSink(session_name=session_name)


# =============================================================================
# Global configuration
# =============================================================================

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'log_dir': None,         # Override log directory (None = platform default)
    'modules': {},           # Per-module settings (hierarchical)
}


def get_log_dir() -> str:
    """Get the log directory, respecting PLAYFIELD_LOG_DIR.

    Priority:
    1. Configured log_dir in _config
    2. PLAYFIELD_LOG_DIR environment variable
    3. Platform-specific user data directory:
       - macOS: ~/Library/Application Support/Playfield/logs
       - Windows: %APPDATA%/Playfield/logs
       - Linux: ~/.local/share/playfield/logs

    Returns:
        Path to log directory (as string)
    """
    if _config.get('log_dir'):
        return str(Path(_config['log_dir']).expanduser())

    env_dir = os.environ.get('PLAYFIELD_LOG_DIR')
    if env_dir:
        return str(Path(env_dir).expanduser())

    if sys.platform == 'darwin':
        user_data = Path.home() / 'Library' / 'Application Support' / 'Playfield'
    elif sys.platform == 'win32':
        user_data = Path(os.environ.get('APPDATA', str(Path.home()))) / 'Playfield'
    else:
        xdg_data = os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))
        user_data = Path(xdg_data) / 'playfield'

    return str(user_data / 'logs')


def get_module_config(module: str) -> Dict[str, Any]:
    """Get configuration for a specific module.

    Modules can have hierarchical settings configured via env vars:
        PLAYFIELD_LOGGING_SESSION_ENABLED=true

    Maps to:
        {'enabled': True}

    Args:
        module: Module name (e.g., 'session')

    Returns:
        Dict of module settings, empty dict if none configured
    """
    return _config.get('modules', {}).get(module.lower(), {})


def _set_nested(d: Dict, keys: list, value: Any) -> None:
    """Set a value in a nested dict, creating intermediate dicts as needed."""
    for key in keys[:-1]:
        d = d.setdefault(key, {})
    d[keys[-1]] = value


def _parse_env_value(value: str) -> Any:
    """Parse environment variable value to appropriate type."""
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
        pass
    return value


def _module_key(module: str) -> str:
    return module.lower().replace('.', '_').replace('/', '_')


def _format_message(module: str, level: str, msg: str) -> str:
    """Format a log message."""
    return f"[{module}] {level}: {msg}"


def _level_from_string(level_str: str) -> LogLevel:
    """Convert string to LogLevel."""
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
        modules: Dict of module_name -> level for per-module configuration
        log_dir: Directory for file sinks (None keeps the current setting)
    """
    _config['default_level'] = _level_from_string(level)

    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][_module_key(mod)] = _level_from_string(mod_level)

    if log_dir is not None:
        _config['log_dir'] = log_dir


def _load_env_config() -> None:
    """Load configuration from environment variables.

    Supports two prefixes:
    - PLAYFIELD_LOG_*: Log levels (PLAYFIELD_LOG_BREAKOUT_ENGINE=DEBUG)
    - PLAYFIELD_LOGGING_*: Module settings (PLAYFIELD_LOGGING_SESSION_ENABLED=true)
    """
    if 'PLAYFIELD_LOG_LEVEL' in os.environ:
        _config['default_level'] = _level_from_string(os.environ['PLAYFIELD_LOG_LEVEL'])

    if 'PLAYFIELD_LOG_DIR' in os.environ:
        _config['log_dir'] = os.environ['PLAYFIELD_LOG_DIR']

    reserved = ('PLAYFIELD_LOG_LEVEL', 'PLAYFIELD_LOG_DIR')
    for key, value in os.environ.items():
        if key.startswith('PLAYFIELD_LOG_') and key not in reserved:
            module_name = key[len('PLAYFIELD_LOG_'):].lower()
            _config['module_levels'][module_name] = _level_from_string(value)

    # Hierarchical module settings (PLAYFIELD_LOGGING_MODULE_KEY_SUBKEY=value)
    for key, value in os.environ.items():
        if key.startswith('PLAYFIELD_LOGGING_'):
            parts = key[len('PLAYFIELD_LOGGING_'):].lower().split('_')
            if len(parts) >= 2:
                module = parts[0]
                setting_path = parts[1:]

                if module not in _config['modules']:
                    _config['modules'][module] = {}

                _set_nested(_config['modules'][module], setting_path, _parse_env_value(value))


# Load env config on import
_load_env_config()


class PlayfieldLogger:
    """
    Logger for a specific module.
    """

    def __init__(self, module: str):
        self.module = module
        self._module_key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        """Get effective log level for this module."""
        if self._module_key in _config['module_levels']:
            return _config['module_levels'][self._module_key]
        return _config['default_level']

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check if message at given level should be logged."""
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        print(_format_message(self.module, level_name, msg))

    def trace(self, msg: str, *args) -> None:
        """Log at TRACE level (very verbose)."""
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        """Log at DEBUG level."""
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        """Log at INFO level."""
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        """Log at WARNING level."""
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def error(self, msg: str, *args) -> None:
        """Log at ERROR level."""
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def critical(self, msg: str, *args) -> None:
        """Log at CRITICAL level."""
        self._log(LogLevel.CRITICAL, 'CRIT', msg, *args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> PlayfieldLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') multiple times
    returns the same logger instance.

    Args:
        module: Module name (e.g., 'breakout.engine')

    Returns:
        PlayfieldLogger instance for the module
    """
    return PlayfieldLogger(module)


def disable_logging() -> None:
    """Disable all console logging."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()
