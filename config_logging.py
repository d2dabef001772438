#!/usr/bin/env python3
"""
spellchk Configuration & Logging Module
=======================================
Log configuration, structured logging, and the error hierarchy shared by
every spellchk module.

Configuration is read from the environment:
    SPELLCHK_LOG_LEVEL   DEBUG, INFO, WARNING (default), ERROR
    SPELLCHK_LOG_FORMAT  text (default) or json
    SPELLCHK_LOG_FILE    true to also write a rotating log file
    SPELLCHK_LOG_DIR     directory for the log file
"""

import os
import sys
import json
import logging
import uuid
import time
from datetime import datetime, timezone
from typing import Optional, Dict, Any
from pathlib import Path
from dataclasses import dataclass, field
from contextlib import contextmanager
import threading

# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024  # 5MB max per log file
LOG_BACKUP_COUNT = 5                # Number of log backup files to keep
VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
VALID_LOG_FORMATS = ('text', 'json')

__version__ = "1.0.0"
APP_NAME = "spellchk"


def _default_log_dir() -> Path:
    if os.environ.get('SPELLCHK_DATA_DIR'):
        return Path(os.environ['SPELLCHK_DATA_DIR']) / 'logs'
    xdg = os.environ.get('XDG_DATA_HOME')
    root = Path(xdg) if xdg else Path.home() / '.local' / 'share'
    return root / APP_NAME / 'logs'


# =============================================================================
# LOG CONFIGURATION
# =============================================================================

@dataclass
class LogConfig:
    """Logging configuration with quiet defaults for a command line tool."""

    log_level: str = "WARNING"
    log_format: str = "text"  # Options: json, text
    log_to_console: bool = True
    log_to_file: bool = False
    log_dir: Path = field(default_factory=_default_log_dir)

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_env(cls) -> 'LogConfig':
        """Load configuration from environment variables."""
        log_dir = os.environ.get('SPELLCHK_LOG_DIR')
        return cls(
            log_level=os.environ.get('SPELLCHK_LOG_LEVEL', 'WARNING'),
            log_format=os.environ.get('SPELLCHK_LOG_FORMAT', 'text').lower(),
            log_to_file=os.environ.get('SPELLCHK_LOG_FILE', 'false').lower() in ('true', '1', 'yes', 'on'),
            log_dir=Path(log_dir) if log_dir else _default_log_dir(),
        )

    def validate(self) -> tuple:
        """Validate configuration and return (is_valid, errors)."""
        errors = []

        if self.log_level not in VALID_LOG_LEVELS:
            errors.append(f"Invalid log_level: {self.log_level}. Must be one of {', '.join(VALID_LOG_LEVELS)}")

        if self.log_format not in VALID_LOG_FORMATS:
            errors.append(f"Invalid log_format: {self.log_format}. Must be 'text' or 'json'")

        return (len(errors) == 0, errors)


# Global config instance
_config: Optional[LogConfig] = None

def get_config() -> LogConfig:
    """Get or create the global log configuration."""
    global _config
    if _config is None:
        _config = LogConfig.from_env()
    return _config


def reset_config():
    """Reset the global log configuration (for testing)."""
    global _config
    _config = None


# =============================================================================
# STRUCTURED LOGGING
# =============================================================================

class StructuredLogger:
    """Structured logger with per-thread correlation IDs (one per checked file)."""

    _local = threading.local()

    def __init__(self, name: str, config: Optional[LogConfig] = None):
        self.name = name
        self.config = config or get_config()
        self._setup_logger()

    def _setup_logger(self):
        """Configure the underlying Python logger."""
        self.logger = logging.getLogger(self.name)
        self.logger.setLevel(getattr(logging, self.config.log_level, logging.WARNING))
        self.logger.handlers.clear()
        self.logger.propagate = False

        if self.config.log_format == 'json':
            formatter = JsonFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s [%(levelname)s] %(name)s - %(message)s'
            )

        if self.config.log_to_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if self.config.log_to_file:
            from logging.handlers import RotatingFileHandler
            self.config.log_dir.mkdir(parents=True, exist_ok=True)
            log_file = self.config.log_dir / f"{self.name.lower()}.log"
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    @classmethod
    def set_correlation_id(cls, correlation_id: str):
        """Set correlation ID for current thread."""
        cls._local.correlation_id = correlation_id

    @classmethod
    def get_correlation_id(cls) -> str:
        """Get correlation ID for current thread."""
        correlation_id = getattr(cls._local, 'correlation_id', None)
        if correlation_id is None:
            correlation_id = cls.new_correlation_id()
        return correlation_id

    @classmethod
    def new_correlation_id(cls) -> str:
        """Generate and set a new correlation ID."""
        correlation_id = str(uuid.uuid4())[:12]
        cls.set_correlation_id(correlation_id)
        return correlation_id

    def _emit(self, level: int, message: str, exc_info: bool = False, **kwargs):
        extra = {'correlation_id': self.get_correlation_id(), **kwargs}
        if self.config.log_format != 'json' and kwargs:
            context = ' '.join(f"{key}={value}" for key, value in kwargs.items())
            message = f"{message} ({context})"
        self.logger.log(level, message, exc_info=exc_info, extra=extra)

    def debug(self, message: str, **kwargs):
        """Log debug message."""
        self._emit(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message."""
        self._emit(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message."""
        self._emit(logging.WARNING, message, **kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs):
        """Log error message with optional exception info."""
        self._emit(logging.ERROR, message, exc_info=exc_info, **kwargs)

    def exception(self, message: str, **kwargs):
        """Log exception with full traceback."""
        self.error(message, exc_info=True, **kwargs)

    def critical(self, message: str, **kwargs):
        """Log critical message."""
        self._emit(logging.CRITICAL, message, **kwargs)

    @contextmanager
    def log_operation(self, operation: str, **context):
        """Context manager for logging operation start/end with timing."""
        start_time = time.time()
        self.debug(f"{operation} started", operation=operation, status='started', **context)
        try:
            yield
            duration_ms = (time.time() - start_time) * 1000
            self.info(f"{operation} completed", operation=operation, status='completed',
                      duration_ms=round(duration_ms, 2), **context)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            self.error(f"{operation} failed: {e}", operation=operation, status='failed',
                       duration_ms=round(duration_ms, 2), **context)
            raise


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    _RESERVED = frozenset((
        'name', 'msg', 'args', 'created', 'filename', 'funcName',
        'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'pathname', 'process', 'processName', 'relativeCreated',
        'stack_info', 'thread', 'threadName', 'exc_info', 'exc_text',
        'message', 'taskName',
    ))

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        if record.exc_info:
            log_data['traceback'] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in self._RESERVED:
                log_data[key] = value

        return json.dumps(log_data, default=str)


_loggers: Dict[str, StructuredLogger] = {}

def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance (one per name)."""
    logger = _loggers.get(name)
    if logger is None or logger.config is not get_config():
        logger = StructuredLogger(name, get_config())
        _loggers[name] = logger
    return logger


# =============================================================================
# ERROR HANDLING
# =============================================================================

class SpellchkError(Exception):
    """Base exception for spellchk."""

    exit_code = 2

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR",
                 details: Optional[Dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        return {
            'success': False,
            'error': {
                'code': self.code,
                'message': self.message,
                'details': self.details
            }
        }


class ValidationError(SpellchkError):
    """Invalid user input."""
    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, code="VALIDATION_ERROR",
                         details={'field': field, **kwargs})


class FileError(SpellchkError):
    """A checked file or the personal dictionary could not be read or written."""
    def __init__(self, message: str, filename: Optional[str] = None, **kwargs):
        super().__init__(message, code="FILE_ERROR",
                         details={'filename': filename, **kwargs})


class DictionaryError(SpellchkError):
    """Dictionary file missing, corrupt, or not writable."""
    def __init__(self, message: str, language: Optional[str] = None,
                 path: Optional[str] = None, **kwargs):
        super().__init__(message, code="DICTIONARY_ERROR",
                         details={'language': language, 'path': path, **kwargs})


class ConfigError(SpellchkError):
    """Configuration file could not be read or parsed."""
    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, code="CONFIG_ERROR",
                         details={'path': path, **kwargs})
