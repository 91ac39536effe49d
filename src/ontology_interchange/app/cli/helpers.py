"""
CLI helper utilities.

This module provides shared utilities for CLI commands including:
- Configuration loading
- Logging setup
- Document reading and writing

Logging is driven by the ``logging`` section of config.json::

    {"level": "INFO", "file": "logs/run.log", "format": "text",
     "rotation": {"enabled": true, "max_mb": 10, "backup_count": 5}}

Anything the tool prints about its own logging goes to stderr, so a command
that writes its converted document to stdout keeps that stream clean.
"""

import json
import logging
import os
import sys
import tempfile
from dataclasses import dataclass
from datetime import datetime, timezone
from logging import Handler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Tuple

from ...constants import LoggingConfig
from ...core.validators.input import InputValidator

# Type alias for log levels
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_LOG_FILENAME = "ontology_interchange.log"

_BYTES_PER_MB = 1024 * 1024


class JSONFormatter(logging.Formatter):
    """Write each record as a single JSON object.

    Values passed through ``extra=`` are copied into the object next to the
    fixed keys (timestamp, level, logger, message).
    """

    # Attributes present on every record; anything else arrived through ``extra``
    _STANDARD_ATTRS = frozenset(
        vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
    ) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
                LoggingConfig.JSON_DATE_FORMAT
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        extras = {
            key: value for key, value in vars(record).items()
            if key not in self._STANDARD_ATTRS and not key.startswith("_")
        }
        payload.update((key, value) for key, value in extras.items() if key not in payload)
        return json.dumps(payload, ensure_ascii=False, default=str)


@dataclass(frozen=True)
class LogSettings:
    """Resolved ``logging`` configuration; equal settings mean nothing to redo."""

    level: int
    file: Optional[str]
    style: str
    rotate: bool
    max_bytes: int
    backup_count: int
    console: bool

    @classmethod
    def from_config(
        cls,
        section: Dict[str, Any],
        level: str,
        log_file: Optional[str],
        console: bool,
    ) -> "LogSettings":
        level_name = str(section.get('level') or level).upper()
        style = str(section.get('format', LoggingConfig.DEFAULT_FORMAT_STYLE)).lower()
        if style not in LoggingConfig.SUPPORTED_FORMATS:
            style = LoggingConfig.DEFAULT_FORMAT_STYLE

        rotation = section.get('rotation')
        if not isinstance(rotation, dict):
            rotation = {}

        return cls(
            level=getattr(logging, level_name, logging.INFO),
            file=log_file if log_file is not None else section.get('file') or None,
            style=style,
            rotate=bool(rotation.get('enabled', LoggingConfig.ROTATION_ENABLED)),
            max_bytes=_positive(rotation.get('max_mb'), LoggingConfig.MAX_LOG_FILE_MB) * _BYTES_PER_MB,
            backup_count=_positive(rotation.get('backup_count'), LoggingConfig.LOG_BACKUP_COUNT),
            console=console,
        )

    def formatter(self) -> logging.Formatter:
        if self.style == 'json':
            return JSONFormatter()
        return logging.Formatter(fmt=LoggingConfig.LOG_FORMAT, datefmt=LoggingConfig.DATE_FORMAT)

    def candidate_paths(self) -> List[str]:
        """The configured log file, then the same name in the temp and home directories."""
        if not self.file:
            return []
        name = os.path.basename(self.file) or DEFAULT_LOG_FILENAME
        return [
            self.file,
            os.path.join(tempfile.gettempdir(), name),
            os.path.join(str(Path.home()), name),
        ]


_MANAGED_HANDLERS: List[Handler] = []
_ACTIVE_SETTINGS: Optional[LogSettings] = None
_ACTIVE_LOG_FILE: Optional[str] = None


def get_default_config_path() -> str:
    """Path of ``config.json`` in the current working directory."""
    return str(Path.cwd() / "config.json")


def notice(message: str) -> None:
    """Tell the user something about the tool itself, on stderr."""
    print(message, file=sys.stderr)


def _positive(value: Any, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 1:
        return default
    return int(value)


def reset_logging() -> None:
    """Detach the handlers installed by setup_logging and forget its settings."""
    global _MANAGED_HANDLERS, _ACTIVE_SETTINGS, _ACTIVE_LOG_FILE
    root_logger = logging.getLogger()
    for handler in _MANAGED_HANDLERS:
        root_logger.removeHandler(handler)
        handler.close()
    _MANAGED_HANDLERS = []
    _ACTIVE_SETTINGS = None
    _ACTIVE_LOG_FILE = None


def _open_log_file(settings: LogSettings) -> Tuple[Optional[Handler], Optional[str]]:
    """Open the first writable candidate path; (None, None) when none is."""
    candidates = settings.candidate_paths()
    for path in candidates:
        try:
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            if settings.rotate:
                handler: Handler = RotatingFileHandler(
                    path, maxBytes=settings.max_bytes,
                    backupCount=settings.backup_count, encoding='utf-8',
                )
            else:
                handler = logging.FileHandler(path, encoding='utf-8')
        except OSError as exc:
            notice(f"  Could not create log at {path}: {exc.strerror or exc}")
            continue
        if path != settings.file:
            notice(f"Note: Using fallback log file: {path}")
        return handler, path

    if candidates:
        notice(f"Warning: Could not write log file {settings.file} or any fallback location")
        notice(f"  Tried: {', '.join(candidates[1:])}")
        notice("  Logging to the console only")
    return None, None


def setup_logging(
    level: LogLevel = LoggingConfig.DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    *,
    config: Optional[Dict[str, Any]] = None,
    include_console: bool = True,
) -> Optional[str]:
    """
    Configure the root logger from the ``logging`` config section.

    The log file is tried at its configured location, then in the system temp
    directory, then in the user's home directory.

    With ``include_console`` every record is echoed to stdout. Without it
    (the command's output owns stdout) only warnings and errors are echoed,
    and they go to stderr. Calling again with the same settings is a no-op.

    Args:
        level: Log level used when the config does not name one.
        log_file: Log file override.
        config: The ``logging`` section of config.json.
        include_console: False when stdout carries the command's output.

    Returns:
        The log file path in use, or None when nothing is written to a file.
    """
    global _ACTIVE_SETTINGS, _ACTIVE_LOG_FILE

    settings = LogSettings.from_config(dict(config or {}), level, log_file, include_console)
    if settings == _ACTIVE_SETTINGS and _MANAGED_HANDLERS:
        return _ACTIVE_LOG_FILE

    formatter = settings.formatter()
    if settings.console:
        echo = logging.StreamHandler(sys.stdout)
    else:
        echo = logging.StreamHandler(sys.stderr)
        echo.setLevel(logging.WARNING)
    handlers: List[Handler] = [echo]

    file_handler, log_path = _open_log_file(settings)
    if file_handler is not None:
        handlers.append(file_handler)

    reset_logging()
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.level)
    logging.captureWarnings(True)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        _MANAGED_HANDLERS.append(handler)

    _ACTIVE_SETTINGS = settings
    _ACTIVE_LOG_FILE = log_path
    if log_path:
        logging.getLogger(__name__).info(f"Logging to: {log_path}")
    return log_path


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration from a JSON file with path validation.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Dictionary containing the configuration.

    Raises:
        ValueError: If config_path is empty, invalid, or the file is not a JSON object.
        FileNotFoundError: If the configuration file doesn't exist.
        PermissionError: If the file cannot be read.
    """
    if not config_path:
        raise ValueError("config_path cannot be empty")

    try:
        validated_path = InputValidator.validate_config_file_path(config_path)
    except FileNotFoundError:
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            f"Please create a config.json file or specify one with --config"
        )

    try:
        with open(validated_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in configuration file {validated_path} at line {e.lineno}, column {e.colno}: {e.msg}"
        )
    except UnicodeDecodeError as e:
        raise ValueError(f"File encoding error in {validated_path}: {e}")

    if not isinstance(config, dict):
        raise ValueError(f"Configuration file must contain a JSON object, got {type(config).__name__}")

    return config


def read_document(path: str, allow_relative_up: bool = False) -> Tuple[Path, str]:
    """
    Validate an ontology document path and read it as UTF-8 text.

    Raises:
        ValueError, FileNotFoundError, PermissionError: From path validation.
        OSError: If the file cannot be read.
    """
    validated_path = InputValidator.validate_input_ontology_path(path, allow_relative_up=allow_relative_up)
    with open(validated_path, 'r', encoding='utf-8') as handle:
        return validated_path, handle.read()


def write_text(
    path: str,
    content: str,
    allowed_extensions: Optional[List[str]] = None,
    allow_relative_up: bool = False,
) -> Path:
    """Validate an output path and write ``content`` to it."""
    validated_path = InputValidator.validate_output_file_path(
        path,
        allowed_extensions=allowed_extensions,
        allow_relative_up=allow_relative_up,
    )
    with open(validated_path, 'w', encoding='utf-8') as handle:
        handle.write(content)
    return validated_path


def print_header(title: str, width: int = 60) -> None:
    """Print a formatted header with the given title."""
    print("\n" + "=" * width)
    print(title)
    print("=" * width)


def print_footer(width: int = 60) -> None:
    print("=" * width + "\n")
