"""
Logging setup for extgrep.

Diagnostics go to stderr through a stdlib logger named ``extgrep`` so that the
result lines on stdout stay clean. Search output itself is never logged.

Keyword arguments given to the logging methods are attached to the LogRecord.
The ``json`` and ``structured`` formats print them; ``simple`` and ``detailed``
print the message only.

Example:
    >>> from extgrep.utils.logging_config import LogLevel, configure_logging
    >>> logger = configure_logging(level=LogLevel.INFO)
    >>> logger.log_file_error("notes/a.txt", "Permission denied", operation="read")
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Any

import orjson


class LogLevel(str, Enum):
    """Available log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Available log formats."""

    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"
    STRUCTURED = "structured"


# Higher than any level a record can carry
SILENT = logging.CRITICAL + 1

# LogRecord attributes that are not user-supplied extras
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
    | {"message", "asctime", "getMessage"}
)


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RESERVED_ATTRS}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, extras merged at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.lineno}",
        }
        entry.update(_extra_fields(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return orjson.dumps(entry, default=str).decode("utf-8")


class StructuredFormatter(logging.Formatter):
    """Human-readable line followed by ``key=value`` extras."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        pairs = " ".join(f"{k}={v}" for k, v in _extra_fields(record).items())
        return f"{line} | {pairs}" if pairs else line


_FORMATTERS: dict[LogFormat, Callable[[], logging.Formatter]] = {
    LogFormat.SIMPLE: lambda: logging.Formatter("%(levelname)s: %(message)s"),
    LogFormat.DETAILED: lambda: logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(filename)s:%(lineno)d %(message)s"
    ),
    LogFormat.JSON: JsonFormatter,
    LogFormat.STRUCTURED: StructuredFormatter,
}


class SearchLogger:
    """
    Wrapper around the stdlib logger that extgrep writes diagnostics to.

    Args:
        name: Logger name; handlers already attached to it are replaced
        level: Threshold for the logger and every handler
        format_type: Line format shared by all handlers
        log_file: Target of the rotating file handler
        max_file_size: Rotation size in bytes
        backup_count: Number of rotated files kept
        enable_console: Attach a stderr handler
        enable_file: Attach the file handler (needs ``log_file``)
    """

    def __init__(
        self,
        name: str = "extgrep",
        level: LogLevel = LogLevel.WARNING,
        format_type: LogFormat = LogFormat.SIMPLE,
        log_file: Path | None = None,
        max_file_size: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        enable_console: bool = True,
        enable_file: bool = False,
    ):
        self.name = name
        self.format_type = format_type
        self.log_file = log_file

        self.logger = logging.getLogger(name)
        self.logger.propagate = False
        self.logger.handlers.clear()

        handlers: list[logging.Handler] = []
        if enable_console:
            handlers.append(logging.StreamHandler(sys.stderr))
        if enable_file and log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(
                logging.handlers.RotatingFileHandler(
                    log_file, maxBytes=max_file_size, backupCount=backup_count, encoding="utf-8"
                )
            )
        for handler in handlers:
            handler.setFormatter(_FORMATTERS[format_type]())
            self.logger.addHandler(handler)

        self.set_level(level)

    def set_level(self, level: LogLevel) -> None:
        """Move the logger and all of its handlers to ``level``."""
        self.level = level
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def silence(self) -> None:
        """Drop every record, warnings included, until the next ``set_level``."""
        self.logger.setLevel(SILENT)

    def debug(self, message: str, **fields: Any) -> None:
        self.logger.debug(message, extra=fields)

    def info(self, message: str, **fields: Any) -> None:
        self.logger.info(message, extra=fields)

    def warning(self, message: str, **fields: Any) -> None:
        self.logger.warning(message, extra=fields)

    def log_search_start(self, query: str, root: str, extension: str, **fields: Any) -> None:
        self.info(
            f"Starting search for '{query}' in .{extension} files under {root}",
            event="search_start",
            query=query,
            root=root,
            extension=extension,
            **fields,
        )

    def log_traversal_stats(self, root: str, candidates: int, elapsed_ms: float) -> None:
        self.debug(
            f"Traversal stats: root={root}, candidates={candidates}, time={elapsed_ms:.2f}ms",
            event="traversal_stats",
            root=root,
            candidates=candidates,
            elapsed_ms=elapsed_ms,
        )

    def log_search_complete(
        self, query: str, files_matched: int, elapsed_ms: float, **fields: Any
    ) -> None:
        self.info(
            f"Search completed: query='{query}', files_matched={files_matched}, "
            f"time={elapsed_ms:.2f}ms",
            event="search_complete",
            query=query,
            files_matched=files_matched,
            elapsed_ms=elapsed_ms,
            **fields,
        )

    def log_file_error(self, file_path: str, error: str, operation: str = "read") -> None:
        """A path the run skipped; logged as a warning so it shows by default."""
        self.warning(
            f"File error: {file_path} - {error}",
            event="file_error",
            operation=operation,
            file_path=file_path,
            error=error,
        )


_global_logger: SearchLogger | None = None


def get_logger() -> SearchLogger:
    """Return the process-wide logger, creating a default one on first use."""
    global _global_logger
    if _global_logger is None:
        _global_logger = SearchLogger()
    return _global_logger


def configure_logging(
    level: LogLevel = LogLevel.WARNING,
    format_type: LogFormat = LogFormat.SIMPLE,
    log_file: Path | None = None,
    enable_console: bool = True,
    enable_file: bool = False,
    **kwargs: Any,
) -> SearchLogger:
    """Replace the process-wide logger with a newly configured one."""
    global _global_logger
    _global_logger = SearchLogger(
        level=level,
        format_type=format_type,
        log_file=log_file,
        enable_console=enable_console,
        enable_file=enable_file,
        **kwargs,
    )
    return _global_logger


def disable_logging() -> None:
    get_logger().silence()


def enable_debug_logging() -> None:
    get_logger().set_level(LogLevel.DEBUG)
