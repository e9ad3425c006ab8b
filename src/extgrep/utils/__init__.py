"""
Utility modules: error handling, logging, output formatting and progress.
"""

from .error_handling import (
    ConfigurationError,
    ErrorCollector,
    FileAccessError,
    PatternError,
    PermissionError,
    SearchError,
    TraversalError,
    create_error_report,
    handle_file_error,
)
from .formatter import format_result
from .logging_config import configure_logging, disable_logging, enable_debug_logging, get_logger
from .progress import NullProgress, ProgressReporter, RichProgress

__all__ = [
    # Error handling
    "ConfigurationError",
    "ErrorCollector",
    "FileAccessError",
    "PatternError",
    "PermissionError",
    "SearchError",
    "TraversalError",
    "create_error_report",
    "handle_file_error",
    # Formatting
    "format_result",
    # Logging
    "configure_logging",
    "disable_logging",
    "enable_debug_logging",
    "get_logger",
    # Progress
    "NullProgress",
    "ProgressReporter",
    "RichProgress",
]
