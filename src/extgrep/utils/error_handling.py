"""
Error handling and reporting for extgrep.

Errors met during a run fall into two groups. Traversal and file-read failures
are absorbed locally: they are classified, recorded in an ErrorCollector and
logged, and the run carries on. Pattern, configuration and missing-root errors
are raised and end the run.

Classes:
    ErrorSeverity: Error severity levels (LOW, MEDIUM, HIGH, CRITICAL)
    ErrorCategory: Error classification categories
    ErrorInfo: Detailed error information container
    ErrorCollector: Batch error collection and analysis
    SearchError: Base exception class for extgrep errors

Functions:
    handle_file_error: Classify, record and log a per-file failure
    create_error_report: Human-readable report of collected errors

Example:
    >>> from extgrep.utils.error_handling import ErrorCollector, handle_file_error
    >>> from pathlib import Path
    >>>
    >>> collector = ErrorCollector()
    >>> try:
    ...     Path("missing.txt").read_text()
    ... except OSError as e:
    ...     handle_file_error(Path("missing.txt"), "read", e, collector)
    >>> collector.get_summary()["total_errors"]
    1
"""

from __future__ import annotations

# Import built-in exceptions before defining custom ones
import builtins
import sys
import time
import traceback
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

BuiltinPermissionError = builtins.PermissionError


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error categories for classification."""

    FILE_ACCESS = "file_access"
    PERMISSION = "permission"
    TRAVERSAL = "traversal"
    PATTERN = "pattern"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


@dataclass
class ErrorInfo:
    """Detailed error information."""

    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    file_path: Path | None = None
    exception_type: str | None = None
    traceback_str: str | None = None
    timestamp: float = field(default_factory=time.time)
    context: dict[str, Any] = field(default_factory=dict)
    suggestions: list[str] = field(default_factory=list)


class SearchError(Exception):
    """Base exception for search-related errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        file_path: Path | None = None,
        suggestions: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.file_path: Path | None = file_path
        self.suggestions: list[str] = suggestions or []
        self.context: dict[str, Any] = context or {}
        self.timestamp: float = time.time()


class FileAccessError(SearchError):
    """Error accessing files."""

    def __init__(
        self, message: str, file_path: Path, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.FILE_ACCESS,
            severity=ErrorSeverity.MEDIUM,
            file_path=file_path,
            context=context,
        )


class PermissionError(SearchError):
    """Permission-related errors."""

    def __init__(
        self, message: str, file_path: Path, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.PERMISSION,
            severity=ErrorSeverity.HIGH,
            file_path=file_path,
            suggestions=[
                "Check file permissions",
                "Run with appropriate user privileges",
            ],
            context=context,
        )


class TraversalError(SearchError):
    """A directory entry could not be listed or resolved; it is skipped."""

    def __init__(
        self, message: str, file_path: Path, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.TRAVERSAL,
            severity=ErrorSeverity.MEDIUM,
            file_path=file_path,
            suggestions=["Check directory permissions"],
            context=context,
        )


class PatternError(SearchError):
    """The query could not be compiled as a regular expression."""

    def __init__(self, message: str, pattern: str, context: dict[str, Any] | None = None) -> None:
        merged_context: dict[str, Any] = {"pattern": pattern}
        if context:
            merged_context.update(context)
        super().__init__(
            message,
            category=ErrorCategory.PATTERN,
            severity=ErrorSeverity.CRITICAL,
            suggestions=[
                "The query is a regular expression; escape metacharacters such as ( [ * + ?",
            ],
            context=merged_context,
        )
        self.pattern: str = pattern


class ConfigurationError(SearchError):
    """Configuration-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            suggestions=["Run with --help to see accepted arguments"],
            context=context,
        )


class ErrorCollector:
    """Collects and manages errors during search operations."""

    def __init__(self, max_errors: int = 100) -> None:
        self.max_errors = max_errors
        self.errors: list[ErrorInfo] = []
        self.error_counts: dict[ErrorCategory, int] = {}

    def add_error(self, error: SearchError, context: dict[str, Any] | None = None) -> None:
        """Record a classified error; details beyond ``max_errors`` are only counted."""
        error_info = ErrorInfo(
            category=error.category,
            severity=error.severity,
            message=error.message,
            file_path=error.file_path,
            exception_type=type(error).__name__,
            traceback_str=traceback.format_exc() if sys.exc_info()[0] else None,
            context={**error.context, **(context or {})},
            suggestions=list(error.suggestions),
        )

        if len(self.errors) < self.max_errors:
            self.errors.append(error_info)

        # Counts keep growing past max_errors
        self.error_counts[error.category] = self.error_counts.get(error.category, 0) + 1

    def get_errors_by_category(self, category: ErrorCategory) -> list[ErrorInfo]:
        return [error for error in self.errors if error.category == category]

    def get_errors_by_severity(self, severity: ErrorSeverity) -> list[ErrorInfo]:
        return [error for error in self.errors if error.severity == severity]

    def get_critical_errors(self) -> list[ErrorInfo]:
        return self.get_errors_by_severity(ErrorSeverity.CRITICAL)

    def has_critical_errors(self) -> bool:
        return len(self.get_critical_errors()) > 0

    @property
    def total(self) -> int:
        """Number of errors seen, including those past ``max_errors``."""
        return sum(self.error_counts.values())

    def get_summary(self) -> dict[str, Any]:
        """Get error summary statistics."""
        return {
            "total_errors": self.total,
            "by_category": {k.value: v for k, v in self.error_counts.items()},
            "by_severity": {
                severity.value: len(self.get_errors_by_severity(severity))
                for severity in ErrorSeverity
            },
            "has_critical": self.has_critical_errors(),
        }

    def clear(self) -> None:
        """Clear all collected errors."""
        self.errors.clear()
        self.error_counts.clear()


# Operations on a directory entry rather than on a file's contents
TRAVERSAL_OPERATIONS = frozenset({"list", "stat"})


def handle_file_error(
    file_path: Path,
    operation: str,
    exception: OSError,
    error_collector: ErrorCollector | None = None,
    logger: Any | None = None,
) -> SearchError:
    """
    Handle file-related errors with appropriate classification and logging.

    Args:
        file_path: Path to the file or directory that caused the error
        operation: "list" or "stat" while walking, "read" while counting
        exception: The OS error that occurred
        error_collector: Optional error collector to add the error to
        logger: Optional SearchLogger to log the error

    Returns:
        The classified SearchError that was recorded
    """
    error: SearchError
    if operation in TRAVERSAL_OPERATIONS:
        error = TraversalError(f"Error opening {file_path}: {exception}", file_path)
    elif isinstance(exception, BuiltinPermissionError):
        error = PermissionError(f"Permission denied during {operation}: {exception}", file_path)
    else:
        error = FileAccessError(f"Cannot {operation} file: {exception}", file_path)

    if error_collector is not None:
        error_collector.add_error(error)

    if logger is not None:
        logger.log_file_error(str(file_path), str(error), operation=operation)

    return error


def create_error_report(error_collector: ErrorCollector) -> str:
    """Create a human-readable error report."""
    if not error_collector.errors:
        return "No errors occurred during the search operation."

    summary = error_collector.get_summary()

    report = ["Search Error Report", "=" * 50, ""]

    report.append(f"Total errors: {summary['total_errors']}")
    report.append("")

    report.append("Errors by category:")
    for category, count in summary["by_category"].items():
        report.append(f"  {category}: {count}")
    report.append("")

    report.append("Details:")
    for error in error_collector.errors:
        report.append(f"  - {error.message}")
        if error.suggestions:
            report.append(f"    Suggestions: {', '.join(error.suggestions)}")
    if error_collector.total > len(error_collector.errors):
        report.append(f"  ... {error_collector.total - len(error_collector.errors)} more")
    report.append("")

    report.append("General Suggestions:")
    report.append("  - Check file and directory permissions")
    report.append("  - Use --debug for more detailed error information")

    return "\n".join(report)
