"""Tests for extgrep.utils.error_handling module."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from extgrep.utils.error_handling import (
    BuiltinPermissionError,
    ConfigurationError,
    ErrorCategory,
    ErrorCollector,
    ErrorInfo,
    ErrorSeverity,
    FileAccessError,
    PatternError,
    PermissionError,
    SearchError,
    TraversalError,
    create_error_report,
    handle_file_error,
)

pytestmark = pytest.mark.unit


class TestErrorInfo:
    """Tests for ErrorInfo dataclass."""

    def test_creation(self):
        info = ErrorInfo(
            category=ErrorCategory.FILE_ACCESS,
            severity=ErrorSeverity.LOW,
            message="File not found",
            file_path=Path("test.txt"),
        )
        assert info.message == "File not found"
        assert info.category == ErrorCategory.FILE_ACCESS
        assert info.suggestions == []


class TestExceptions:
    def test_search_error_defaults(self):
        err = SearchError("boom")
        assert err.category == ErrorCategory.UNKNOWN
        assert err.severity == ErrorSeverity.MEDIUM
        assert str(err) == "boom"

    def test_subclasses(self):
        assert FileAccessError("x", Path("a")).category == ErrorCategory.FILE_ACCESS
        assert PermissionError("x", Path("a")).category == ErrorCategory.PERMISSION
        assert TraversalError("x", Path("d")).category == ErrorCategory.TRAVERSAL
        assert ConfigurationError("x").category == ErrorCategory.CONFIGURATION

    def test_pattern_error(self):
        err = PatternError("bad pattern", "(")
        assert err.pattern == "("
        assert err.context["pattern"] == "("
        assert err.severity == ErrorSeverity.CRITICAL
        assert err.suggestions


class TestErrorCollector:
    """Tests for ErrorCollector class."""

    def test_add_search_error(self):
        collector = ErrorCollector()
        collector.add_error(TraversalError("no list", Path("d")))
        assert collector.total == 1
        assert collector.errors[0].category == ErrorCategory.TRAVERSAL
        assert collector.errors[0].file_path == Path("d")

    def test_add_merges_context(self):
        collector = ErrorCollector()
        collector.add_error(PatternError("bad", "("), context={"root": "."})
        assert collector.errors[0].context == {"pattern": "(", "root": "."}
        assert collector.errors[0].exception_type == "PatternError"

    def test_max_errors(self):
        collector = ErrorCollector(max_errors=2)
        for i in range(5):
            collector.add_error(SearchError(f"e{i}"))
        assert len(collector.errors) == 2
        assert collector.total == 5

    def test_critical(self):
        collector = ErrorCollector()
        assert not collector.has_critical_errors()
        collector.add_error(PatternError("bad", "("))
        assert collector.has_critical_errors()

    def test_get_summary(self):
        collector = ErrorCollector()
        collector.add_error(SearchError("err1"))
        collector.add_error(TraversalError("err2", Path("d")))
        summary = collector.get_summary()
        assert summary["total_errors"] == 2
        assert summary["by_category"] == {"unknown": 1, "traversal": 1}
        assert summary["has_critical"] is False
        assert set(summary) == {"total_errors", "by_category", "by_severity", "has_critical"}

    def test_clear(self):
        collector = ErrorCollector()
        collector.add_error(SearchError("Error"))
        collector.clear()
        assert collector.total == 0
        assert collector.errors == []


class TestHandleFileError:
    """Tests for handle_file_error function."""

    def test_list_failure_is_traversal_error(self):
        collector = ErrorCollector()
        err = handle_file_error(Path("d"), "list", BuiltinPermissionError("denied"), collector)
        assert isinstance(err, TraversalError)
        assert "Error opening d" in err.message
        assert collector.total == 1

    def test_missing_file(self):
        err = handle_file_error(Path("a.txt"), "read", FileNotFoundError("gone"))
        assert isinstance(err, FileAccessError)

    def test_permission_denied(self):
        err = handle_file_error(Path("a.txt"), "read", BuiltinPermissionError("denied"))
        assert isinstance(err, PermissionError)
        assert err.severity == ErrorSeverity.HIGH

    def test_generic_os_error(self):
        err = handle_file_error(Path("a.txt"), "read", OSError(5, "I/O error"))
        assert isinstance(err, FileAccessError)

    def test_stat_failure_is_traversal_error(self):
        loop = OSError(40, "Too many levels of symbolic links")
        err = handle_file_error(Path("d/loop"), "stat", loop)
        assert isinstance(err, TraversalError)
        assert "Error opening d/loop" in err.message

    def test_unreadable_file_is_not_traversal_error(self):
        err = handle_file_error(Path("a.txt"), "read", NotADirectoryError(20, "Not a directory"))
        assert isinstance(err, FileAccessError)

    def test_logs(self):
        logger = MagicMock()
        handle_file_error(Path("a.txt"), "read", FileNotFoundError("gone"), logger=logger)
        logger.log_file_error.assert_called_once()
        assert logger.log_file_error.call_args.kwargs["operation"] == "read"


class TestCreateErrorReport:
    def test_empty(self):
        assert "No errors" in create_error_report(ErrorCollector())

    def test_with_errors(self):
        collector = ErrorCollector()
        collector.add_error(TraversalError("Error opening locked", Path("locked")))
        report = create_error_report(collector)
        assert "Total errors: 1" in report
        assert "traversal: 1" in report
        assert "Error opening locked" in report

    def test_overflow_noted(self):
        collector = ErrorCollector(max_errors=1)
        collector.add_error(SearchError("a"))
        collector.add_error(SearchError("b"))
        assert "1 more" in create_error_report(collector)

