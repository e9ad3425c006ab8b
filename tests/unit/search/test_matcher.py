"""Tests for extgrep.search.matcher module."""

from __future__ import annotations

from pathlib import Path

import pytest

from extgrep.search.matcher import compile_pattern, count_in_text, count_matches
from extgrep.utils.error_handling import ErrorCategory, ErrorSeverity, PatternError

pytestmark = pytest.mark.unit


class TestCompilePattern:
    """Tests for compile_pattern function."""

    def test_case_insensitive_by_default(self):
        assert count_in_text("HELLO hello", compile_pattern("hello")) == 2

    def test_case_sensitive(self):
        assert count_in_text("HELLO hello", compile_pattern("hello", case_sensitive=True)) == 1

    def test_invalid_pattern(self):
        with pytest.raises(PatternError) as exc_info:
            compile_pattern("foo(")
        err = exc_info.value
        assert err.pattern == "foo("
        assert err.category == ErrorCategory.PATTERN
        assert err.severity == ErrorSeverity.CRITICAL


class TestCountInText:
    """Tests for count_in_text function."""

    def test_non_overlapping(self):
        assert count_in_text("aaaa", compile_pattern("aa")) == 2

    def test_metacharacters_are_regex(self):
        pattern = compile_pattern("a.b")
        assert count_in_text("axb", pattern) == 1
        assert count_in_text("a.b", pattern) == 1

    def test_not_anchored(self):
        assert count_in_text("xx foo yy\nfoo", compile_pattern("foo")) == 2

    def test_no_match(self):
        assert count_in_text("bar", compile_pattern("foo")) == 0

    def test_empty_pattern_matches_every_position(self):
        assert count_in_text("abc", compile_pattern("")) == 4
        assert count_in_text("", compile_pattern("")) == 1

    def test_case_sensitivity_of_query(self):
        assert count_in_text("hello", compile_pattern("Hello", case_sensitive=True)) == 0
        assert count_in_text("hello", compile_pattern("Hello", case_sensitive=False)) == 1


class TestCountMatches:
    """Tests for count_matches function."""

    def test_reads_whole_file(self, tmp_path: Path):
        f = tmp_path / "a.txt"
        f.write_text("foo foo bar\n" * 3, encoding="utf-8")
        assert count_matches(f, compile_pattern("foo")) == 6

    def test_multiline_pattern(self, tmp_path: Path):
        f = tmp_path / "a.txt"
        f.write_text("end\nstart", encoding="utf-8")
        assert count_matches(f, compile_pattern(r"end\nstart")) == 1

    def test_crlf_preserved(self, tmp_path: Path):
        f = tmp_path / "a.txt"
        f.write_bytes(b"one\r\ntwo\r\n")
        assert count_matches(f, compile_pattern(r"\r\n")) == 2

    def test_invalid_bytes_replaced(self, tmp_path: Path):
        f = tmp_path / "a.txt"
        f.write_bytes(b"foo\xff\xfefoo")
        assert count_matches(f, compile_pattern("foo")) == 2

    def test_other_encoding(self, tmp_path: Path):
        f = tmp_path / "a.txt"
        f.write_text("café CAFÉ", encoding="latin-1")
        assert count_matches(f, compile_pattern("café"), encoding="latin-1") == 2

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(OSError):
            count_matches(tmp_path / "missing.txt", compile_pattern("foo"))
