"""
Shared test fixtures and utilities for extgrep tests.

This module provides the sample directory trees used across the suite and
keeps the global logger quiet between tests.
"""

from pathlib import Path

import pytest

from extgrep import SearchConfig
from extgrep.utils.logging_config import configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    """Reset the global logger so no handler outlives a test's stderr."""
    logger = configure_logging(enable_console=False)
    yield logger
    logger.logger.handlers.clear()


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    The reference scenario:

        a.txt  "foo foo bar"
        b.txt  "foo"
        c.log  "foo foo"
    """
    (tmp_path / "a.txt").write_text("foo foo bar", encoding="utf-8")
    (tmp_path / "b.txt").write_text("foo", encoding="utf-8")
    (tmp_path / "c.log").write_text("foo foo", encoding="utf-8")
    return tmp_path


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """A tree with several levels, mixed-case extensions and decoys."""
    TestDataHelper.create_file_with_content(tmp_path / "top.txt", "Hello hello HELLO")
    TestDataHelper.create_file_with_content(tmp_path / "docs" / "guide.TXT", "hello")
    TestDataHelper.create_file_with_content(tmp_path / "docs" / "deep" / "er" / "x.txt", "nothing")
    TestDataHelper.create_file_with_content(tmp_path / "docs" / "notes.md", "hello")
    TestDataHelper.create_file_with_content(tmp_path / "src" / "main.py", "hello")
    TestDataHelper.create_file_with_content(tmp_path / "src" / "txt", "hello")
    TestDataHelper.create_file_with_content(tmp_path / ".txt", "hello")
    (tmp_path / "empty_dir").mkdir()
    (tmp_path / "dir.txt").mkdir()
    return tmp_path


@pytest.fixture
def sample_config(sample_tree: Path) -> SearchConfig:
    return SearchConfig(extension="txt", query="foo", root=str(sample_tree), show_count=True)


class TestDataHelper:
    """Helper class for creating test data."""

    @staticmethod
    def create_file_with_content(path: Path, content: str, encoding: str = "utf-8"):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding=encoding)

    @staticmethod
    def relative_names(paths, root: Path) -> set[str]:
        return {Path(p).relative_to(root).as_posix() for p in paths}


@pytest.fixture
def test_helper():
    """Provide the TestDataHelper for tests."""
    return TestDataHelper()
