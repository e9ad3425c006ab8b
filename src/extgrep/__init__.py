"""
extgrep: count occurrences of a pattern in files of one extension.

extgrep walks a directory tree depth-first, keeps the files whose extension
matches (case-insensitively unless asked otherwise) and counts the
non-overlapping matches of a regular expression in each of them.

Main Classes:
    ExtSearch: Runs one search and collects recoverable errors
    SearchConfig: Immutable description of a search
    Match: A file and its occurrence count
    SearchResult: Matches in traversal order plus statistics

Example Usage:
    API:
        >>> from extgrep import ExtSearch, SearchConfig
        >>> result = ExtSearch(SearchConfig(extension="txt", query="foo")).run()
        >>> [(str(m.path), m.count) for m in result.matches]
        [('a.txt', 2), ('b.txt', 1)]

    CLI:
        $ extgrep txt foo -count
"""

__version__ = "0.1.0"

from .core.api import ExtSearch, search
from .core.config import SearchConfig
from .core.types import Match, OutputFormat, SearchResult, SearchStats
from .search.matcher import compile_pattern, count_in_text, count_matches
from .search.traverser import extension_matches, find_files
from .utils.error_handling import (
    ConfigurationError,
    FileAccessError,
    PatternError,
    PermissionError,
    SearchError,
    TraversalError,
)
from .utils.logging_config import configure_logging, disable_logging, enable_debug_logging, get_logger

__all__ = [
    # Main classes
    "ExtSearch",
    "SearchConfig",
    "search",
    # Data types
    "Match",
    "OutputFormat",
    "SearchResult",
    "SearchStats",
    # Building blocks
    "find_files",
    "extension_matches",
    "compile_pattern",
    "count_in_text",
    "count_matches",
    # Logging
    "configure_logging",
    "get_logger",
    "enable_debug_logging",
    "disable_logging",
    # Exception classes
    "SearchError",
    "ConfigurationError",
    "FileAccessError",
    "PatternError",
    "PermissionError",
    "TraversalError",
    "__version__",
]
