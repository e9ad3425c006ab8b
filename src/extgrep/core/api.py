"""
Main API module for extgrep.

ExtSearch runs one search: it compiles the query, walks the root directory for
files with the configured extension, counts matches in each candidate and
returns the files that matched, in traversal order.

Fatal problems (a malformed query, a missing root directory) raise before any
result is produced. Unreadable directories and files are recorded in the
engine's ErrorCollector and skipped.

Example:
    >>> from extgrep import ExtSearch, SearchConfig
    >>> engine = ExtSearch(SearchConfig(extension="txt", query="foo", root="notes"))
    >>> result = engine.run()
    >>> for match in result.matches:
    ...     print(match.count, match.path)
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any

import regex as regex_mod

from ..search.matcher import compile_pattern, count_matches
from ..search.traverser import find_files
from ..utils.error_handling import (
    ErrorCollector,
    FileAccessError,
    create_error_report,
    handle_file_error,
)
from ..utils.logging_config import SearchLogger, get_logger
from ..utils.progress import NullProgress, ProgressReporter
from .config import SearchConfig
from .types import Match, SearchResult, SearchStats


class ExtSearch:
    """
    Search engine for one configuration.

    Args:
        config: What to search for and where
        progress: Reporter advanced once per candidate file; no-op by default
        logger: Logger for diagnostics; the global extgrep logger by default
    """

    def __init__(
        self,
        config: SearchConfig,
        *,
        progress: ProgressReporter | None = None,
        logger: SearchLogger | None = None,
    ) -> None:
        self.cfg = config
        self.progress: ProgressReporter = progress or NullProgress()
        self.logger = logger or get_logger()
        self.error_collector = ErrorCollector()

    def validate(self) -> regex_mod.Pattern:
        """
        Check the root and compile the query without touching any file.

        Returns:
            The compiled pattern

        Raises:
            PatternError: the query is not a valid regular expression
            FileAccessError: the root does not exist or is not a directory
        """
        root = Path(self.cfg.root)
        if not root.is_dir():
            raise FileAccessError(f"Not a directory: {root}", root)
        return compile_pattern(self.cfg.query, self.cfg.query_case_sensitive)

    def run(self) -> SearchResult:
        """
        Execute the search.

        Returns:
            SearchResult whose ``matches`` hold every candidate with at least
            one occurrence, in traversal order

        Raises:
            PatternError: the query is not a valid regular expression
            FileAccessError: the root does not exist or is not a directory
        """
        self.error_collector.clear()
        cfg = self.cfg

        pattern = self.validate()
        root = Path(cfg.root)

        self.logger.log_search_start(
            query=cfg.query,
            root=str(root),
            extension=cfg.extension,
            extension_case_sensitive=cfg.extension_case_sensitive,
            query_case_sensitive=cfg.query_case_sensitive,
        )
        t0 = time.perf_counter()

        files = find_files(
            root,
            cfg.extension,
            cfg.extension_case_sensitive,
            errors=self.error_collector,
            logger=self.logger,
        )
        self.logger.log_traversal_stats(
            str(root), len(files), (time.perf_counter() - t0) * 1000.0
        )

        stats = SearchStats()
        matches: list[Match] = []
        if files:
            self.progress.start(len(files))
            try:
                for path in files:
                    try:
                        found = count_matches(path, pattern, cfg.encoding)
                    except OSError as e:
                        handle_file_error(path, "read", e, self.error_collector, self.logger)
                        continue
                    finally:
                        self.progress.advance()
                    stats.files_scanned += 1
                    if found > 0:
                        matches.append(Match(path=path, count=found))
            finally:
                self.progress.stop()
        else:
            self.logger.debug(f"No .{cfg.extension} files under {root}")

        stats.files_matched = len(matches)
        stats.total_matches = sum(m.count for m in matches)
        stats.errors = self.error_collector.total
        stats.elapsed_ms = (time.perf_counter() - t0) * 1000.0

        self.logger.log_search_complete(
            query=cfg.query,
            files_matched=stats.files_matched,
            elapsed_ms=stats.elapsed_ms,
            errors=stats.errors,
        )
        return SearchResult(matches=matches, candidates=len(files), stats=stats)

    @property
    def errors(self) -> ErrorCollector:
        return self.error_collector

    def has_errors(self) -> bool:
        return self.error_collector.total > 0

    def get_error_summary(self) -> dict[str, Any]:
        return self.error_collector.get_summary()

    def get_error_report(self) -> str:
        return create_error_report(self.error_collector)


def search(
    extension: str,
    query: str,
    root: str | Path = ".",
    *,
    extension_case_sensitive: bool = False,
    query_case_sensitive: bool = False,
    encoding: str = "utf-8",
) -> SearchResult:
    """Convenience wrapper: build a SearchConfig and run it once."""
    cfg = SearchConfig(
        extension=extension,
        query=query,
        root=str(root),
        extension_case_sensitive=extension_case_sensitive,
        query_case_sensitive=query_case_sensitive,
        encoding=encoding,
    )
    return ExtSearch(cfg).run()
