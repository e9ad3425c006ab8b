"""
Core data types for extgrep.

Key Types:
    OutputFormat: Enumeration of supported output formats
    Match: One file that contains the query, with its occurrence count
    SearchStats: Counters and timing for a single run
    SearchResult: Matches in traversal order plus statistics

Example:
    >>> from extgrep.core.types import Match, SearchResult
    >>> result = SearchResult(matches=[Match(Path("a.txt"), 2)], candidates=3)
    >>> result.total_matches
    2
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class Match:
    """
    A file containing at least one occurrence of the query.

    Attributes:
        path: Path as produced by traversal (relative if the root was relative)
        count: Number of non-overlapping occurrences, always >= 1
    """

    path: Path
    count: int

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"Match count must be >= 1, got {self.count}")


@dataclass(slots=True)
class SearchStats:
    """
    Statistics for a search run.

    Attributes:
        files_scanned: Candidate files whose contents were read successfully
        files_matched: Files with at least one occurrence
        total_matches: Sum of occurrences across all matched files
        errors: Traversal and file-read errors absorbed during the run
        elapsed_ms: Total run time in milliseconds
    """

    files_scanned: int = 0
    files_matched: int = 0
    total_matches: int = 0
    errors: int = 0
    elapsed_ms: float = 0.0


@dataclass(slots=True)
class SearchResult:
    """
    Complete result of one run.

    ``candidates`` is the number of files whose extension matched, before any
    content was read. It separates "no files of this extension" from "no file
    contained the query".
    """

    matches: list[Match] = field(default_factory=list)
    candidates: int = 0
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def no_files_found(self) -> bool:
        return self.candidates == 0

    @property
    def no_matches(self) -> bool:
        return self.candidates > 0 and not self.matches

    @property
    def total_matches(self) -> int:
        return sum(m.count for m in self.matches)
