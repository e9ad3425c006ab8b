"""
Core functionality for the extgrep package.

- The ExtSearch engine
- SearchConfig
- Result data types
"""

from .api import ExtSearch, search
from .config import SearchConfig
from .types import Match, OutputFormat, SearchResult, SearchStats

__all__ = [
    "ExtSearch",
    "search",
    "SearchConfig",
    "Match",
    "OutputFormat",
    "SearchResult",
    "SearchStats",
]
