"""
Traversal and matching.

- traverser: depth-first walk filtered by extension
- matcher: per-file regex occurrence counting
"""

from .matcher import compile_pattern, count_in_text, count_matches
from .traverser import extension_matches, find_files

__all__ = [
    "compile_pattern",
    "count_in_text",
    "count_matches",
    "extension_matches",
    "find_files",
]
