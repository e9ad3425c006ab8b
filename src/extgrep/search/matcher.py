"""
Per-file pattern counting for extgrep.

The query is compiled as a regular expression exactly as given: metacharacters
are significant, so ``a.b`` also matches ``axb``. Matching is global and counts
non-overlapping occurrences over the whole file.

Functions:
    compile_pattern: Compile the query once per run
    count_in_text: Count non-overlapping matches in a string
    count_matches: Read a file fully and count matches in it

Example:
    >>> from extgrep.search.matcher import compile_pattern, count_in_text
    >>> count_in_text("aaaa", compile_pattern("aa", case_sensitive=True))
    2
"""

from __future__ import annotations

from pathlib import Path

import regex as regex_mod  # better regex engine

from ..utils.error_handling import PatternError


def compile_pattern(query: str, case_sensitive: bool = False) -> regex_mod.Pattern:
    """
    Compile ``query`` as a regex.

    Raises:
        PatternError: the query is not a valid regular expression
    """
    flags = 0 if case_sensitive else regex_mod.IGNORECASE
    try:
        return regex_mod.compile(query, flags=flags)
    except regex_mod.error as e:
        raise PatternError(f"Invalid search pattern {query!r}: {e}", query) from e


def count_in_text(text: str, pattern: regex_mod.Pattern) -> int:
    """
    Count non-overlapping matches of ``pattern`` in ``text``.

    An empty pattern matches once at every position, i.e. ``len(text) + 1``.
    """
    return sum(1 for _ in pattern.finditer(text))


def count_matches(path: Path, pattern: regex_mod.Pattern, encoding: str = "utf-8") -> int:
    """
    Read ``path`` completely and count matches of ``pattern``.

    Bytes that are invalid in ``encoding`` are replaced rather than rejected,
    so decoding never fails. Open and read failures (``OSError``) propagate
    for the caller to record.
    """
    with path.open("r", encoding=encoding, errors="replace", newline="") as f:
        text = f.read()
    return count_in_text(text, pattern)
