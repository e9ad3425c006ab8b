"""
Output formatting module for extgrep.

Key Functions:
    format_result: Main entry point for formatting results in any supported format
    format_header: The "Starting search" banner printed before text results
    format_text: Plain text listing with optional occurrence counts
    to_json_bytes: JSON serialization using orjson

Example:
    >>> from extgrep.utils.formatter import format_text
    >>> print(format_text(result, show_count=True))
    Files found: 2
        2 | a.txt
        1 | b.txt
    Total matches: 3
"""

from __future__ import annotations

from dataclasses import asdict

import orjson

from ..core.config import SearchConfig
from ..core.types import OutputFormat, SearchResult

COUNT_WIDTH = 5


def format_header(cfg: SearchConfig) -> str:
    """Describe the search about to run."""
    return (
        f"Starting search; Directory: {cfg.root} and subfolders;\n"
        f"Extension: .{cfg.extension}, case-sensitive: {str(cfg.extension_case_sensitive).lower()}; "
        f"String: {cfg.query}, case-sensitive: {str(cfg.query_case_sensitive).lower()}\n"
    )


def format_match_line(path: str, count: int, show_count: bool) -> str:
    if show_count:
        return f"{count:>{COUNT_WIDTH}} | {path}"
    return path


def format_text(result: SearchResult, extension: str = "", show_count: bool = False) -> str:
    """
    Format results as human-readable lines.

    An empty candidate set and an empty match set produce different messages.
    """
    if result.no_files_found:
        return f"No {extension} files found"
    if not result.matches:
        return "No matches found"

    out = [f"Files found: {len(result.matches)}"]
    for m in result.matches:
        out.append(format_match_line(str(m.path), m.count, show_count))
    out.append(f"Total matches: {result.total_matches}")
    return "\n".join(out)


def to_json_bytes(result: SearchResult) -> bytes:
    """Serialize results to indented JSON with orjson."""
    payload = {
        "matches": [{"path": str(m.path), "count": m.count} for m in result.matches],
        "candidates": result.candidates,
        "total_matches": result.total_matches,
        "stats": asdict(result.stats),
    }
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2)


def format_result(
    result: SearchResult,
    fmt: OutputFormat,
    extension: str = "",
    show_count: bool = False,
) -> str:
    """Format search results according to the specified output format."""
    if fmt == OutputFormat.JSON:
        return to_json_bytes(result).decode("utf-8")
    return format_text(result, extension=extension, show_count=show_count)
