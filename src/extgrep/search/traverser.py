"""
Directory traversal for extgrep.

Walks a root directory depth-first and returns the files whose extension
matches a target extension. Siblings are visited in the order ``os.scandir``
yields them; no sorting is applied, so the order is stable only for an
unchanged filesystem.

A directory that cannot be listed contributes nothing, and an entry whose type
cannot be resolved (a symlink loop, a link through a regular file) is skipped.
Either failure is recorded and logged, and the rest of the walk goes on.

Example:
    >>> from extgrep.search.traverser import find_files
    >>> find_files("docs", "md")
    [PosixPath('docs/index.md'), PosixPath('docs/guide/setup.md')]
"""

from __future__ import annotations

import os
from pathlib import Path

from ..utils.error_handling import ErrorCollector, handle_file_error
from ..utils.logging_config import SearchLogger


def _extension_of(name: str) -> str:
    # "notes.txt" -> "txt", "..txt" -> "txt", ".bashrc" -> "", "archive.tar.gz" -> "gz"
    dot = name.rfind(".")
    return name[dot + 1 :] if dot > 0 else ""


def extension_matches(path: str | Path, extension: str, case_sensitive: bool = False) -> bool:
    """
    Check whether the file name's final extension equals ``extension``.

    ``extension`` is given without its dot. Comparison is exact when
    ``case_sensitive`` is true, otherwise both sides are uppercased.

    Example:
        >>> extension_matches("Foo.TXT", "txt")
        True
        >>> extension_matches("Foo.TXT", "txt", case_sensitive=True)
        False
    """
    actual = _extension_of(os.path.basename(os.fspath(path)))
    if not actual:
        return False
    if case_sensitive:
        return actual == extension
    return actual.upper() == extension.upper()


def _walk(
    directory: Path,
    extension: str,
    case_sensitive: bool,
    errors: ErrorCollector | None,
    logger: SearchLogger | None,
) -> list[Path]:
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        handle_file_error(directory, "list", e, errors, logger)
        return []

    found: list[Path] = []
    for entry in entries:
        path = directory / entry.name
        # is_dir() follows symlinks; only a dangling link reports False,
        # loops and links through a file raise
        try:
            is_dir = entry.is_dir()
        except OSError as e:
            handle_file_error(path, "stat", e, errors, logger)
            continue
        if is_dir:
            found.extend(_walk(path, extension, case_sensitive, errors, logger))
        elif extension_matches(entry.name, extension, case_sensitive):
            found.append(path)
    return found


def find_files(
    root: str | Path,
    extension: str,
    case_sensitive: bool = False,
    *,
    errors: ErrorCollector | None = None,
    logger: SearchLogger | None = None,
) -> list[Path]:
    """
    Return every file under ``root`` whose extension matches, depth-first.

    Args:
        root: Directory to walk. Paths in the result are built from it, so a
            relative root yields relative paths.
        extension: Target extension without its leading dot
        case_sensitive: Compare extensions exactly instead of case-folded
        errors: Collector receiving a TraversalError per skipped path
        logger: Logger used to report skipped paths

    Returns:
        Matching file paths in traversal order; empty when none match.
    """
    return _walk(Path(root), extension, case_sensitive, errors, logger)
