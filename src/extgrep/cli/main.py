"""
Command-line interface for extgrep.

Usage:
    $ extgrep EXT TEXT [FLAGS]

    $ extgrep txt foo -count
    $ extgrep py "def \\w+_handler" -strc --path src
    $ extgrep LOG error -extc --format json

The flags keep their short historical spellings (``-strc``, ``-extc``,
``-count``) alongside long ones. TEXT is a regular expression.

Exit codes:
    0  search ran (with or without matches)
    1  fatal error: invalid pattern, missing directory, bad option value
    2  missing arguments; usage was printed
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from .. import __version__
from ..core.api import ExtSearch
from ..core.config import SearchConfig
from ..core.types import OutputFormat
from ..utils.error_handling import SearchError, create_error_report
from ..utils.formatter import format_header, format_result
from ..utils.logging_config import (
    LogFormat,
    LogLevel,
    configure_logging,
    disable_logging,
    enable_debug_logging,
)
from ..utils.progress import NullProgress, ProgressReporter, RichProgress

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2

USAGE_TEXT = """\
USAGE:
extgrep [EXT] [TEXT] [FLAGS]
[EXT]  file extension only, no "." required
[TEXT] string to be searched, use "" for strings containing spaces

FLAGS:
-strcase, -strc Perform a case-sensitive search regarding search string (case-insensitive by default)
-extcase, -extc Perform a case-sensitive search regarding extension (case-insensitive by default)
-count, -c      Display the amount of occurences for each file

Run 'extgrep --help' for all options."""


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("extension", required=False)
@click.argument("query", required=False)
@click.option(
    "-strcase", "-strc", "--query-case", "query_case_sensitive",
    is_flag=True, default=False,
    help="Case-sensitive match of TEXT (case-insensitive by default)",
)
@click.option(
    "-extcase", "-extc", "--ext-case", "extension_case_sensitive",
    is_flag=True, default=False,
    help="Case-sensitive match of EXT (case-insensitive by default)",
)
@click.option(
    "-count", "-c", "--count", "show_count",
    is_flag=True, default=False,
    help="Show the number of occurrences for each file",
)
@click.option(
    "--path", "root", default=".", show_default=True,
    type=click.Path(file_okay=False, path_type=str),
    help="Directory to search recursively",
)
@click.option(
    "--format", "fmt",
    type=click.Choice([e.value for e in OutputFormat]),
    default=OutputFormat.TEXT.value, show_default=True,
    help="Output format",
)
@click.option("--encoding", default="utf-8", show_default=True, help="Text encoding of files")
@click.option(
    "--progress/--no-progress", default=None,
    help="Progress bar on stderr (default: on when stderr is a terminal)",
)
# Logging and debugging options
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging")
@click.option(
    "-q", "--quiet", is_flag=True, default=False,
    help="Suppress all log output, warnings included",
)
@click.option(
    "--log-level",
    type=click.Choice([lvl.value for lvl in LogLevel]),
    default=LogLevel.WARNING.value, show_default=True,
    help="Log level",
)
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write logs to this file")
@click.option(
    "--log-format",
    type=click.Choice([f.value for f in LogFormat]),
    default=LogFormat.SIMPLE.value, show_default=True,
    help="Log format",
)
@click.option("--show-errors", is_flag=True, default=False, help="Print a report of skipped paths")
@click.version_option(__version__, prog_name="extgrep")
@click.pass_context
def cli(
    ctx: click.Context,
    extension: str | None,
    query: str | None,
    query_case_sensitive: bool,
    extension_case_sensitive: bool,
    show_count: bool,
    root: str,
    fmt: str,
    encoding: str,
    progress: bool | None,
    debug: bool,
    quiet: bool,
    log_level: str,
    log_file: str | None,
    log_format: str,
    show_errors: bool,
) -> None:
    """Count occurrences of TEXT in every EXT file under a directory tree."""
    if extension is None or query is None:
        click.echo(USAGE_TEXT)
        ctx.exit(EXIT_USAGE)

    logger = configure_logging(
        level=LogLevel(log_level),
        format_type=LogFormat(log_format),
        log_file=Path(log_file) if log_file else None,
        enable_file=bool(log_file),
        enable_console=True,
    )
    if quiet:
        disable_logging()
    elif debug:
        enable_debug_logging()

    output_format = OutputFormat(fmt)
    try:
        cfg = SearchConfig(
            extension=extension,
            query=query,
            extension_case_sensitive=extension_case_sensitive,
            query_case_sensitive=query_case_sensitive,
            root=root,
            encoding=encoding,
            show_count=show_count,
            output_format=output_format,
            show_progress=sys.stderr.isatty() if progress is None else progress,
        )
    except SearchError as e:
        click.echo(f"Error: {e.message}", err=True)
        ctx.exit(EXIT_ERROR)

    reporter: ProgressReporter = RichProgress() if cfg.show_progress else NullProgress()
    engine = ExtSearch(cfg, progress=reporter, logger=logger)

    try:
        engine.validate()
        if output_format == OutputFormat.TEXT:
            click.echo(format_header(cfg))
        result = engine.run()
    except SearchError as e:
        click.echo(f"Error: {e.message}", err=True)
        for suggestion in e.suggestions:
            click.echo(f"  hint: {suggestion}", err=True)
        ctx.exit(EXIT_ERROR)

    click.echo(
        format_result(result, output_format, extension=cfg.extension, show_count=cfg.show_count)
    )

    if show_errors and engine.has_errors():
        click.echo(engine.get_error_report(), err=True)


def main() -> None:
    cli(prog_name="extgrep")


if __name__ == "__main__":
    main()
