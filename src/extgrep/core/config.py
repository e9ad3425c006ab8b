"""
Configuration module for extgrep.

SearchConfig is built once per invocation (by the CLI or by API callers) and
handed to the traversal and matching steps. It is frozen; nothing mutates it
during a run.

Example:
    >>> from extgrep.core.config import SearchConfig
    >>> cfg = SearchConfig(extension="txt", query="foo", root="docs")
    >>> cfg.extension
    'txt'
    >>> SearchConfig(extension=".TXT", query="foo").extension
    'TXT'
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field

from ..utils.error_handling import ConfigurationError
from .types import OutputFormat


@dataclass(frozen=True, slots=True)
class SearchConfig:
    # What to look for
    extension: str
    query: str
    extension_case_sensitive: bool = False
    query_case_sensitive: bool = False

    # Where to look
    root: str = field(default=".", metadata={"help": "Directory to walk."})
    encoding: str = "utf-8"

    # Output
    show_count: bool = False
    output_format: OutputFormat = OutputFormat.TEXT
    show_progress: bool = False

    def __post_init__(self) -> None:
        # A single leading dot is tolerated: "txt" and ".txt" mean the same
        ext = self.extension[1:] if self.extension.startswith(".") else self.extension
        if not ext:
            raise ConfigurationError("Extension must not be empty", {"extension": self.extension})
        object.__setattr__(self, "extension", ext)

        if not self.encoding:
            raise ConfigurationError("Encoding must not be empty")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigurationError(
                f"Unknown encoding: {self.encoding}", {"encoding": self.encoding}
            ) from e

        if not isinstance(self.output_format, OutputFormat):
            try:
                object.__setattr__(self, "output_format", OutputFormat(self.output_format))
            except ValueError as e:
                raise ConfigurationError(
                    f"Unknown output format: {self.output_format}",
                    {"output_format": self.output_format},
                ) from e
