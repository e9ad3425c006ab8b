"""
CLI entry point for extgrep.

This module serves as the entry point when extgrep.cli is executed as a module
with `python -m extgrep.cli`.
"""

from .main import main

if __name__ == "__main__":
    main()
