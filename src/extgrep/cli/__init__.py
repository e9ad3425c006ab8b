"""
Command-line interface implementation.

Exposes the click command ``cli`` and the console-script entry point ``main``.
"""

from .main import cli, main

__all__ = [
    "cli",
    "main",
]
