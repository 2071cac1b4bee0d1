"""
CLI module for dev-drift.

The command-line interface providing init, check, and reset commands.
"""

from cli.main import app

__all__ = ["app"]
