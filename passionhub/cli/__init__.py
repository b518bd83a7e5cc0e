"""CLI commands for Passion Hub.

This package provides the command-line interface for browsing and
writing journal entries.
"""

from passionhub.cli.main import cli, main

__all__ = ["cli", "main"]
