"""Command-line interface for roughsketch.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- SVG, JSON or tabular summary output for any shape
- All fill styles selectable from the command line
- Structured logs on stderr or in a log file
"""

from roughsketch.cli.app import cli, main

__all__ = ["cli", "main"]
