"""Command-line interface for lilufo.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- One subcommand per operation on a UFO package
- Structured reports rendered by a separate output layer
- Verbose logging to file on request
- Consistent error reporting with non-zero exit codes
"""

from lilufo.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
