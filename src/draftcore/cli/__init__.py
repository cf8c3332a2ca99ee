"""Command-line interface for draftcore.

This module provides the CLI using Typer with rich output for
inspecting drawings and applying single edits from a shell.

Key features:
- Document summaries with entity tables
- Snap, intersection, trim and extend commands
- Detailed error reporting
"""

from draftcore.cli.app import cli, main

__all__ = ["cli", "main"]
