"""Command-line interface for fontgroups.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Upload, list, preview and delete fonts
- Create, update, list and delete font groups
- Back up and restore the JSON database
"""

from fontgroups.cli.app import cli, main

__all__ = ["cli", "main"]
