"""Command-line interface for reticle.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Paint-sequence tables, JSON and SVG previews
- Active configuration editing
- Preset management with import/export
- Favorites
"""

from reticle.cli.app import cli, main

__all__ = ["cli", "main"]
