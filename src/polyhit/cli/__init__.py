"""Command-line interface for polyhit.

This module provides an inspection CLI using Typer with rich output.

Commands:
- classify: Containment of a point against a scene
- hit: Corner / edge / body hit-test of a screen-space cursor
- zoom: One cursor-anchored mouse wheel step
"""

from polyhit.cli.app import cli, main

__all__ = ["cli", "main"]
