"""CLI Module - Command-line interface for kidquiz.

This module provides a CLI built with Typer and Rich.

Usage:
    kidquiz --help                            Show all commands
    kidquiz analyze history.json              Performance analytics
    kidquiz recommend history.json --age 7    Next quiz recommendation
    kidquiz generate --child-id ID --age 7    Generate the next quiz
"""

from kidquiz.cli.main import app, main

__all__ = ["app", "main"]
