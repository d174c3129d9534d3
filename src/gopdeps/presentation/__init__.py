"""Presentation layer: command line entry point."""

from gopdeps.presentation.cli import main

__all__ = [
    "main",
]
