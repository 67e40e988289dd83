"""Command-line interface for risio."""

from risio.cli.main import cli

__all__ = ["cli"]
