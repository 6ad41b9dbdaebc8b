"""Command-line interface for assetgnome.

- app: The Typer application object, the single CLI entrypoint.
- console: Rich Console instance for consistent, styled output.
"""

from assetgnome.cli.commands import app, console

__all__ = ["app", "console"]
