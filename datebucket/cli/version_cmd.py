"""Version command for datebucket CLI."""

import typer

from datebucket import __version__
from datebucket.cli._common import console


def register_version(app: typer.Typer) -> None:
    """Register the version command with the Typer app."""

    @app.command()
    def version():
        """Show datebucket version."""
        console.print(f"datebucket v{__version__}")
