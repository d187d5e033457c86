"""Main CLI application for datebucket.

Registers the commands; running without a command starts the interactive
organizer.
"""

import typer

from datebucket.utils.logging import setup_logging

from datebucket.cli.organize_cmd import register_organize, run_organize
from datebucket.cli.version_cmd import register_version


app = typer.Typer(
    name="datebucket",
    help="datebucket: sort files into folders named after their creation date.",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """datebucket: sort files into folders named after their creation date."""
    setup_logging(level="DEBUG" if verbose else "INFO")
    ctx.obj = {"verbose": verbose}

    if ctx.invoked_subcommand is None:
        run_organize(verbose=verbose)


register_organize(app)
register_version(app)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
