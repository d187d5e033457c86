"""Organize command for datebucket CLI."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from datebucket.cli._common import console
from datebucket.cli.prompt import PromptSession, SessionOutcome
from datebucket.config import ConfigError, ConfigLoader, DateBucketConfig
from datebucket.core.creation_time import CreationTimeReader
from datebucket.core.organizer import Organizer
from datebucket.core.scanner import Scanner
from datebucket.utils.logging import setup_logging


def load_config_or_exit(config_path: Optional[Path]) -> DateBucketConfig:
    """Load and validate configuration, exiting with code 1 on errors."""
    try:
        cfg = ConfigLoader.load(config_path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    errors = ConfigLoader.validate(cfg)
    if errors:
        for error in errors:
            console.print(f"[red]Config error:[/red] {escape(error)}")
        raise typer.Exit(1)
    return cfg


def run_organize(
    config_path: Optional[Path] = None,
    dry_run: Optional[bool] = None,
    verbose: bool = False,
) -> SessionOutcome:
    """
    Run one interactive organize session.

    Args:
        config_path: Optional explicit config file
        dry_run: Override for general.dry_run_default (None keeps config value)
        verbose: Force DEBUG logging

    Returns:
        SessionOutcome of the prompt session
    """
    cfg = load_config_or_exit(config_path)

    setup_logging(
        level="DEBUG" if verbose else cfg.logging.level,
        log_file=Path(cfg.logging.file_path) if cfg.logging.log_to_file else None,
        use_colors=cfg.logging.color_output,
    )

    use_dry_run = cfg.general.dry_run_default if dry_run is None else dry_run
    if use_dry_run:
        console.print("Mode: [yellow]DRY RUN[/yellow]")

    scanner = Scanner(CreationTimeReader(fallback_to_ctime=cfg.scan.fallback_to_ctime))
    organizer = Organizer(dry_run=use_dry_run)
    session = PromptSession(
        console,
        scanner,
        organizer,
        max_attempts=cfg.general.max_attempts,
    )

    outcome = session.run()
    if outcome.completed:
        print_summary(outcome)
    return outcome


def print_summary(outcome: SessionOutcome) -> None:
    """Print the end-of-run summary table."""
    result = outcome.result
    scan_result = outcome.scan_result
    if result is None or scan_result is None:
        return

    console.print()
    title = "Organize Summary (dry run)" if result.dry_run else "Organize Summary"
    table = Table(title=title)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Source folder", escape(str(result.source_root)))
    table.add_row("Files found", str(scan_result.total_entries))
    table.add_row("Moved", str(result.moved_count))
    table.add_row("Left in place", str(result.unmatched_count))
    table.add_row("No creation time", str(len(scan_result.skipped)))
    table.add_row("Unreadable", str(len(scan_result.errors)))
    table.add_row("Failed", str(result.failed_count))
    table.add_row("Folders created", str(len(result.directories_created)))

    console.print(table)

    for category, count in sorted(result.failures_by_category().items()):
        console.print(f"  [yellow]•[/yellow] {category}: {count}")


def register_organize(app: typer.Typer) -> None:
    """Register the organize command with the Typer app."""

    @app.command()
    def organize(
        ctx: typer.Context,
        dry_run: Optional[bool] = typer.Option(
            None, "--dry-run/--no-dry-run",
            help="Only show what would be moved",
        ),
        config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
    ):
        """
        Sort a folder's images, PDFs and scripts into YYYY.MM.DD folders.

        Asks for the folder interactively. Paths wrapped in single quotes
        (as pasted by drag and drop) are accepted.
        """
        verbose = bool(ctx.obj and ctx.obj.get("verbose"))
        run_organize(config_path=config, dry_run=dry_run, verbose=verbose)
