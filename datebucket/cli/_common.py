"""Shared state for datebucket CLI commands."""

from rich.console import Console


# Initialize console (shared across all commands)
console = Console()
