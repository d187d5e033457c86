"""Interactive folder prompt for datebucket."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from datebucket.core.models import OrganizeResult, ScanResult
from datebucket.core.organizer import Organizer
from datebucket.core.scanner import Scanner
from datebucket.utils.constants import DEFAULT_MAX_ATTEMPTS, PROMPT_LINES

logger = logging.getLogger(__name__)


def strip_quotes(raw: str) -> str:
    """
    Clean a pasted or drag-and-dropped path.

    Surrounding whitespace is removed, then one outer pair of single quotes
    if the value both starts and ends with one. Inner text is kept verbatim.

    Args:
        raw: Line as typed by the user

    Returns:
        Cleaned path string (may be empty)
    """
    trimmed = raw.strip()
    if len(trimmed) >= 2 and trimmed.startswith("'") and trimmed.endswith("'"):
        return trimmed[1:-1]
    return trimmed


@dataclass
class SessionOutcome:
    """What happened during one prompt session."""

    attempts: int = 0
    source: Optional[Path] = None
    scan_result: Optional[ScanResult] = None
    result: Optional[OrganizeResult] = None

    @property
    def completed(self) -> bool:
        """True if a folder was scanned and organized."""
        return self.result is not None


class PromptSession:
    """Asks for a folder until one can be scanned or the attempt budget runs out."""

    def __init__(
        self,
        console: Console,
        scanner: Scanner,
        organizer: Organizer,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        read_line: Optional[Callable[[], str]] = None,
    ):
        """
        Initialize the session.

        Args:
            console: Rich console used for prompts and messages
            scanner: Scanner for the chosen folder
            organizer: Organizer run on the scan result
            max_attempts: Empty inputs or failed scans allowed before giving up
            read_line: Callable returning one input line (defaults to console.input)
        """
        self.console = console
        self.scanner = scanner
        self.organizer = organizer
        self.max_attempts = max_attempts
        self.read_line = read_line or self._console_read_line
        self.attempts = 0

    def run(self) -> SessionOutcome:
        """Prompt, scan and organize once; give up after max_attempts failures."""
        outcome = SessionOutcome()

        while True:
            self._print_prompt()
            folder = strip_quotes(self.read_line())

            if not folder:
                if self._register_failure("Input was empty, try again."):
                    break
                continue

            source = Path(folder)
            try:
                scan_result = self.scanner.scan(source)
            except OSError as e:
                self.console.print(f"[red]Failed to read folder.[/red] Error: {escape(str(e))}")
                if self._register_failure("Invalid path, try again."):
                    break
                continue

            outcome.source = source
            outcome.scan_result = scan_result
            outcome.result = self.organizer.organize(scan_result)
            break

        outcome.attempts = self.attempts
        return outcome

    def _register_failure(self, retry_message: str) -> bool:
        """Count a failed attempt. Returns True when the session should end."""
        self.attempts += 1
        logger.debug(f"Attempt {self.attempts} of {self.max_attempts} failed")
        if self.attempts >= self.max_attempts:
            self.console.print("Goodbye")
            return True
        self.console.print(f"[yellow]{retry_message}[/yellow]")
        return False

    def _print_prompt(self) -> None:
        for line in PROMPT_LINES:
            self.console.print(line, markup=False)

    def _console_read_line(self) -> str:
        # End of input counts as an empty line
        try:
            return self.console.input()
        except EOFError:
            return ""
