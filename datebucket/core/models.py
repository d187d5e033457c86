"""Data models for datebucket."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class FailureCategory(Enum):
    """Per-file failure kinds that never abort a batch."""

    DATE_FORMAT = "date_format"
    DIRECTORY_CREATE = "directory_create"
    MOVE = "move"


@dataclass(frozen=True)
class FileRecord:
    """A plain file from the scanned folder with a readable creation time."""

    creation_timestamp: int  # whole seconds since the Unix epoch
    source_path: Path

    @property
    def original_filename(self) -> str:
        """Original filename without path."""
        return self.source_path.name


@dataclass
class ScanResult:
    """Result of scanning a directory."""

    source_root: Path
    total_entries: int = 0

    files: list[FileRecord] = field(default_factory=list)
    # Files whose creation time could not be read
    skipped: list[Path] = field(default_factory=list)
    errors: list[tuple[Path, str]] = field(default_factory=list)

    scan_duration_seconds: float = 0.0

    def add_file(self, record: FileRecord) -> None:
        """Add a file record to the result."""
        self.files.append(record)

    def add_skipped(self, path: Path) -> None:
        """Record a file without a readable creation time."""
        self.skipped.append(path)

    def add_error(self, path: Path, error: str) -> None:
        """Record a file whose metadata could not be read."""
        self.errors.append((path, error))


@dataclass
class FileFailure:
    """A file that could not be organized."""

    path: Path
    category: FailureCategory
    message: str


@dataclass
class OrganizeResult:
    """Outcome of one organize run."""

    source_root: Path
    dry_run: bool = False

    moved: list[tuple[Path, Path]] = field(default_factory=list)
    unmatched: list[Path] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)
    directories_created: list[Path] = field(default_factory=list)

    @property
    def moved_count(self) -> int:
        return len(self.moved)

    @property
    def unmatched_count(self) -> int:
        return len(self.unmatched)

    @property
    def failed_count(self) -> int:
        return len(self.failures)

    def add_moved(self, source: Path, destination: Path) -> None:
        self.moved.append((source, destination))

    def add_unmatched(self, path: Path) -> None:
        self.unmatched.append(path)

    def add_failure(self, path: Path, category: FailureCategory, message: str) -> None:
        self.failures.append(FileFailure(path, category, message))

    def failures_by_category(self) -> dict[str, int]:
        """Failure counts keyed by category value."""
        counts: dict[str, int] = {}
        for failure in self.failures:
            key = failure.category.value
            counts[key] = counts.get(key, 0) + 1
        return counts
