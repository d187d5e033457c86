"""Pytest configuration and shared fixtures for datebucket tests."""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Generator, Optional

import pytest

from datebucket.core.creation_time import CreationTimeReader
from datebucket.core.models import FileRecord, ScanResult


# Noon UTC on the given days
TS_2023_11_14 = 1700000000
TS_2024_01_05 = 1704456000
TS_2024_02_10 = 1707566400
TS_2024_03_15 = 1710504000


# =============================================================================
# Test Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_working_directory(tmp_path, monkeypatch):
    """Run every test with tmp_path as cwd so config discovery finds nothing."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def reset_datebucket_logger():
    """Drop handlers installed by setup_logging during a test."""
    yield
    logger = logging.getLogger("datebucket")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    path = Path(tempfile.mkdtemp(prefix="datebucket_test_"))
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def source_dir(temp_dir: Path) -> Path:
    """Create a source directory within temp_dir."""
    source = temp_dir / "source"
    source.mkdir()
    return source


# =============================================================================
# Creation Time Fixtures
# =============================================================================


class StubCreationTimeReader(CreationTimeReader):
    """Returns creation times by file name instead of reading the filesystem."""

    def __init__(self, times: dict[str, Optional[int]], default: Optional[int] = None):
        super().__init__()
        self.times = times
        self.default = default

    def read(self, file_path: Path) -> Optional[int]:
        return self.times.get(file_path.name, self.default)


@pytest.fixture
def stub_reader():
    """Factory for StubCreationTimeReader."""

    def _make(times: dict[str, Optional[int]], default: Optional[int] = None):
        return StubCreationTimeReader(times, default=default)

    return _make


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def photo_and_notes(source_dir: Path) -> Path:
    """
    Source folder with one image and one text file.

    Structure:
        source/
            photo.jpg
            notes.txt
    """
    (source_dir / "photo.jpg").write_bytes(b"\xFF\xD8\xFF\xE0")
    (source_dir / "notes.txt").write_text("remember the milk")
    return source_dir


@pytest.fixture
def sample_scan_result(photo_and_notes: Path) -> ScanResult:
    """ScanResult for photo_and_notes with both files dated 2024.01.05."""
    result = ScanResult(source_root=photo_and_notes)
    for name in ("notes.txt", "photo.jpg"):
        result.add_file(FileRecord(TS_2024_01_05, photo_and_notes / name))
    result.total_entries = 2
    return result
