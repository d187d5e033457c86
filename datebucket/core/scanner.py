"""Directory scanner for datebucket."""

import logging
import time
from pathlib import Path
from typing import Iterator, Optional

from datebucket.core.creation_time import CreationTimeReader
from datebucket.core.models import FileRecord, ScanResult

logger = logging.getLogger(__name__)


class Scanner:
    """Lists the plain files of one folder (non-recursive) with their creation times."""

    def __init__(self, creation_time_reader: Optional[CreationTimeReader] = None):
        """
        Initialize the scanner.

        Args:
            creation_time_reader: CreationTimeReader instance
        """
        self.creation_time_reader = creation_time_reader or CreationTimeReader()

    def scan(self, source_path: Path) -> ScanResult:
        """
        Scan a directory and return results.

        Args:
            source_path: Directory to scan

        Returns:
            ScanResult with one FileRecord per file with a readable creation time

        Raises:
            FileNotFoundError: If source_path does not exist
            NotADirectoryError: If source_path is not a directory
            OSError: If the directory cannot be listed
        """
        source_path = Path(source_path)

        if not source_path.exists():
            raise FileNotFoundError(f"Source path not found: {source_path}")

        if not source_path.is_dir():
            raise NotADirectoryError(f"Source path is not a directory: {source_path}")

        logger.info(f"Scanning {source_path}")
        start_time = time.time()

        result = ScanResult(source_root=source_path)

        for file_path in self._iter_files(source_path):
            result.total_entries += 1

            try:
                created = self.creation_time_reader.read(file_path)
            except OSError as e:
                logger.error(f"Cannot read metadata for {file_path}: {e}")
                result.add_error(file_path, str(e))
                continue

            if created is None:
                logger.warning(f"Creation time not available for file: {file_path}")
                result.add_skipped(file_path)
                continue

            result.add_file(FileRecord(creation_timestamp=created, source_path=file_path))

        result.scan_duration_seconds = time.time() - start_time

        logger.info(
            f"Successfully listed files in folder: {len(result.files)} files, "
            f"{len(result.skipped)} without creation time, {len(result.errors)} errors "
            f"in {result.scan_duration_seconds:.2f}s"
        )

        return result

    def _iter_files(self, source_path: Path) -> Iterator[Path]:
        """
        Iterate over the regular files directly inside source_path.

        Listing is materialized first so that a permission error surfaces
        before any file is yielded.
        """
        entries = sorted(source_path.iterdir())

        for path in entries:
            if path.is_symlink():
                continue
            if not path.is_file():
                continue
            yield path
