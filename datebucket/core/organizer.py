"""Per-file organize pipeline for datebucket."""

import logging
from pathlib import Path
from typing import Optional

from datebucket.core.bucketing import Bucketer, DateFormatError
from datebucket.core.classifier import matches_extension
from datebucket.core.file_operations import (
    DirectoryCreateError,
    FileOperations,
    MoveError,
)
from datebucket.core.models import FailureCategory, FileRecord, OrganizeResult, ScanResult

logger = logging.getLogger(__name__)


class Organizer:
    """Classifies, buckets and moves scanned files one at a time.

    A failure for one file is logged and recorded; the remaining files are
    still attempted.
    """

    def __init__(self, file_ops: Optional[FileOperations] = None, dry_run: bool = False):
        self.file_ops = file_ops or FileOperations(dry_run=dry_run)

    @property
    def dry_run(self) -> bool:
        return self.file_ops.dry_run

    def organize(self, scan_result: ScanResult) -> OrganizeResult:
        """
        Organize every file of a scan into date buckets.

        Args:
            scan_result: Result of Scanner.scan

        Returns:
            OrganizeResult describing moved, unmatched and failed files
        """
        result = OrganizeResult(source_root=scan_result.source_root, dry_run=self.dry_run)
        bucketer = Bucketer(scan_result.source_root)

        for record in scan_result.files:
            self._organize_file(record, bucketer, result)

        logger.debug(
            f"Organize finished: {result.moved_count} moved, "
            f"{result.unmatched_count} unmatched, {result.failed_count} failed"
        )
        return result

    def _organize_file(
        self,
        record: FileRecord,
        bucketer: Bucketer,
        result: OrganizeResult,
    ) -> None:
        source = record.source_path

        if not matches_extension(source):
            logger.debug(f"Leaving unmatched file in place: {source}")
            result.add_unmatched(source)
            return

        try:
            folder: Path = bucketer.bucket_folder(record.creation_timestamp)
        except DateFormatError as e:
            logger.error(f"Skipping {source}: {e}")
            result.add_failure(source, FailureCategory.DATE_FORMAT, str(e))
            return

        try:
            if self.file_ops.ensure_directory(folder):
                result.directories_created.append(folder)
        except DirectoryCreateError as e:
            logger.error(f"Skipping {source}: {e}")
            result.add_failure(source, FailureCategory.DIRECTORY_CREATE, str(e))
            return

        destination = folder / record.original_filename
        try:
            self.file_ops.move_file(source, destination)
        except MoveError as e:
            logger.error(f"Failed to move {source}: {e}")
            result.add_failure(source, FailureCategory.MOVE, str(e))
            return

        result.add_moved(source, destination)
