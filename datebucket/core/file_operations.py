"""File operations for datebucket."""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


class FileOperationError(Exception):
    """Error during file operation."""

    pass


class DirectoryCreateError(FileOperationError):
    """A bucket directory could not be created."""

    pass


class MoveError(FileOperationError):
    """A file could not be moved into its bucket."""

    pass


class FileOperations:
    """Directory creation and file moves, with an optional dry-run mode."""

    def __init__(self, dry_run: bool = False):
        """
        Initialize file operations handler.

        Args:
            dry_run: If True, only log what would happen
        """
        self.dry_run = dry_run
        # Directories a dry run has already reported as created
        self._planned_dirs: set[Path] = set()

    def ensure_directory(self, path: Path) -> bool:
        """
        Create a single directory level if it does not exist.

        Args:
            path: Directory path to create

        Returns:
            True if the directory was created, False if it already existed

        Raises:
            DirectoryCreateError: On any failure other than "already exists"
        """
        path = Path(path)

        if self.dry_run:
            return self._plan_directory(path)

        try:
            path.mkdir()
        except FileExistsError as e:
            if not self._is_dir(path):
                raise DirectoryCreateError(f"Cannot create directory {path}: {e}")
            logger.info(f"Directory already exists at: {path}")
            return False
        except OSError as e:
            raise DirectoryCreateError(f"Cannot create directory {path}: {e}")

        logger.info(f"Directory created at: {path}")
        return True

    def _plan_directory(self, path: Path) -> bool:
        if path in self._planned_dirs or self._is_dir(path):
            return False
        try:
            occupied = path.exists()
        except OSError as e:
            raise DirectoryCreateError(f"Cannot create directory {path}: {e}")
        if occupied:
            raise DirectoryCreateError(f"Cannot create directory {path}: not a directory")
        if not self._is_dir(path.parent):
            raise DirectoryCreateError(f"Cannot create directory {path}: parent missing")

        self._planned_dirs.add(path)
        logger.info(f"[DRY RUN] Would create directory: {path}")
        return True

    @staticmethod
    def _is_dir(path: Path) -> bool:
        try:
            return path.is_dir()
        except OSError as e:
            raise DirectoryCreateError(f"Cannot inspect {path}: {e}")

    def move_file(self, source: Path, destination: Path) -> None:
        """
        Move a file to an exact destination path.

        Args:
            source: Source file path
            destination: Destination file path (full path including filename)

        Raises:
            MoveError: If the source is gone, the destination is occupied
                or the move itself fails
        """
        source = Path(source)
        destination = Path(destination)

        try:
            if not source.is_file():
                raise MoveError(f"Source file not found: {source}")

            if destination.exists():
                raise MoveError(f"Destination already exists: {destination}")

            if self.dry_run:
                logger.info(f"[DRY RUN] Would move: {source} -> {destination}")
                return

            shutil.move(str(source), str(destination))
        except OSError as e:
            raise MoveError(f"Move failed for {source}: {e}")

        logger.info(f"Moved file from {source} to {destination}")
