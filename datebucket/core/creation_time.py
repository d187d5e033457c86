"""Filesystem creation time lookup."""

import logging
import os
import time
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class CreationTimeReader:
    """Reads file creation times as whole seconds since the Unix epoch."""

    def __init__(self, fallback_to_ctime: bool = False):
        """
        Initialize the reader.

        Args:
            fallback_to_ctime: Use st_ctime (inode change time) when the
                platform does not record a creation time
        """
        self.fallback_to_ctime = fallback_to_ctime

    def read(self, file_path: Path) -> Optional[int]:
        """
        Get the creation time of a file.

        Args:
            file_path: Path to the file

        Returns:
            Seconds since the epoch, or None if the creation time is unavailable

        Raises:
            OSError: If the file metadata cannot be read
        """
        stat = file_path.stat()

        if hasattr(stat, "st_birthtime"):
            # macOS, BSD, Windows on Python 3.12+
            seconds = stat.st_birthtime
        elif os.name == "nt":
            # Windows: st_ctime is creation time
            seconds = stat.st_ctime
        elif self.fallback_to_ctime:
            logger.debug(f"Using change time as creation time for {file_path}")
            seconds = stat.st_ctime
        else:
            return None

        return self._to_epoch_seconds(seconds)

    @staticmethod
    def _to_epoch_seconds(seconds: float) -> int:
        # Times before the epoch are replaced by the current time
        if seconds < 0:
            return int(time.time())
        return int(seconds)
