"""Date bucket computation for datebucket."""

from datetime import datetime, timezone
from pathlib import Path

from datebucket.utils.constants import BUCKET_DATE_FORMAT


class DateFormatError(Exception):
    """Timestamp cannot be represented as a calendar date."""

    pass


def format_bucket_date(seconds: int) -> str:
    """
    Convert seconds since the Unix epoch to a UTC bucket name.

    Args:
        seconds: Seconds since the epoch

    Returns:
        Date string like "2023.11.14"

    Raises:
        DateFormatError: If the timestamp is out of the representable range
    """
    try:
        date = datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise DateFormatError(f"Invalid timestamp {seconds}: {e}")
    return date.strftime(BUCKET_DATE_FORMAT)


class Bucketer:
    """Computes bucket folders directly under the scanned folder."""

    def __init__(self, source_root: Path):
        self.source_root = Path(source_root)

    def bucket_folder(self, seconds: int) -> Path:
        """
        Compute the bucket folder for a timestamp.

        Example:
            seconds=1700000000 -> source_root / "2023.11.14"
        """
        return self.source_root / format_bucket_date(seconds)
