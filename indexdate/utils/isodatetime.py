"""Search index wire format conversion utilities.

This module centralizes all transformations between Unix timestamps and
the fixed "YYYY-MM-DDTHH:MM:SSZ" strings stored in the search index. The
trailing Z is a literal: a string rendered in local time still ends in Z,
so callers wanting real UTC must ask for it with tz=UTC.

Naive datetimes are local time throughout.
"""

from datetime import datetime, tzinfo

from ..exceptions import DateParseError, DateRangeError


ISO_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def to_datetime(timestamp: int, tz: tzinfo | None = None) -> datetime:
    """Convert Unix timestamp to datetime (naive local time when tz is None).

    Raises:
        DateRangeError: If the timestamp is outside years 1..9999.
    """
    try:
        return datetime.fromtimestamp(timestamp, tz)
    except (ValueError, OverflowError, OSError) as e:
        raise DateRangeError(
            f"Timestamp out of range: {timestamp!r}",
            details={"timestamp": timestamp}
        ) from e


def to_timestamp(dt: datetime) -> int:
    """Convert datetime to Unix timestamp."""
    return int(dt.timestamp())


def render(dt: datetime, pattern: str) -> str:
    """Render dt with a strftime pattern, always padding %Y to four digits.

    Platform strftime does not pad years below 1000 on every system.
    """
    parts = []
    i = 0
    while i < len(pattern):
        if pattern[i] == "%" and i + 1 < len(pattern):
            directive = pattern[i:i + 2]
            parts.append(f"{dt.year:04d}" if directive == "%Y" else directive)
            i += 2
        else:
            parts.append(pattern[i])
            i += 1
    return dt.strftime("".join(parts))


def to_iso(timestamp: int | None, tz: tzinfo | None = None) -> str:
    """Convert Unix timestamp to wire format string. None is the epoch.

    Raises:
        DateRangeError: If the timestamp is outside years 1..9999.
    """
    dt = to_datetime(timestamp or 0, tz)
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}Z"
    )


def from_iso(iso_time: str, tz: tzinfo | None = None) -> int:
    """Convert wire format string to Unix timestamp.

    Raises:
        DateParseError: If iso_time does not match ISO_DATETIME_FORMAT,
            or names a local time the platform cannot convert.
    """
    try:
        dt = datetime.strptime(iso_time, ISO_DATETIME_FORMAT)
        if tz is not None:
            dt = dt.replace(tzinfo=tz)
        return to_timestamp(dt)
    except (TypeError, ValueError, OverflowError, OSError) as e:
        raise DateParseError(
            f"Not a wire format date: {iso_time!r}",
            details={"pattern": ISO_DATETIME_FORMAT}
        ) from e
