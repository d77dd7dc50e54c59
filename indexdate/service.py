"""Date format conversion service.

DateFormatService converts dates between configurable text patterns, Unix
timestamps and the search index wire format. Every public conversion is
best effort: unparsable input yields a sentinel (the input string itself,
or 0) instead of an exception, and a timestamp outside years 1..9999
renders as an empty string. Use parse() when failure must be told apart
from a legitimate result.
"""

import logging
from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .config import Settings
from .exceptions import DateParseError, DateRangeError, IndexDateError
from .utils import isodatetime, patterns

logger = logging.getLogger(__name__)


DEFAULT_OUTPUT_FORMAT = "%Y-%m-%d"


class DateFormatService:
    """Stateless date format conversions.

    The only configuration is the default output pattern, injected at
    construction time and never changed afterwards.
    """

    ISO_DATETIME_FORMAT = isodatetime.ISO_DATETIME_FORMAT
    SOLR_ISO_DATETIME_FORMAT = r"Y-m-d\TH:i:s\Z"

    def __init__(self, default_output_format: str | None = None):
        """Initialize the service.

        Args:
            default_output_format: Pattern used by format() when the caller
                passes no output format. Falls back to "%Y-%m-%d".
        """
        self.default_output_format = default_output_format or DEFAULT_OUTPUT_FORMAT

    @classmethod
    def from_settings(cls, settings: Settings) -> "DateFormatService":
        """Create a service using the configured default date format."""
        return cls(default_output_format=settings.default_date_format)

    def parse(
        self,
        input: str,
        input_format: str = ISO_DATETIME_FORMAT,
        timezone: tzinfo | str | None = None
    ) -> datetime:
        """Parse input with input_format in timezone.

        Args:
            input: The date string
            input_format: strftime or PHP date() style pattern
            timezone: tzinfo, IANA zone name, or None for local time

        Returns:
            The parsed datetime. Naive when timezone is None and the
            pattern carries no offset.

        Raises:
            DateParseError: If the input does not match the pattern, the
                pattern cannot be translated, or the zone is unknown.
        """
        tz = _resolve_timezone(timezone)
        pattern = patterns.to_strftime(input_format, parsing=True)
        try:
            dt = datetime.strptime(input, pattern)
        except (TypeError, ValueError) as e:
            raise DateParseError(
                f"Cannot parse {input!r} with pattern {input_format!r}",
                details={"input": input, "pattern": input_format}
            ) from e
        if dt.tzinfo is None and tz is not None:
            dt = dt.replace(tzinfo=tz)
        return dt

    def format(
        self,
        input: str = "",
        input_format: str = ISO_DATETIME_FORMAT,
        output_format: str = "",
        timezone: tzinfo | str | None = None
    ) -> str:
        """Re-render input from input_format to output_format.

        An empty output_format uses the default output pattern. Returns
        input unchanged when it cannot be parsed.
        """
        output_format = output_format or self.default_output_format
        try:
            dt = self.parse(input, input_format, timezone)
            return isodatetime.render(dt, patterns.to_strftime(output_format))
        except (IndexDateError, ValueError) as e:
            logger.debug(f"Returning date input unchanged: {e}")
            return input

    def timestamp_to_iso(self, timestamp: int | None = 0) -> str:
        """Convert Unix timestamp to wire format in local time, "" if out of range."""
        try:
            return isodatetime.to_iso(timestamp)
        except DateRangeError as e:
            logger.debug(f"Returning empty wire date: {e.message}")
            return ""

    def iso_to_timestamp(self, iso_time: str) -> int:
        """Convert local time wire format string to Unix timestamp, 0 on failure."""
        try:
            return isodatetime.from_iso(iso_time)
        except DateParseError as e:
            logger.debug(f"Returning timestamp 0: {e.message}")
            return 0

    def timestamp_to_utc_iso(self, timestamp: int | None = 0) -> str:
        """Convert Unix timestamp to wire format in UTC, "" if out of range."""
        try:
            return isodatetime.to_iso(timestamp, tz=UTC)
        except DateRangeError as e:
            logger.debug(f"Returning empty wire date: {e.message}")
            return ""

    def utc_iso_to_timestamp(self, iso_time: str) -> int:
        """Convert UTC wire format string to Unix timestamp, 0 on failure."""
        try:
            return isodatetime.from_iso(iso_time, tz=UTC)
        except DateParseError as e:
            logger.debug(f"Returning timestamp 0: {e.message}")
            return 0


def _resolve_timezone(timezone: tzinfo | str | None) -> tzinfo | None:
    if timezone is None or isinstance(timezone, tzinfo):
        return timezone
    try:
        return ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise DateParseError(
            f"Unknown timezone: {timezone!r}",
            details={"timezone": timezone}
        ) from e
