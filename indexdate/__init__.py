"""indexdate: date format conversions for search index documents.

    from indexdate import DateFormatService
    service = DateFormatService()
    service.format("2024-01-05T10:30:00Z", output_format="d.m.Y")
    service.timestamp_to_utc_iso(0)  # "1970-01-01T00:00:00Z"
"""

from .exceptions import DateParseError, DateRangeError, IndexDateError, PatternError
from .service import DEFAULT_OUTPUT_FORMAT, DateFormatService

__all__ = [
    "DEFAULT_OUTPUT_FORMAT",
    "DateFormatService",
    "DateParseError",
    "DateRangeError",
    "IndexDateError",
    "PatternError",
]
