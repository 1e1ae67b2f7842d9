"""Date parsing for feed timestamps.

RSS channels mostly use RFC 822 dates, while Dublin Core fields carry
W3C-DTF/ISO 8601. Both land here; anything else goes through dateutil's
fuzzy-free parser before giving up.
"""

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

from dateutil import parser as dateutil_parser

from rssnorm.core.exceptions import DateParseError


def _parse_rfc822(value: str) -> datetime | None:
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None


def parse_date(value: str, assume_utc: bool = True) -> datetime:
    """Parse a feed date string into a timezone-aware datetime.

    Args:
        value: Raw date string from pubDate or dc:date.
        assume_utc: Treat naive results as UTC. When False they are
            interpreted as local time.

    Returns:
        Timezone-aware datetime.

    Raises:
        DateParseError: If the value matches no supported format.
    """
    candidate = value.strip()
    if not candidate:
        raise DateParseError(value, "empty value")

    parsed = _parse_rfc822(candidate)
    if parsed is None:
        try:
            parsed = dateutil_parser.parse(candidate)
        except (ValueError, OverflowError) as e:
            raise DateParseError(value, str(e)) from e

    if parsed.tzinfo is None:
        if assume_utc:
            parsed = parsed.replace(tzinfo=timezone.utc)
        else:
            parsed = parsed.astimezone()
    return parsed
