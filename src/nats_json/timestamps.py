"""RFC3339 timestamps as exchanged with the server.

Formatting writes the datetime's own wall-clock fields with nine fraction
digits and no zone token; the field builder appends a literal ``Z``.
Parsing reads an instant and converts it to a display zone (the host zone
unless told otherwise), so a parsed value only formats back to the same
text when that zone is UTC.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .config import get_settings
from .errors import ConfigurationError, MalformedTimestampError

logger = logging.getLogger(__name__)

_INSTANT_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d{1,9}))?"
    r"(?:([Zz])|([+-])(\d{2}):(\d{2}))"
)

_UTC_NAMES = frozenset({"UTC", "Z", "ZULU", "ETC/UTC"})

Zone = tzinfo | str | None


def resolve_zone(zone: Zone) -> tzinfo | None:
    """Turn *zone* into a ``tzinfo``.

    ``None`` falls back to the configured zone; if that is unset too the
    result is ``None``, meaning the host's local zone.
    """
    if zone is None:
        zone = get_settings().zone
        if zone is None:
            return None
    if isinstance(zone, tzinfo):
        return zone
    if zone.upper() in _UTC_NAMES:
        return timezone.utc
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError(f"unknown zone: {zone!r}") from exc


def format_date_time(dt: datetime) -> str:
    """Format as ``YYYY-MM-DDTHH:MM:SS.nnnnnnnnn`` without a zone token."""
    nanos = dt.microsecond * 1000
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}.{nanos:09d}"
    )


def parse_date_time(text: str, zone: Zone = None) -> datetime:
    """Parse an instant sent by the server and convert it to *zone*.

    Fractions beyond microseconds are truncated.
    Raises MalformedTimestampError when *text* is not an instant.
    """
    m = _INSTANT_RE.fullmatch(text)
    if m is None:
        logger.debug("rejecting timestamp %r", text)
        raise MalformedTimestampError(text)

    year, month, day, hour, minute, second = (int(g) for g in m.group(1, 2, 3, 4, 5, 6))
    fraction = m.group(7) or ""
    micros = int(fraction[:6].ljust(6, "0"))
    target = resolve_zone(zone)

    try:
        if m.group(8):
            offset = timezone.utc
        else:
            delta = timedelta(hours=int(m.group(10)), minutes=int(m.group(11)))
            offset = timezone(-delta if m.group(9) == "-" else delta)
        instant = datetime(year, month, day, hour, minute, second, micros, tzinfo=offset)
        # the year range is 1..9999 on both sides of the conversion
        return instant.astimezone(target)
    except (ValueError, OverflowError) as exc:
        logger.debug("rejecting timestamp %r: %s", text, exc)
        raise MalformedTimestampError(text) from exc
