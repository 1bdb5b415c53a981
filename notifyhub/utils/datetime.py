"""Timezone resolution and conversions between stored and domain datetimes.

Timestamps live in the database as naive wall-clock values in the
application's timezone; the domain always sees them timezone aware.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


def resolve_timezone(name: str | None) -> tzinfo:
    """Return the zone named by an IANA key or a ``UTC±HH[:MM]`` offset.

    Empty or unknown names resolve to UTC.
    """

    tz_name = (name or "").strip()
    if not tz_name:
        return timezone.utc

    match = _OFFSET_PATTERN.match(tz_name)
    if match:
        sign = -1 if match.group("sign") == "-" else 1
        offset = timedelta(
            hours=int(match.group("hours")), minutes=int(match.group("minutes") or 0)
        )
        return timezone(sign * offset)

    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


def now_in(tz: tzinfo) -> datetime:
    return datetime.now(tz=tz)


def localize(value: datetime | None, tz: tzinfo) -> datetime | None:
    """Express ``value`` in ``tz``; naive values are taken as already in ``tz``."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def to_storage(value: datetime | None, tz: tzinfo) -> datetime | None:
    """Return the naive wall-clock form of ``value`` in ``tz``."""

    localized = localize(value, tz)
    return localized.replace(tzinfo=None) if localized is not None else None
