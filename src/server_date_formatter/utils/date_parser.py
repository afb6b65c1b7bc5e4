"""Date/time parsing helpers.

Provides strict wire-format parsing, UTC normalization and timezone
resolution. Calendar names are kept in fixed English tables so rendered
strings do not depend on the process locale.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone, tzinfo
from typing import Iterable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..errors import InvalidTimezoneError, UnparsableDateError

MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
# Indexed by datetime.weekday(), Monday == 0
WEEKDAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def _replace_z_suffix(value: str) -> str:
    if value.endswith("Z"):
        return value[:-1] + "+00:00"
    return value


def resolve_timezone(name: str) -> ZoneInfo:
    """Return the IANA zone for `name`.

    Raises:
        InvalidTimezoneError: If the zone is unknown.
    """

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidTimezoneError(
            f"Invalid timezone '{name}'", {"timezone": name, "reason": str(exc)}
        ) from exc


def ensure_utc(value: datetime) -> datetime:
    """Return `value` as an aware UTC datetime; naive values are read as UTC.

    An aware value whose UTC instant falls outside datetime's range keeps
    its wall-clock reading, labelled UTC.
    """

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except OverflowError:
        return value.replace(tzinfo=timezone.utc)


def to_zone(value: datetime, zone: Optional[tzinfo]) -> datetime:
    """Convert an instant to `zone`, or to the host timezone when `zone` is None.

    Instants that cannot be shown in `zone` without leaving datetime's
    range (the first and last hours of years 1 and 9999) stay in UTC.

    Example:
        >>> dt = datetime(2012, 4, 22, 4, 20, tzinfo=timezone.utc)
        >>> to_zone(dt, ZoneInfo("Asia/Tokyo")).hour
        13
    """

    utc_value = ensure_utc(value)
    try:
        if zone is None:
            return utc_value.astimezone()
        return utc_value.astimezone(zone)
    except OverflowError:
        return utc_value


def format_wire(value: datetime, fmt: str) -> str:
    """strftime with `%Y` always rendered as four digits.

    Example:
        >>> format_wire(datetime(999, 1, 1), "%Y-%m-%d")
        '0999-01-01'
    """

    return value.strftime(fmt.replace("%Y", f"{value.year:04d}"))


def parse_wire_string(
    value: str,
    formats: Iterable[str],
    zone: Optional[tzinfo],
    *,
    shape: Optional[re.Pattern[str]] = None,
) -> datetime:
    """Parse `value` against each pattern in `formats`, first match wins.

    `shape`, when given, must match the whole stripped value first;
    strptime alone also accepts unpadded fields such as '2012-4-2'.
    Naive results are placed in `zone` (host timezone when None); values
    carrying an explicit offset keep it. The result is always aware UTC.

    Raises:
        UnparsableDateError: If no pattern matches, or the value cannot be
            placed on the UTC timeline.
    """

    stripped = value.strip()
    if shape is not None and not shape.fullmatch(stripped):
        raise UnparsableDateError(
            "Value does not match the server date format", {"value": value}
        )
    text = _replace_z_suffix(stripped)
    for fmt in formats:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        try:
            if parsed.tzinfo is None:
                if zone is None:
                    parsed = parsed.astimezone()
                else:
                    parsed = parsed.replace(tzinfo=zone)
            return parsed.astimezone(timezone.utc)
        except (ValueError, OverflowError) as exc:
            raise UnparsableDateError(
                "Value is outside the supported date range", {"value": value}
            ) from exc
    raise UnparsableDateError(
        "Value does not match the server date format", {"value": value}
    )
