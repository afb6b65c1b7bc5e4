"""Conversion between server wire dates and display strings.

`DateFormatter` wraps one frozen `FormatterConfig` and exposes the
parse/format operations used by presentation code. The object holds no
mutable state: every call builds its own timezone-aware values, so a
single instance can be shared across threads.

Usage example:
    formatter = DateFormatter(load_config())
    when = formatter.parse_server("2012-04-22T04:20:00")
    formatter.format_date_time(when)  # 'Apr 22 04:20 am'

A process-wide instance is available from `shared_date_formatter()`.
"""

from __future__ import annotations

import logging
import re
import threading
from datetime import datetime, timezone, tzinfo
from typing import Optional

from .config import FormatterConfig, load_config
from .errors import UnparsableDateError
from .schemas import DateInput, RawDateLike, to_date_like
from .utils import (
    MONTH_ABBR,
    WEEKDAY_ABBR,
    ensure_utc,
    format_wire,
    parse_wire_string,
    resolve_timezone,
    to_zone,
)

logger = logging.getLogger(__name__)


class DateFormatter:
    """Parses server wire strings and renders display strings.

    Args:
        config: Formatter configuration. Defaults to `load_config()`.
    """

    def __init__(self, config: Optional[FormatterConfig] = None) -> None:
        self._config = config if config is not None else load_config()
        self._local_zone: Optional[tzinfo] = (
            resolve_timezone(self._config.local_timezone)
            if self._config.local_timezone
            else None
        )
        # Most specific first; the offset form accepts a trailing Z as well
        self._parse_formats = (
            self._config.server_datetime_format,
            self._config.server_datetime_format + "%z",
            self._config.server_date_format,
        )
        self._shape = re.compile(self._config.server_value_shape)

    @property
    def config(self) -> FormatterConfig:
        return self._config

    def _zone(self, convert_to_local: bool) -> Optional[tzinfo]:
        # None selects the host timezone in the helpers
        return self._local_zone if convert_to_local else timezone.utc

    def _in_zone(self, value: datetime, convert_to_local: bool) -> datetime:
        return to_zone(value, self._zone(convert_to_local))

    # ---------------------- Server wire format ----------------------

    def parse_server_strict(
        self, value: str, convert_to_local: bool = False
    ) -> datetime:
        """Parse a server wire string into an aware UTC datetime.

        Date-only values (and datetimes without an offset) are read in UTC,
        or in the local timezone when `convert_to_local` is set. Reading
        '2012-04-22' as local midnight keeps day-only values on the right
        calendar day once displayed locally.

        Raises:
            UnparsableDateError: If the value is not a wire-format string.
        """

        if not isinstance(value, str) or not value.strip():
            raise UnparsableDateError(
                "Expected a non-empty server date string", {"value": repr(value)}
            )
        return parse_wire_string(
            value,
            self._parse_formats,
            self._zone(convert_to_local),
            shape=self._shape,
        )

    def parse_server(
        self, value: Optional[str], convert_to_local: bool = False
    ) -> Optional[datetime]:
        """Parse a server wire string; return None when it does not match."""

        try:
            return self.parse_server_strict(value, convert_to_local)
        except UnparsableDateError as exc:
            logger.debug("Unparsable server date: %s", exc.details)
            return None

    def format_server_date(self, value: datetime) -> str:
        """Return the date part as a server wire string, in UTC."""
        return format_wire(ensure_utc(value), self._config.server_date_format)

    def format_server_datetime(self, value: datetime) -> str:
        """Return date and time as a server wire string, in UTC."""
        return format_wire(ensure_utc(value), self._config.server_datetime_format)

    # ---------------------- Display strings ----------------------

    def format_abbreviated(self, value: datetime, convert_to_local: bool = False) -> str:
        """Month and day, e.g. 'Apr 22'."""
        local = self._in_zone(value, convert_to_local)
        return f"{MONTH_ABBR[local.month - 1]} {local.day:02d}"

    def format_month_day_year(
        self, value: datetime, convert_to_local: bool = False
    ) -> str:
        """Month, day and year, e.g. 'Apr 22, 1985'."""
        local = self._in_zone(value, convert_to_local)
        return f"{MONTH_ABBR[local.month - 1]} {local.day:02d}, {local.year}"

    def format_date_time(self, value: datetime, convert_to_local: bool = False) -> str:
        """Month, day and 12-hour time, e.g. 'Apr 22 04:20 am'."""
        local = self._in_zone(value, convert_to_local)
        hour = local.hour % 12 or 12
        meridiem = "am" if local.hour < 12 else "pm"
        return (
            f"{MONTH_ABBR[local.month - 1]} {local.day:02d} "
            f"{hour:02d}:{local.minute:02d} {meridiem}"
        )

    def format_recent_date_time(
        self, value: datetime, convert_to_local: bool = False
    ) -> str:
        """Relative phrasing for recent instants, `format_date_time` otherwise.

        Ages under `recent_seconds_window` read 'N seconds ago', ages under
        `recent_minutes_window` read 'N minutes ago'. Ages under a minute
        always use seconds, and sub-second ages read '1 second ago'.
        Future instants always use the absolute form.
        """

        elapsed = (datetime.now(timezone.utc) - ensure_utc(value)).total_seconds()
        if 0 <= elapsed < self._config.recent_minutes_window:
            minutes = int(elapsed // 60)
            if elapsed < self._config.recent_seconds_window or minutes == 0:
                seconds = max(int(elapsed), 1)
                return f"{seconds} second{'s' if seconds != 1 else ''} ago"
            return f"{minutes} minute{'s' if minutes != 1 else ''} ago"
        return self.format_date_time(value, convert_to_local)

    def format_weekday_date(self, value: datetime) -> str:
        """Weekday, month, day and year in UTC, e.g. 'Sun Apr 22 2012'.

        Always four tokens separated by single spaces.
        """
        utc_value = ensure_utc(value)
        return (
            f"{WEEKDAY_ABBR[utc_value.weekday()]} {MONTH_ABBR[utc_value.month - 1]} "
            f"{utc_value.day:02d} {utc_value.year}"
        )

    # ---------------------- Ranges ----------------------

    def _normalize(
        self, value: RawDateLike, convert_to_local: bool
    ) -> Optional[datetime]:
        try:
            item = to_date_like(value, self._zone(convert_to_local))
        except (OverflowError, ValueError):
            # host-local midnight of a date at the edge of datetime's range
            logger.debug("Date endpoint out of range: %r", value)
            return None
        if isinstance(item, DateInput):
            return ensure_utc(item.value)
        return self.parse_server(item.value, convert_to_local)

    def format_date_range(
        self,
        start: RawDateLike,
        end: RawDateLike,
        convert_to_local: bool = False,
    ) -> str:
        """Human readable range between two date-like endpoints.

        Endpoints may be wire strings or date values and are ordered
        chronologically before rendering. Shared parts are collapsed:

            Apr 22, 2012
            Apr 22 - 25, 2012
            Apr 22 - May 03, 2012
            Dec 30, 2011 - Jan 02, 2012

        Returns `unknown_range_text` when an endpoint cannot be parsed.
        """

        first = self._normalize(start, convert_to_local)
        last = self._normalize(end, convert_to_local)
        if first is None or last is None:
            return self._config.unknown_range_text
        if last < first:
            first, last = last, first

        a = self._in_zone(first, convert_to_local)
        b = self._in_zone(last, convert_to_local)
        sep = self._config.range_separator
        if a.date() == b.date():
            return self.format_month_day_year(a, convert_to_local)
        if (a.year, a.month) == (b.year, b.month):
            return f"{self.format_abbreviated(a, convert_to_local)}{sep}{b.day:02d}, {b.year}"
        if a.year == b.year:
            return (
                f"{self.format_abbreviated(a, convert_to_local)}{sep}"
                f"{self.format_month_day_year(b, convert_to_local)}"
            )
        return (
            f"{self.format_month_day_year(a, convert_to_local)}{sep}"
            f"{self.format_month_day_year(b, convert_to_local)}"
        )


_shared_instance: Optional[DateFormatter] = None
_shared_lock = threading.Lock()


def shared_date_formatter() -> DateFormatter:
    """Return the process-wide formatter, building it on first use."""

    global _shared_instance
    if _shared_instance is None:
        with _shared_lock:
            if _shared_instance is None:
                _shared_instance = DateFormatter(load_config())
                logger.debug("Created shared date formatter")
    return _shared_instance
