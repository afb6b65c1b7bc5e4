"""Utility functions for parsing and timezone handling.

This package includes the wire-format parsing helpers and calendar name
tables used by the formatter.
"""

from .date_parser import (
    MONTH_ABBR,
    WEEKDAY_ABBR,
    ensure_utc,
    format_wire,
    parse_wire_string,
    resolve_timezone,
    to_zone,
)

__all__ = [
    "MONTH_ABBR",
    "WEEKDAY_ABBR",
    "ensure_utc",
    "format_wire",
    "parse_wire_string",
    "resolve_timezone",
    "to_zone",
]
