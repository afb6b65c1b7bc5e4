"""Server date formatter package.

Converts between the server's wire-format date strings and native
datetimes, and renders display strings: abbreviated dates, date+time,
"N minutes ago" phrasing, weekday-qualified dates and date ranges.

Usage example:
    from server_date_formatter import shared_date_formatter
    formatter = shared_date_formatter()
    formatter.format_month_day_year(formatter.parse_server("1985-04-22"))
"""

import logging

from .config import FormatterConfig, load_config
from .errors import AppError, InvalidTimezoneError, UnparsableDateError
from .formatter import DateFormatter, shared_date_formatter
from .schemas import DateInput, StringInput, to_date_like

__all__ = [
    "__version__",
    "AppError",
    "DateFormatter",
    "DateInput",
    "FormatterConfig",
    "InvalidTimezoneError",
    "StringInput",
    "UnparsableDateError",
    "load_config",
    "shared_date_formatter",
    "to_date_like",
]

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
