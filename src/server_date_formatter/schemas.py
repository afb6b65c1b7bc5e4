"""Pydantic schemas for date-like inputs.

Range formatting accepts either a server wire string or a native date
value for each endpoint. These models make that choice explicit as a
tagged variant, so the normalization step has one place to look.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone, tzinfo
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class StringInput(BaseModel):
    """A server wire-format string, e.g. '2012-04-22' or '2012-04-22T04:20:00'."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["string"] = "string"
    value: str


class DateInput(BaseModel):
    """A native date value.

    Plain dates are widened to midnight in the zone chosen by the caller
    (see `to_date_like`). Naive datetimes are kept as given and read as
    UTC when formatted.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["date"] = "date"
    value: datetime


DateLike = Annotated[Union[StringInput, DateInput], Field(discriminator="kind")]

RawDateLike = Union[str, date, datetime, StringInput, DateInput]


def to_date_like(
    value: RawDateLike, zone: Optional[tzinfo] = timezone.utc
) -> DateLike:
    """Wrap a raw endpoint value in its tagged variant.

    A plain `date` becomes midnight in `zone`, or host-local midnight when
    `zone` is None, so it lands on the same day as a date-only wire string
    parsed in that zone.

    Raises:
        TypeError: If the value is neither a string nor a date.
    """

    if isinstance(value, (StringInput, DateInput)):
        return value
    if isinstance(value, str):
        return StringInput(value=value)
    # datetime is a date subclass, test it first
    if isinstance(value, datetime):
        return DateInput(value=value)
    if isinstance(value, date):
        midnight = datetime.combine(value, time(0, 0))
        if zone is None:
            return DateInput(value=midnight.astimezone())
        return DateInput(value=midnight.replace(tzinfo=zone))
    raise TypeError(f"Expected a date string or date value, got {type(value).__name__}")
