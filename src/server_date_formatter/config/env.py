"""Environment configuration for the server date formatter.

All settings have defaults matching the server wire contract, so a bare
`load_config()` is enough for most callers. Override through environment
variables when the host needs something else:

```bash
export DATEFMT_LOCAL_TIMEZONE="Europe/London"
export DATEFMT_RECENT_MINUTES_WINDOW=1800
export DATEFMT_UNKNOWN_RANGE_TEXT="unknown"
```

```python
from server_date_formatter.config import load_config
cfg = load_config()
print(cfg.server_datetime_format)
```
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..utils.date_parser import resolve_timezone


class FormatterConfig(BaseSettings):
    """Formatter settings loaded from environment variables.

    All environment variables are prefixed with DATEFMT_ (e.g.,
    DATEFMT_LOCAL_TIMEZONE). The model is frozen; build a new one instead
    of mutating it.
    """

    # ---- wire format ----
    server_date_format: str = Field(
        default="%Y-%m-%d",
        description="strftime pattern for date-only server values",
    )
    server_datetime_format: str = Field(
        default="%Y-%m-%dT%H:%M:%S",
        description="strftime pattern for date-and-time server values",
    )
    server_value_shape: str = Field(
        default=r"\d{4}-\d{2}-\d{2}(?:T\d{2}:\d{2}:\d{2}(?:Z|[+-]\d{2}:?\d{2})?)?",
        description="Regex every incoming server value must match in full",
    )

    # ---- timezone ----
    local_timezone: Optional[str] = Field(
        default=None,
        description="IANA timezone used as 'local'; None means the host timezone",
    )

    # ---- recency ----
    recent_seconds_window: int = Field(
        default=60, gt=0, description="Below this age, render 'N seconds ago'"
    )
    recent_minutes_window: int = Field(
        default=3600, gt=0, description="Below this age, render 'N minutes ago'"
    )

    # ---- ranges ----
    range_separator: str = Field(
        default=" - ", description="Text placed between the two range endpoints"
    )
    unknown_range_text: str = Field(
        default="", description="Returned when a range endpoint cannot be parsed"
    )

    model_config = SettingsConfigDict(
        env_prefix="DATEFMT_",
        case_sensitive=False,
        env_file=(".env",),  # optional; missing file is fine
        env_file_encoding="utf-8",
        frozen=True,
    )

    # ---- validators ----
    @field_validator("local_timezone", mode="before")
    @classmethod
    def _blank_timezone_is_host(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("local_timezone")
    @classmethod
    def _check_timezone(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            # InvalidTimezoneError is a ValueError, so pydantic reports it
            resolve_timezone(v)
        return v

    @field_validator("server_value_shape")
    @classmethod
    def _check_shape(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as exc:
            raise ValueError(f"Invalid server_value_shape: {exc}") from exc
        return v

    @model_validator(mode="after")
    def _check_windows(self) -> "FormatterConfig":
        if self.recent_minutes_window < self.recent_seconds_window:
            raise ValueError(
                "recent_minutes_window must not be smaller than recent_seconds_window"
            )
        return self


def load_config() -> FormatterConfig:
    """Build a `FormatterConfig` from the current environment.

    Each call reads the environment again, so tests can set DATEFMT_*
    variables first. Unset fields keep the wire-contract defaults.
    """
    return FormatterConfig()
