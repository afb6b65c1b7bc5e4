"""Pytest configuration and fixtures for formatter tests."""

from datetime import datetime, timezone

import pytest

from server_date_formatter import formatter as formatter_module
from server_date_formatter.config import FormatterConfig
from server_date_formatter.formatter import DateFormatter


@pytest.fixture
def tokyo_config():
    """Config whose 'local' timezone is Asia/Tokyo (UTC+9, no DST)."""
    return FormatterConfig(local_timezone="Asia/Tokyo")


@pytest.fixture
def formatter(tokyo_config):
    return DateFormatter(tokyo_config)


@pytest.fixture
def new_york_formatter():
    return DateFormatter(FormatterConfig(local_timezone="America/New_York"))


@pytest.fixture
def morning():
    """2012-04-22 04:20:00 UTC, a Sunday."""
    return datetime(2012, 4, 22, 4, 20, tzinfo=timezone.utc)


@pytest.fixture
def reset_shared_formatter(monkeypatch):
    """Drop the process-wide formatter so a test can build a fresh one."""
    monkeypatch.setattr(formatter_module, "_shared_instance", None)
    yield
