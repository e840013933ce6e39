"""Pytest fixtures for date-facades tests"""
import logging
import time
from datetime import datetime

import pytest
from dateutil import tz

from date_facades.config import Config
from date_facades.services import get_backend


@pytest.fixture
def test_date():
    """Reference instant, local wall time."""
    return datetime(2025, 9, 26, 10, 45, 30)


@pytest.fixture
def test_date2():
    """Earlier instant six days and a bit before test_date."""
    return datetime(2025, 9, 20, 8, 30, 0)


@pytest.fixture
def middle_date():
    """Local midnight between test_date2 and test_date."""
    return datetime(2025, 9, 23)


@pytest.fixture
def config():
    """Create a default configuration."""
    return Config()


@pytest.fixture(params=["arrow", "dateutil"])
def backend(request, config):
    """Formatter and manipulation façades for each backend."""
    formatter, date_utils = get_backend(request.param, config)
    return formatter, date_utils


@pytest.fixture
def formatter(backend):
    return backend[0]


@pytest.fixture
def date_utils(backend):
    return backend[1]


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by setup_logging."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    yield
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)


@pytest.fixture
def new_york_tz(monkeypatch):
    """Run with America/New_York as the local zone (DST on 2025-03-09)."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    local_tz = tz.tzlocal()
    for module in (
        "date_facades.models.date_input",
        "date_facades.services.arrow_dates",
        "date_facades.services.dateutil_dates",
    ):
        monkeypatch.setattr(f"{module}.LOCAL_TZ", local_tz)
    yield local_tz
    monkeypatch.undo()
    time.tzset()
