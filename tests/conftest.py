"""Shared test fixtures for indexdate."""

import os
import time

import pytest

from indexdate import DateFormatService

# POSIX rule for Central European Time; needs no timezone database.
CENTRAL_EUROPE_TZ = "CET-1CEST,M3.5.0,M10.5.0/3"


def _set_tz(value):
    if value is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = value
    time.tzset()


@pytest.fixture
def local_timezone():
    """Run the test with the process local timezone set to CET/CEST."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")

    original = os.environ.get("TZ")
    _set_tz(CENTRAL_EUROPE_TZ)
    try:
        yield CENTRAL_EUROPE_TZ
    finally:
        _set_tz(original)


@pytest.fixture
def utc_local_timezone():
    """Run the test with the process local timezone set to UTC."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")

    original = os.environ.get("TZ")
    _set_tz("UTC0")
    try:
        yield "UTC0"
    finally:
        _set_tz(original)


@pytest.fixture
def service():
    """Service without a configured default output format."""
    return DateFormatService()
