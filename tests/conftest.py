"""Pytest fixtures for all tests."""

import io
from datetime import timedelta

import pytest

import internal.logging
from internal.logging import LogLevel, StructuredLogger
from utils.ksuid import KsuidTranscoder
from utils.timestamp import KSUID_EPOCH
from tests._helpers import FixedClock, FixedRandom


@pytest.fixture
def fixed_clock():
    """Clock fixed 100 seconds after the KSUID epoch."""
    return FixedClock(KSUID_EPOCH + timedelta(seconds=100))


@pytest.fixture
def fixed_random():
    """Random source returning 0xab bytes."""
    return FixedRandom()


@pytest.fixture
def transcoder(fixed_clock, fixed_random):
    """Deterministic transcoder."""
    return KsuidTranscoder(clock=fixed_clock, random_source=fixed_random)


@pytest.fixture
def log_stream():
    """Capture structured log output at DEBUG level."""
    stream = io.StringIO()
    StructuredLogger.configure(min_level=LogLevel.DEBUG, stream=stream)
    yield stream
    internal.logging._logger = None
