"""Clock helpers: KSUID epoch offsets and ISO 8601 formatting."""

import time
from datetime import datetime, timedelta, timezone

# KSUID epoch: 2014-05-13
KSUID_EPOCH = datetime(2014, 5, 13, tzinfo=timezone.utc)

_UINT32 = 0xFFFFFFFF
_SECOND = timedelta(seconds=1)


def utc_now():
    """Current UTC time as an aware datetime."""
    return datetime.now(timezone.utc)


def to_epoch_offset(dt):
    """Whole seconds from the KSUID epoch to `dt`, wrapped to 32 bits."""
    return ((dt - KSUID_EPOCH) // _SECOND) & _UINT32


def from_epoch_offset(offset):
    """Inverse of to_epoch_offset for in-range values."""
    return KSUID_EPOCH + timedelta(seconds=offset)


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return int(time.time() * 1_000_000)


def format_timestamp(value=None):
    """Format a datetime (default: now) as ISO 8601 with microseconds."""
    if value is None:
        value = datetime.fromtimestamp(now_micros() / 1_000_000, tz=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"
