"""Wall-clock and timestamp utilities."""

import time
from datetime import datetime, timezone


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return int(time.time() * 1_000_000)


def now_ms():
    """Current time in whole milliseconds since Unix epoch.

    A clock reading before the epoch is clamped to 0 and logged; this never
    raises. Values wider than 48 bits are truncated later, when packed into
    an identifier.
    """
    ms = time.time_ns() // 1_000_000
    if ms < 0:
        from internal.logging import get_logger
        get_logger().warn("clock before epoch, clamping to 0", clock_ms=ms)
        return 0
    return ms


def verify_clock():
    """Raise ClockError if the system clock reads before the epoch.

    Meant to be called once at startup, so a broken clock surfaces as a
    single fatal error instead of on every generation call.
    """
    ms = time.time_ns() // 1_000_000
    if ms < 0:
        from internal.errors import ClockError
        raise ClockError("system clock reports a time before the Unix epoch", epoch_ms=ms)
    return ms


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_us is None:
        epoch_us = now_micros()
    
    dt = datetime.fromtimestamp(epoch_us / 1_000_000, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"
