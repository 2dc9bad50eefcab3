"""Crash handling utilities.

Every crash record is keyed by a freshly generated identifier, so records
in the crash file sort by the time they were written.
"""

import json
import os
import sys
import traceback

from ids.generator import Generator
from utils.timestamp import format_timestamp

# Set by configure(); the generator is only built here if none was given
_crash_log = "logs/crash.log"
_generator = None


def configure(crash_file, generator=None):
    """Set crash log file path and the generator used for crash ids."""
    global _crash_log, _generator
    _crash_log = crash_file
    if generator is not None:
        _generator = generator


def _next_id():
    global _generator
    if _generator is None:
        _generator = Generator()
    return _generator.generate()


def build_record(exc_type, exc_value, exc_tb, context=None):
    """Crash record whose timestamp is the one embedded in its id."""
    identifier = _next_id()
    record = {
        "id": str(identifier),
        "timestamp": format_timestamp(identifier.timestamp_ms * 1000),
        "type": exc_type.__name__ if exc_type else "Unknown",
        "msg": str(exc_value) if exc_value else "",
        "traceback": "".join(traceback.format_exception(exc_type, exc_value, exc_tb)) if exc_type else None,
    }
    if context:
        record["context"] = context
    return record


def _append(record):
    """Append record as a JSON line. Never raises."""
    try:
        log_dir = os.path.dirname(_crash_log)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        with open(_crash_log, "a") as f:
            f.write(json.dumps(record) + "\n")
    except Exception:
        pass


def log_crash(exc_type, exc_value, exc_tb):
    """Log sync crash to stderr and file, return its id."""
    record = build_record(exc_type, exc_value, exc_tb)
    banner = "=" * 60
    sys.stderr.write(f"\n{banner}\nCRASH [{record['id']}] {record['timestamp']}\n{banner}\n")
    sys.stderr.write(f"{record['type']}: {record['msg']}\n{'-' * 60}\n{record['traceback']}{banner}\n\n")
    _append(record)
    return record["id"]


def log_async_crash(exc, context_dict, logger=None):
    """Log async task crash, return its id."""
    if exc is None:
        record = build_record(None, None, None, str(context_dict))
        record["type"] = "AsyncError"
        record["msg"] = context_dict.get("message", "Unknown")
    else:
        record = build_record(type(exc), exc, exc.__traceback__, str(context_dict))

    if logger:
        logger.error("Async exception", error=record["msg"], crash_id=record["id"],
                     task=str(context_dict.get("future", "unknown")))
    _append(record)
    return record["id"]


def create_async_handler(logger=None):
    """Create async exception handler for event loop."""
    def handler(loop, context):
        log_async_crash(context.get("exception"), context, logger)
    return handler


def install_crash_handler():
    """Install global sync exception handler."""
    sys.excepthook = log_crash
