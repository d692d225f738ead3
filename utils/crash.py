"""Crash handling utilities."""

import json
import os
import sys
import traceback

from core.errors import UlidError
from core.ulid import generate
from utils.timestamp import format_timestamp

# Default crash log path, can be overridden by configure()
_crash_log = "logs/crash.log"


def configure(crash_file):
    """Set crash log file path from config."""
    global _crash_log
    _crash_log = crash_file


def _crash_id():
    try:
        return generate()
    except UlidError:
        return "-"


def _write_crash(crash_id, timestamp, exc_name, exc_msg, tb, context=None):
    """Write crash to file. Never raises."""
    try:
        log_dir = os.path.dirname(_crash_log)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        record = {"id": crash_id, "timestamp": timestamp, "type": exc_name, "msg": exc_msg, "traceback": tb}
        if context:
            record["context"] = context
        with open(_crash_log, "a") as f:
            f.write(json.dumps(record, default=str) + "\n")
    except Exception:
        pass


def log_crash(exc_type, exc_value, exc_tb):
    """Log crash to stderr and file. Never raises."""
    crash_id = _crash_id()
    timestamp = format_timestamp()
    exc_name = exc_type.__name__ if exc_type else "Unknown"
    exc_msg = str(exc_value) if exc_value else ""
    tb = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    context = getattr(exc_value, "context", None)

    sys.stderr.write(f"\n{'=' * 60}\nCRASH [{crash_id}] {timestamp}\n{'=' * 60}\n")
    sys.stderr.write(f"{exc_name}: {exc_msg}\n{'-' * 60}\n{tb}{'=' * 60}\n\n")
    _write_crash(crash_id, timestamp, exc_name, exc_msg, tb, context)


def install_crash_handler():
    """Install global sync exception handler."""
    sys.excepthook = log_crash
