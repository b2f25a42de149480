"""
Runtime event log for Orbit.

Every interesting step (app listing, launch request and reply, voice
session) is appended as one JSON object per line to
``config.runtime_log_path``. Rows written while handling the same command
share a ``turn_id`` so a launch can be followed from the typed text to the
host's reply.
"""

import datetime
import json
import os
import threading
import time
import uuid

from Orbit.config import config

_local = threading.local()
_write_lock = threading.Lock()


def _flag(name, default):
    return str(getattr(config, name, default) or "").strip().lower() in ("1", "true", "yes", "on")


def set_turn_id(turn_id=None):
    """Start a new turn on this thread; a fresh uuid is used when none is given."""
    _local.turn_id = str(turn_id or uuid.uuid4())
    return _local.turn_id


def get_turn_id():
    return str(getattr(_local, "turn_id", "") or "")


def latency_fields(started):
    """
    Timing fields for a log row, measured from a ``time.perf_counter()`` mark.
    Empty when ORBIT_LATENCY_TRACE is off, so callers can always splat it.
    """
    if not _flag("latency_trace", "1"):
        return {}
    return {"ms": int((time.perf_counter() - started) * 1000)}


def log_event(event, **fields):
    """
    Append one event row. Never raises on I/O trouble.
    :return: True if the row was written
    """
    if not _flag("runtime_log_enabled", "1"):
        return False
    row = {
        "ts": datetime.datetime.now().isoformat(timespec="seconds"),
        "event": str(event or ""),
        "turn_id": get_turn_id(),
    }
    row.update(fields)
    path = os.path.abspath(str(getattr(config, "runtime_log_path", "Orbit/data/runtime_events.jsonl")))
    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        # Launch and voice workers write concurrently.
        with _write_lock, open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(row, ensure_ascii=False) + "\n")
    except OSError:
        return False
    return True
