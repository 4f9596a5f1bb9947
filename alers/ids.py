"""Identifiers that are unique within the running process."""

import itertools
import threading

_counter = itertools.count(1)
_lock = threading.Lock()


def next_id() -> int:
    """Return a fresh identifier, never handed out before in this process."""
    with _lock:
        return next(_counter)