from __future__ import annotations

import threading
import time
from typing import Any, Callable, Dict


class Debouncer:
    """Trailing-edge debounce for handlers that may run concurrently.

    Every call bumps a per-key generation and waits `delay` seconds. Only the
    call that is still the newest for its key once the wait is over goes on to
    run; earlier ones report that they were superseded.
    """

    def __init__(self, delay: float, sleep: Callable[[float], None] = time.sleep):
        self.delay = delay
        self._sleep = sleep
        self._lock = threading.Lock()
        self._generations: Dict[str, int] = {}

    def _bump(self, key: str) -> int:
        with self._lock:
            token = self._generations.get(key, 0) + 1
            self._generations[key] = token
            return token

    def is_current(self, key: str, token: int) -> bool:
        with self._lock:
            return self._generations.get(key) == token

    def settle(self, key: str = 'default') -> bool:
        token = self._bump(key)
        if self.delay > 0:
            self._sleep(self.delay)
        return self.is_current(key, token)

    def call(self, key: str, callback: Callable[..., Any], *args, superseded: Any = None) -> Any:
        if not self.settle(key):
            return superseded
        return callback(*args)


def session_key(request: Any) -> str:
    """Debounce key for a Gradio request; one key per browser session."""
    return getattr(request, 'session_hash', None) or 'default'
