"""
File-server hit counting.

`HitCounter` is the single piece of shared state in the app.  The
`MetricsMiddleware` wraps the static file server so that every request it
receives bumps the counter before the file is looked up.
"""
from __future__ import annotations

import threading

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp


class HitCounter:
    """Integer counter guarded by a lock."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def reset(self) -> None:
        with self._lock:
            self._value = 0


class MetricsMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, counter: HitCounter) -> None:
        super().__init__(app)
        self.counter = counter

    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        self.counter.increment()
        return await call_next(request)
