# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import math
import time
from collections import deque
from collections.abc import Callable
from functools import wraps
from threading import Lock

from flask import Request, jsonify, request

from forum.shared.config import load_config
from forum.shared.logging import logger


class SlidingWindowLimiter:
    """Per-key sliding window held in process memory."""

    def __init__(
        self,
        limit: int,
        window_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._clock = clock
        self._hits: dict[str, deque[float]] = {}
        self._lock = Lock()

    def hit(self, key: str) -> float:
        """Record a hit for `key`; return 0 when allowed, else seconds to wait."""
        now = self._clock()
        with self._lock:
            hits = self._hits.setdefault(key, deque())
            while hits and now - hits[0] >= self._window:
                hits.popleft()
            if len(hits) >= self._limit:
                return self._window - (now - hits[0])
            hits.append(now)
            if len(hits) == 1:
                self._forget_idle(now)
            return 0.0

    def _forget_idle(self, now: float) -> None:
        idle = [
            key
            for key, hits in self._hits.items()
            if not hits or now - hits[-1] >= self._window
        ]
        for key in idle:
            del self._hits[key]


def client_ip(req: Request) -> str:
    forwarded = req.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    return forwarded or (req.remote_addr or "unknown")


def rate_limit(limit: int | None = None, window_seconds: float | None = None):
    """Throttle a view per client address; disabled by ENABLE_RATE_LIMIT=0."""
    security = load_config().security
    limiter = SlidingWindowLimiter(
        limit or security.rate_limit_requests,
        window_seconds or security.rate_limit_window,
    )

    def decorator(view: Callable):
        if not security.enable_rate_limit:
            return view

        @wraps(view)
        def wrapper(*args, **kwargs):
            wait = limiter.hit(f"{request.path}:{client_ip(request)}")
            if wait:
                logger.warning(f"rate_limit: {request.method} {request.path} throttled")
                response = jsonify({"error": "rate_limited"})
                response.headers["Retry-After"] = str(math.ceil(wait))
                return response, 429
            return view(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["SlidingWindowLimiter", "client_ip", "rate_limit"]
