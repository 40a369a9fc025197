# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Process-local registry of live login sessions.

Sessions expire lazily: an entry is only dropped when a lookup observes it
past its expiry, or when a sweep runs. Lookups never extend expiry.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from threading import Lock

from forum.domain.users.entities import Session
from forum.domain.users.repositories import SessionRegistry
from forum.shared.logging import logger
from forum.utils.clock import Clock, utc_now


class InMemorySessionRegistry(SessionRegistry):
    def __init__(
        self,
        *,
        clock: Clock = utc_now,
        sweep_interval: timedelta | None = None,
    ) -> None:
        self._clock = clock
        self._sweep_interval = sweep_interval
        self._sessions: dict[str, Session] = {}
        self._lock = Lock()
        self._last_sweep: datetime | None = None

    def add(self, session: Session) -> None:
        with self._lock:
            self._sessions[session.token] = session
            now = self._clock()
            if self._sweep_due(now):
                self._sweep_locked(now)

    def lookup(self, token: str) -> Session | None:
        if not token:
            return None
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return None
            if session.is_expired(self._clock()):
                del self._sessions[token]
                logger.debug(f"sessions.lookup: dropped expired session user_id={session.user_id}")
                return None
            return session

    def delete(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(token, None)

    def sweep(self) -> int:
        with self._lock:
            return self._sweep_locked(self._clock())

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _sweep_due(self, now: datetime) -> bool:
        if self._sweep_interval is None:
            return False
        if self._last_sweep is None:
            self._last_sweep = now
            return False
        return now - self._last_sweep >= self._sweep_interval

    def _sweep_locked(self, now: datetime) -> int:
        expired = [token for token, session in self._sessions.items() if session.is_expired(now)]
        for token in expired:
            del self._sessions[token]
        self._last_sweep = now
        if expired:
            logger.info(f"sessions.sweep: removed {len(expired)} expired sessions")
        return len(expired)


__all__ = ["InMemorySessionRegistry"]
