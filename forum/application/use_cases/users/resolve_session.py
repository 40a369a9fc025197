# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from forum.domain.users.entities import User
from forum.domain.users.repositories import SessionRegistry, UserRepository
from forum.shared.logging import logger


class ResolveSessionUseCase:
    """Map a session token to its user, or ``None`` when the token is not live."""

    def __init__(self, *, users: UserRepository, sessions: SessionRegistry) -> None:
        self._users = users
        self._sessions = sessions

    def execute(self, token: str) -> User | None:
        session = self._sessions.lookup(token)
        if session is None:
            return None

        user = self._users.find_by_id(session.user_id)
        if user is None:
            logger.warning(f"sessions.resolve: user_id={session.user_id} no longer exists")
            self._sessions.delete(token)
            return None
        return user
