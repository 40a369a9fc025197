# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from collections.abc import Callable
from datetime import timedelta

from forum.domain.users.entities import Session
from forum.domain.users.exceptions import InvalidCredentialsError, UserNotFoundError
from forum.domain.users.repositories import PasswordHasher, SessionRegistry, UserRepository
from forum.utils.clock import Clock, utc_now

DEFAULT_SESSION_LIFETIME = timedelta(hours=2)


def new_session_token() -> str:
    return secrets.token_urlsafe(32)


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        sessions: SessionRegistry,
        password_hasher: PasswordHasher,
        session_lifetime: timedelta = DEFAULT_SESSION_LIFETIME,
        clock: Clock = utc_now,
        token_factory: Callable[[], str] = new_session_token,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._password_hasher = password_hasher
        self._session_lifetime = session_lifetime
        self._clock = clock
        self._token_factory = token_factory

    def execute(self, identifier: str, password: str) -> Session:
        user = self._users.find_by_email_or_username(identifier)
        if user is None:
            raise UserNotFoundError()

        if not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        session = Session(
            token=self._token_factory(),
            user_id=user.id,
            expires_at=self._clock() + self._session_lifetime,
        )
        self._sessions.add(session)
        return session
