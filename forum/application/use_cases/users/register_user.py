# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from forum.domain.users.entities import User
from forum.domain.users.exceptions import DuplicateCredentialError
from forum.domain.users.repositories import PasswordHasher, UserRepository
from forum.domain.users.validation import validate_registration
from forum.utils.clock import Clock, utc_now


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        clock: Clock = utc_now,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._clock = clock

    def execute(self, username: str, email: str, password: str) -> User:
        validate_registration(username, email, password)

        # Login accepts either column, so a new value must not match an existing
        # username or email in any column.
        if self._users.find_by_email_or_username(username):
            raise DuplicateCredentialError("username")
        if self._users.find_by_email_or_username(email):
            raise DuplicateCredentialError("email")

        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            username=username,
            email=email,
            password_hash=hashed,
            created_at=self._clock(),
        )
        return self._users.add(user)
