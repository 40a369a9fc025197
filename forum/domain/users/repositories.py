# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Session, User


class UserRepository(Protocol):
    def find_by_id(self, user_id: int) -> User | None: ...
    def find_by_username(self, username: str) -> User | None: ...
    def find_by_email(self, email: str) -> User | None: ...
    def find_by_email_or_username(self, identifier: str) -> User | None: ...
    def add(self, user: User) -> User: ...


class SessionRegistry(Protocol):
    def add(self, session: Session) -> None: ...
    def lookup(self, token: str) -> Session | None: ...
    def delete(self, token: str) -> None: ...
    def sweep(self) -> int: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
