# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from sqlalchemy import case, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from forum.domain.users.entities import User as DomainUser
from forum.domain.users.exceptions import DuplicateCredentialError
from forum.domain.users.repositories import UserRepository
from forum.infrastructure.db.models import User
from forum.infrastructure.unit_of_work import unit_of_work_scope
from forum.shared.errors import StorageFailureError
from forum.shared.logging import logger


def _aware(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns.
    return value if value.tzinfo else value.replace(tzinfo=UTC)


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        created_at=_aware(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def _find_one(self, operation: str, *criteria, order_by=None) -> DomainUser | None:
        stmt = select(User).where(*criteria)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.scalars(stmt.limit(1)).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.error(f"users.{operation}: storage failure {type(exc).__name__}")
            raise StorageFailureError(f"users.{operation}") from exc

    def find_by_id(self, user_id: int) -> DomainUser | None:
        return self._find_one("find_by_id", User.id == user_id)

    def find_by_username(self, username: str) -> DomainUser | None:
        return self._find_one("find_by_username", User.username == username)

    def find_by_email(self, email: str) -> DomainUser | None:
        return self._find_one("find_by_email", User.email == email)

    def find_by_email_or_username(self, identifier: str) -> DomainUser | None:
        return self._find_one(
            "find_by_email_or_username",
            or_(User.email == identifier, User.username == identifier),
            # An email match wins if legacy rows ever hold the value in both columns.
            order_by=case((User.email == identifier, 0), else_=1),
        )

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    username=user.username,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                persisted = _to_domain(row)
        except IntegrityError as exc:
            logger.info("users.add: uniqueness constraint rejected insert")
            raise DuplicateCredentialError() from exc
        except SQLAlchemyError as exc:
            logger.error(f"users.add: storage failure {type(exc).__name__}")
            raise StorageFailureError("users.add") from exc
        logger.info(f"users.add: created user_id={persisted.id}")
        return persisted
