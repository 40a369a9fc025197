# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from forum.domain.posts import Comment as DomainComment
from forum.domain.posts import CommentRepository
from forum.infrastructure.db.models import Comment
from forum.infrastructure.unit_of_work import unit_of_work_scope
from forum.shared.errors import StorageFailureError


def _to_domain(row: Comment) -> DomainComment:
    created_at = row.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return DomainComment(
        id=row.id,
        post_id=row.post_id,
        author_id=row.author_id,
        content=row.content,
        created_at=created_at,
    )


class SqlAlchemyCommentRepository(CommentRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def add(self, comment: DomainComment) -> DomainComment:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = Comment(
                    post_id=comment.post_id,
                    author_id=comment.author_id,
                    content=comment.content,
                    created_at=comment.created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except SQLAlchemyError as exc:
            raise StorageFailureError("comments.add") from exc

    def list_for_post(self, post_id: int) -> Sequence[DomainComment]:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                rows = session.scalars(
                    select(Comment)
                    .where(Comment.post_id == post_id)
                    .order_by(Comment.created_at, Comment.id)
                ).all()
                return [_to_domain(row) for row in rows]
        except SQLAlchemyError as exc:
            raise StorageFailureError("comments.list_for_post") from exc
