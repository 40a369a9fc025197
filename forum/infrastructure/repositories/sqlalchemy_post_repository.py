# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from sqlalchemy import Select, delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from forum.domain.posts import Post as DomainPost
from forum.domain.posts import PostRepository, Reaction
from forum.infrastructure.db.models import Post, PostReaction
from forum.infrastructure.unit_of_work import unit_of_work_scope
from forum.shared.errors import StorageFailureError


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def _tally(reaction: Reaction):
    return (
        select(func.count(PostReaction.id))
        .where(PostReaction.post_id == Post.id, PostReaction.value == int(reaction))
        .correlate(Post)
        .scalar_subquery()
    )


def _select_posts() -> Select:
    return select(
        Post,
        _tally(Reaction.LIKE).label("likes"),
        _tally(Reaction.DISLIKE).label("dislikes"),
    )


def _to_domain(row: Post, likes: int = 0, dislikes: int = 0) -> DomainPost:
    return DomainPost(
        id=row.id,
        author_id=row.author_id,
        title=row.title,
        content=row.content,
        created_at=_aware(row.created_at),
        likes=likes,
        dislikes=dislikes,
    )


class SqlAlchemyPostRepository(PostRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def add(self, post: DomainPost) -> DomainPost:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = Post(
                    author_id=post.author_id,
                    title=post.title,
                    content=post.content,
                    created_at=post.created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except SQLAlchemyError as exc:
            raise StorageFailureError("posts.add") from exc

    def get(self, post_id: int) -> DomainPost | None:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                found = session.execute(_select_posts().where(Post.id == post_id)).first()
                return _to_domain(*found) if found else None
        except SQLAlchemyError as exc:
            raise StorageFailureError("posts.get") from exc

    def list_all(self) -> Sequence[DomainPost]:
        return self._list("posts.list_all")

    def list_for_author(self, author_id: int) -> Sequence[DomainPost]:
        return self._list("posts.list_for_author", Post.author_id == author_id)

    def _list(self, operation: str, *criteria) -> Sequence[DomainPost]:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                rows = session.execute(
                    _select_posts()
                    .where(*criteria)
                    .order_by(Post.created_at.desc(), Post.id.desc())
                ).all()
                return [_to_domain(*row) for row in rows]
        except SQLAlchemyError as exc:
            raise StorageFailureError(operation) from exc

    def update(self, post: DomainPost) -> DomainPost | None:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.get(Post, post.id)
                if row is None:
                    return None
                row.title = post.title
                row.content = post.content
        except SQLAlchemyError as exc:
            raise StorageFailureError("posts.update") from exc
        return self.get(post.id)

    def delete(self, post_id: int) -> bool:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.get(Post, post_id)
                if row is None:
                    return False
                # ORM cascade removes the comments and reactions with it.
                session.delete(row)
                return True
        except SQLAlchemyError as exc:
            raise StorageFailureError("posts.delete") from exc

    def get_reaction(self, post_id: int, user_id: int) -> Reaction | None:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                value = session.scalar(
                    select(PostReaction.value).where(
                        PostReaction.post_id == post_id, PostReaction.user_id == user_id
                    )
                )
                return Reaction(value) if value is not None else None
        except SQLAlchemyError as exc:
            raise StorageFailureError("posts.get_reaction") from exc

    def set_reaction(self, post_id: int, user_id: int, reaction: Reaction | None) -> None:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                session.execute(
                    delete(PostReaction).where(
                        PostReaction.post_id == post_id, PostReaction.user_id == user_id
                    )
                )
                if reaction is not None:
                    session.add(
                        PostReaction(post_id=post_id, user_id=user_id, value=int(reaction))
                    )
        except SQLAlchemyError as exc:
            raise StorageFailureError("posts.set_reaction") from exc
