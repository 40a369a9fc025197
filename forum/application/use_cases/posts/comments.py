# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from forum.domain.posts import Comment, CommentRepository, PostNotFoundError, PostRepository
from forum.utils.clock import Clock, utc_now


class AddCommentUseCase:
    def __init__(
        self, *, posts: PostRepository, comments: CommentRepository, clock: Clock = utc_now
    ) -> None:
        self._posts = posts
        self._comments = comments
        self._clock = clock

    def execute(self, post_id: int, author_id: int, content: str) -> Comment:
        if self._posts.get(post_id) is None:
            raise PostNotFoundError(post_id)
        comment = Comment(
            id=0,
            post_id=post_id,
            author_id=author_id,
            content=content,
            created_at=self._clock(),
        )
        return self._comments.add(comment)


class ListCommentsUseCase:
    def __init__(self, *, posts: PostRepository, comments: CommentRepository) -> None:
        self._posts = posts
        self._comments = comments

    def execute(self, post_id: int) -> Sequence[Comment]:
        if self._posts.get(post_id) is None:
            raise PostNotFoundError(post_id)
        return list(self._comments.list_for_post(post_id))
