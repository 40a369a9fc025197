# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from forum.domain.posts import Post, PostNotFoundError, PostRepository


class GetPostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_id: int) -> Post:
        post = self._posts.get(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post


class ListUserPostsUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, author_id: int) -> Sequence[Post]:
        return list(self._posts.list_for_author(author_id))


class ListPostsUseCase:
    """Every post on the forum, newest first."""

    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self) -> Sequence[Post]:
        return list(self._posts.list_all())
