# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import replace

from forum.domain.posts import Post, PostAccessDeniedError, PostNotFoundError, PostRepository


def _owned_post(posts: PostRepository, post_id: int, user_id: int) -> Post:
    post = posts.get(post_id)
    if post is None:
        raise PostNotFoundError(post_id)
    if post.author_id != user_id:
        raise PostAccessDeniedError(post_id)
    return post


class UpdatePostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_id: int, user_id: int, title: str, content: str) -> Post:
        current = _owned_post(self._posts, post_id, user_id)
        # replace() re-runs the entity's title/content checks.
        updated = self._posts.update(replace(current, title=title, content=content))
        if updated is None:
            raise PostNotFoundError(post_id)
        return updated


class DeletePostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_id: int, user_id: int) -> None:
        _owned_post(self._posts, post_id, user_id)
        if not self._posts.delete(post_id):
            raise PostNotFoundError(post_id)
