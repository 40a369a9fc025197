# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from forum.domain.posts import Post, PostRepository
from forum.utils.clock import Clock, utc_now


class CreatePostUseCase:
    def __init__(self, *, posts: PostRepository, clock: Clock = utc_now) -> None:
        self._posts = posts
        self._clock = clock

    def execute(self, author_id: int, title: str, content: str) -> Post:
        post = Post(
            id=0,
            author_id=author_id,
            title=title,
            content=content,
            created_at=self._clock(),
        )
        return self._posts.add(post)
