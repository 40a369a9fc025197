# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from forum.domain.posts import Post, PostNotFoundError, PostRepository, Reaction


class ReactToPostUseCase:
    """Like or dislike a post on behalf of a user.

    Repeating the reaction the user already has withdraws it; choosing the
    opposite one replaces it. Returns the post with fresh tallies and the
    reaction now in place (None once withdrawn).
    """

    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(
        self, post_id: int, user_id: int, reaction: Reaction
    ) -> tuple[Post, Reaction | None]:
        if self._posts.get(post_id) is None:
            raise PostNotFoundError(post_id)
        current = self._posts.get_reaction(post_id, user_id)
        chosen = None if current is reaction else reaction
        self._posts.set_reaction(post_id, user_id, chosen)
        post = self._posts.get(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post, chosen
