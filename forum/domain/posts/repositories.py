# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Comment, Post, Reaction


class PostRepository(Protocol):
    def add(self, post: Post) -> Post: ...
    def get(self, post_id: int) -> Post | None: ...
    def list_all(self) -> Sequence[Post]: ...
    def list_for_author(self, author_id: int) -> Sequence[Post]: ...
    def update(self, post: Post) -> Post | None: ...
    def delete(self, post_id: int) -> bool: ...
    def get_reaction(self, post_id: int, user_id: int) -> Reaction | None: ...
    def set_reaction(self, post_id: int, user_id: int, reaction: Reaction | None) -> None: ...


class CommentRepository(Protocol):
    def add(self, comment: Comment) -> Comment: ...
    def list_for_post(self, post_id: int) -> Sequence[Comment]: ...
