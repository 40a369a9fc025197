# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Comment, Post, Reaction
from .exceptions import PostAccessDeniedError, PostNotFoundError
from .repositories import CommentRepository, PostRepository

__all__ = [
    "Comment",
    "CommentRepository",
    "Post",
    "PostAccessDeniedError",
    "PostNotFoundError",
    "PostRepository",
    "Reaction",
]
