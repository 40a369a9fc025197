# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .posts import Comment, Post, PostNotFoundError, Reaction
from .users.entities import Session, User

__all__ = [
    "Comment",
    "Post",
    "PostNotFoundError",
    "Reaction",
    "Session",
    "User",
]
