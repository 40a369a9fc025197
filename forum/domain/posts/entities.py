# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Forum posts, their comments and reader reactions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum

from forum.shared.errors.base import ValidationError

TITLE_MAX_LENGTH = 200
CONTENT_MAX_LENGTH = 10_000
COMMENT_MAX_LENGTH = 1_000


def _invalid(field: str) -> ValidationError:
    return ValidationError(f"invalid_{field}", context={"field": field})


class Reaction(IntEnum):
    LIKE = 1
    DISLIKE = -1


@dataclass(slots=True, frozen=True)
class Post:
    """A post as stored; `id` is 0 until persisted. Tallies are read-only."""

    id: int
    author_id: int
    title: str
    content: str
    created_at: datetime
    likes: int = 0
    dislikes: int = 0

    def __post_init__(self) -> None:
        title = self.title.strip()
        if not title or len(title) > TITLE_MAX_LENGTH:
            raise _invalid("title")
        if not self.content.strip() or len(self.content) > CONTENT_MAX_LENGTH:
            raise _invalid("content")
        object.__setattr__(self, "title", title)


@dataclass(slots=True, frozen=True)
class Comment:
    id: int
    post_id: int
    author_id: int
    content: str
    created_at: datetime

    def __post_init__(self) -> None:
        content = self.content.strip()
        if not content or len(content) > COMMENT_MAX_LENGTH:
            raise _invalid("content")
        object.__setattr__(self, "content", content)
