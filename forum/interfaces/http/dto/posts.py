from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class CreatePostRequestDTO(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=10_000)


class UpdatePostRequestDTO(CreatePostRequestDTO):
    pass


class PostDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    author_id: int
    title: str
    content: str
    created_at: datetime
    likes: int = 0
    dislikes: int = 0


class CreateCommentRequestDTO(BaseModel):
    content: str = Field(min_length=1, max_length=1_000)


class CommentDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    post_id: int
    author_id: int
    content: str
    created_at: datetime


class ReactionResultDTO(BaseModel):
    post: PostDTO
    reaction: Literal["like", "dislike"] | None = None
