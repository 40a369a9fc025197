# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from flask import Blueprint, Response, g, jsonify, request
from pydantic import BaseModel, ValidationError

from forum.application.use_cases.posts.comments import AddCommentUseCase, ListCommentsUseCase
from forum.application.use_cases.posts.create_post import CreatePostUseCase
from forum.application.use_cases.posts.edit_post import DeletePostUseCase, UpdatePostUseCase
from forum.application.use_cases.posts.react_to_post import ReactToPostUseCase
from forum.application.use_cases.posts.read_posts import (
    GetPostUseCase,
    ListPostsUseCase,
    ListUserPostsUseCase,
)
from forum.domain.posts import Reaction
from forum.infrastructure.audit import AuditAction, audit_log
from forum.infrastructure.session_middleware import SessionAuthenticator
from forum.interfaces.http.dto.posts import (
    CommentDTO,
    CreateCommentRequestDTO,
    CreatePostRequestDTO,
    PostDTO,
    ReactionResultDTO,
    UpdatePostRequestDTO,
)
from forum.shared.errors.validation import raise_validation_error

_DTO = TypeVar("_DTO", bound=BaseModel)


def _parse(model: type[_DTO]) -> _DTO:
    try:
        return model.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


def _items(dto: type[BaseModel], entities: Iterable[object]) -> Response:
    return jsonify({"items": [dto.model_validate(e).model_dump(mode="json") for e in entities]})


class PostsController:
    """Posts API. Reading is open to guests; writing needs a session."""

    def __init__(
        self,
        *,
        create_post: CreatePostUseCase,
        get_post: GetPostUseCase,
        list_posts: ListPostsUseCase,
        list_user_posts: ListUserPostsUseCase,
        update_post: UpdatePostUseCase,
        delete_post: DeletePostUseCase,
        add_comment: AddCommentUseCase,
        list_comments: ListCommentsUseCase,
        react_to_post: ReactToPostUseCase,
        authenticator: SessionAuthenticator,
    ) -> None:
        self._create_post = create_post
        self._get_post = get_post
        self._list_posts = list_posts
        self._list_user_posts = list_user_posts
        self._update_post = update_post
        self._delete_post = delete_post
        self._add_comment = add_comment
        self._list_comments = list_comments
        self._react_to_post = react_to_post
        self._authenticator = authenticator

    def create(self) -> tuple[Response, int]:
        dto = _parse(CreatePostRequestDTO)
        post = self._create_post.execute(g.user_id, dto.title, dto.content)
        audit_log(AuditAction.POST_CREATED, user_id=g.user_id, details={"post_id": post.id})
        return jsonify(PostDTO.model_validate(post).model_dump(mode="json")), 201

    def list_all(self) -> tuple[Response, int]:
        return _items(PostDTO, self._list_posts.execute()), 200

    def list_mine(self) -> tuple[Response, int]:
        return _items(PostDTO, self._list_user_posts.execute(g.user_id)), 200

    def detail(self, post_id: int) -> tuple[Response, int]:
        post = self._get_post.execute(post_id)
        return jsonify(PostDTO.model_validate(post).model_dump(mode="json")), 200

    def update(self, post_id: int) -> tuple[Response, int]:
        dto = _parse(UpdatePostRequestDTO)
        post = self._update_post.execute(post_id, g.user_id, dto.title, dto.content)
        audit_log(AuditAction.POST_UPDATED, user_id=g.user_id, details={"post_id": post_id})
        return jsonify(PostDTO.model_validate(post).model_dump(mode="json")), 200

    def delete(self, post_id: int) -> tuple[Response, int]:
        self._delete_post.execute(post_id, g.user_id)
        audit_log(AuditAction.POST_DELETED, user_id=g.user_id, details={"post_id": post_id})
        return jsonify({"ok": True}), 200

    def comments(self, post_id: int) -> tuple[Response, int]:
        return _items(CommentDTO, self._list_comments.execute(post_id)), 200

    def add_comment(self, post_id: int) -> tuple[Response, int]:
        dto = _parse(CreateCommentRequestDTO)
        comment = self._add_comment.execute(post_id, g.user_id, dto.content)
        audit_log(
            AuditAction.COMMENT_CREATED,
            user_id=g.user_id,
            details={"post_id": post_id, "comment_id": comment.id},
        )
        return jsonify(CommentDTO.model_validate(comment).model_dump(mode="json")), 201

    def like(self, post_id: int) -> tuple[Response, int]:
        return self._react(post_id, Reaction.LIKE)

    def dislike(self, post_id: int) -> tuple[Response, int]:
        return self._react(post_id, Reaction.DISLIKE)

    def _react(self, post_id: int, reaction: Reaction) -> tuple[Response, int]:
        post, chosen = self._react_to_post.execute(post_id, g.user_id, reaction)
        result = ReactionResultDTO(
            post=PostDTO.model_validate(post),
            reaction=chosen.name.lower() if chosen is not None else None,
        )
        return jsonify(result.model_dump(mode="json")), 200

    def as_blueprint(self) -> Blueprint:
        required = self._authenticator.required
        bp = Blueprint("posts", __name__, url_prefix="/api/posts")
        bp.add_url_rule("", view_func=self.list_all, methods=["GET"])
        bp.add_url_rule("", view_func=required(self.create), methods=["POST"])
        bp.add_url_rule("/mine", view_func=required(self.list_mine), methods=["GET"])
        bp.add_url_rule("/<int:post_id>", view_func=self.detail, methods=["GET"])
        bp.add_url_rule("/<int:post_id>", view_func=required(self.update), methods=["PUT"])
        bp.add_url_rule("/<int:post_id>", view_func=required(self.delete), methods=["DELETE"])
        bp.add_url_rule("/<int:post_id>/comments", view_func=self.comments, methods=["GET"])
        bp.add_url_rule(
            "/<int:post_id>/comments", view_func=required(self.add_comment), methods=["POST"]
        )
        bp.add_url_rule("/<int:post_id>/like", view_func=required(self.like), methods=["POST"])
        bp.add_url_rule(
            "/<int:post_id>/dislike", view_func=required(self.dislike), methods=["POST"]
        )
        return bp
