# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from forum.shared.errors.base import DomainError


class PostNotFoundError(DomainError):
    default_code = "post_not_found"
    default_status = HTTPStatus.NOT_FOUND

    def __init__(self, post_id: int) -> None:
        super().__init__(context={"post_id": post_id})


class PostAccessDeniedError(DomainError):
    """Only the author may change or remove a post."""

    default_code = "forbidden"
    default_status = HTTPStatus.FORBIDDEN

    def __init__(self, post_id: int) -> None:
        super().__init__(context={"post_id": post_id})
