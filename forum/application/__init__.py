# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.posts.create_post import CreatePostUseCase
from .use_cases.posts.read_posts import GetPostUseCase, ListUserPostsUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.logout_user import LogoutUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase
from .use_cases.users.resolve_session import ResolveSessionUseCase

__all__ = [
    "CreatePostUseCase",
    "GetPostUseCase",
    "ListUserPostsUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RegisterUserUseCase",
    "ResolveSessionUseCase",
]
