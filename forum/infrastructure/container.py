# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from forum.application.services.password_hashing import WerkzeugPasswordHasher
from forum.application.use_cases.posts.comments import AddCommentUseCase, ListCommentsUseCase
from forum.application.use_cases.posts.create_post import CreatePostUseCase
from forum.application.use_cases.posts.edit_post import DeletePostUseCase, UpdatePostUseCase
from forum.application.use_cases.posts.react_to_post import ReactToPostUseCase
from forum.application.use_cases.posts.read_posts import (
    GetPostUseCase,
    ListPostsUseCase,
    ListUserPostsUseCase,
)
from forum.application.use_cases.users.login_user import LoginUserUseCase
from forum.application.use_cases.users.logout_user import LogoutUserUseCase
from forum.application.use_cases.users.register_user import RegisterUserUseCase
from forum.application.use_cases.users.resolve_session import ResolveSessionUseCase
from forum.infrastructure.db import create_db_engine, create_session_factory
from forum.infrastructure.repositories.sqlalchemy_comment_repository import (
    SqlAlchemyCommentRepository,
)
from forum.infrastructure.repositories.sqlalchemy_post_repository import SqlAlchemyPostRepository
from forum.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from forum.infrastructure.session_middleware import SessionAuthenticator
from forum.infrastructure.sessions import InMemorySessionRegistry
from forum.interfaces.http.controllers.auth_controller import AuthController
from forum.interfaces.http.controllers.misc_controller import MiscController
from forum.interfaces.http.controllers.posts_controller import PostsController
from forum.shared.config import AppConfig, load_config
from forum.utils.clock import Clock, utc_now


class Container:
    """Builds every long-lived collaborator once and wires them by reference."""

    def __init__(self, config: AppConfig | None = None, *, clock: Clock = utc_now) -> None:
        self.config = config or load_config()
        self.clock = clock

    # Persistence

    @cached_property
    def engine(self) -> Engine:
        return create_db_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return create_session_factory(self.engine)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def post_repository(self) -> SqlAlchemyPostRepository:
        return SqlAlchemyPostRepository(self.session_factory)

    @cached_property
    def comment_repository(self) -> SqlAlchemyCommentRepository:
        return SqlAlchemyCommentRepository(self.session_factory)

    # Sessions and credentials

    @cached_property
    def session_registry(self) -> InMemorySessionRegistry:
        interval = self.config.session.sweep_interval
        return InMemorySessionRegistry(
            clock=self.clock,
            sweep_interval=timedelta(seconds=interval) if interval else None,
        )

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            clock=self.clock,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            sessions=self.session_registry,
            password_hasher=self.password_hasher,
            session_lifetime=timedelta(seconds=self.config.session.lifetime),
            clock=self.clock,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(sessions=self.session_registry)

    @cached_property
    def resolve_session_use_case(self) -> ResolveSessionUseCase:
        return ResolveSessionUseCase(users=self.user_repository, sessions=self.session_registry)

    @cached_property
    def authenticator(self) -> SessionAuthenticator:
        return SessionAuthenticator(
            resolve_session=self.resolve_session_use_case,
            cookie_name=self.config.session.cookie_name,
        )

    # Posts

    @cached_property
    def create_post_use_case(self) -> CreatePostUseCase:
        return CreatePostUseCase(posts=self.post_repository, clock=self.clock)

    @cached_property
    def get_post_use_case(self) -> GetPostUseCase:
        return GetPostUseCase(posts=self.post_repository)

    @cached_property
    def list_user_posts_use_case(self) -> ListUserPostsUseCase:
        return ListUserPostsUseCase(posts=self.post_repository)

    @cached_property
    def list_posts_use_case(self) -> ListPostsUseCase:
        return ListPostsUseCase(posts=self.post_repository)

    @cached_property
    def update_post_use_case(self) -> UpdatePostUseCase:
        return UpdatePostUseCase(posts=self.post_repository)

    @cached_property
    def delete_post_use_case(self) -> DeletePostUseCase:
        return DeletePostUseCase(posts=self.post_repository)

    @cached_property
    def add_comment_use_case(self) -> AddCommentUseCase:
        return AddCommentUseCase(
            posts=self.post_repository, comments=self.comment_repository, clock=self.clock
        )

    @cached_property
    def list_comments_use_case(self) -> ListCommentsUseCase:
        return ListCommentsUseCase(posts=self.post_repository, comments=self.comment_repository)

    @cached_property
    def react_to_post_use_case(self) -> ReactToPostUseCase:
        return ReactToPostUseCase(posts=self.post_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            authenticator=self.authenticator,
            cookie_secure=self.config.security.cookie_secure,
            cookie_samesite=self.config.security.cookie_samesite,
        )

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(
            create_post=self.create_post_use_case,
            get_post=self.get_post_use_case,
            list_posts=self.list_posts_use_case,
            list_user_posts=self.list_user_posts_use_case,
            update_post=self.update_post_use_case,
            delete_post=self.delete_post_use_case,
            add_comment=self.add_comment_use_case,
            list_comments=self.list_comments_use_case,
            react_to_post=self.react_to_post_use_case,
            authenticator=self.authenticator,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.engine)
