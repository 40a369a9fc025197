"""Fakes and helpers shared by the test modules."""

from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime, timedelta

from flask.testing import FlaskClient

from forum.domain.posts import Comment, CommentRepository, Post, PostRepository, Reaction
from forum.domain.users.entities import User
from forum.domain.users.repositories import PasswordHasher, UserRepository

ALICE = {"username": "alice", "email": "a@x.com", "password": "Secret1"}


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        # Starts at wall-clock time so cookies issued under it are not already expired.
        self.now = start or datetime.now(UTC).replace(microsecond=0)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    def find_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    def find_by_email_or_username(self, identifier: str) -> User | None:
        return self.find_by_email(identifier) or self.find_by_username(identifier)

    def add(self, user: User) -> User:
        new_user = User(
            id=self._seq,
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
        )
        self._seq += 1
        self._users[new_user.id] = new_user
        return new_user

    def remove(self, user_id: int) -> None:
        self._users.pop(user_id, None)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class InMemoryPostRepository(PostRepository):
    def __init__(self) -> None:
        self._posts: dict[int, Post] = {}
        self._reactions: dict[tuple[int, int], Reaction] = {}
        self._seq = 1

    def _tallied(self, post: Post) -> Post:
        values = [r for (post_id, _), r in self._reactions.items() if post_id == post.id]
        return replace(
            post,
            likes=values.count(Reaction.LIKE),
            dislikes=values.count(Reaction.DISLIKE),
        )

    def add(self, post: Post) -> Post:
        stored = replace(post, id=self._seq)
        self._seq += 1
        self._posts[stored.id] = stored
        return stored

    def get(self, post_id: int) -> Post | None:
        post = self._posts.get(post_id)
        return self._tallied(post) if post else None

    def list_all(self) -> list[Post]:
        return [self._tallied(p) for p in sorted(self._posts.values(), key=lambda p: -p.id)]

    def list_for_author(self, author_id: int) -> list[Post]:
        return [p for p in self.list_all() if p.author_id == author_id]

    def update(self, post: Post) -> Post | None:
        if post.id not in self._posts:
            return None
        self._posts[post.id] = post
        return self.get(post.id)

    def delete(self, post_id: int) -> bool:
        self._reactions = {k: v for k, v in self._reactions.items() if k[0] != post_id}
        return self._posts.pop(post_id, None) is not None

    def get_reaction(self, post_id: int, user_id: int) -> Reaction | None:
        return self._reactions.get((post_id, user_id))

    def set_reaction(self, post_id: int, user_id: int, reaction: Reaction | None) -> None:
        if reaction is None:
            self._reactions.pop((post_id, user_id), None)
        else:
            self._reactions[(post_id, user_id)] = reaction


class InMemoryCommentRepository(CommentRepository):
    def __init__(self) -> None:
        self.comments: list[Comment] = []

    def add(self, comment: Comment) -> Comment:
        stored = replace(comment, id=len(self.comments) + 1)
        self.comments.append(stored)
        return stored

    def list_for_post(self, post_id: int) -> list[Comment]:
        return [c for c in self.comments if c.post_id == post_id]


def register_and_login(client: FlaskClient, account: dict[str, str] = ALICE) -> int:
    registered = client.post("/api/auth/register", json=account)
    assert registered.status_code == 201
    login = client.post(
        "/api/auth/login",
        json={"identifier": account["username"], "password": account["password"]},
    )
    assert login.status_code == 200
    return registered.get_json()["user_id"]
