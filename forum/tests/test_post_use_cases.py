from __future__ import annotations

import pytest

from forum.application.use_cases.posts.comments import AddCommentUseCase, ListCommentsUseCase
from forum.application.use_cases.posts.create_post import CreatePostUseCase
from forum.application.use_cases.posts.edit_post import DeletePostUseCase, UpdatePostUseCase
from forum.application.use_cases.posts.react_to_post import ReactToPostUseCase
from forum.application.use_cases.posts.read_posts import GetPostUseCase, ListPostsUseCase
from forum.domain.posts import PostAccessDeniedError, PostNotFoundError, Reaction
from forum.shared.errors import ValidationError
from forum.tests.support import FakeClock, InMemoryCommentRepository, InMemoryPostRepository

AUTHOR, READER = 1, 2


class PostsFixture:
    def __init__(self, clock: FakeClock) -> None:
        self.clock = clock
        self.posts = InMemoryPostRepository()
        self.comments = InMemoryCommentRepository()
        self.create = CreatePostUseCase(posts=self.posts, clock=clock)
        self.get = GetPostUseCase(posts=self.posts)
        self.list_all = ListPostsUseCase(posts=self.posts)
        self.update = UpdatePostUseCase(posts=self.posts)
        self.delete = DeletePostUseCase(posts=self.posts)
        self.add_comment = AddCommentUseCase(posts=self.posts, comments=self.comments, clock=clock)
        self.list_comments = ListCommentsUseCase(posts=self.posts, comments=self.comments)
        self.react = ReactToPostUseCase(posts=self.posts)


@pytest.fixture()
def forum(clock: FakeClock) -> PostsFixture:
    return PostsFixture(clock)


def test_list_all_returns_every_author_newest_first(forum: PostsFixture) -> None:
    first = forum.create.execute(AUTHOR, "First", "one")
    second = forum.create.execute(READER, "Second", "two")

    assert [post.id for post in forum.list_all.execute()] == [second.id, first.id]


def test_author_can_update_post(forum: PostsFixture) -> None:
    post = forum.create.execute(AUTHOR, "Draft", "body")

    updated = forum.update.execute(post.id, AUTHOR, "  Final  ", "new body")

    assert updated.title == "Final"
    assert updated.content == "new body"
    assert updated.created_at == post.created_at
    assert forum.get.execute(post.id).title == "Final"


def test_update_by_other_user_is_forbidden(forum: PostsFixture) -> None:
    post = forum.create.execute(AUTHOR, "Draft", "body")

    with pytest.raises(PostAccessDeniedError) as exc_info:
        forum.update.execute(post.id, READER, "Hijacked", "body")

    assert exc_info.value.status == 403
    assert forum.get.execute(post.id).title == "Draft"


def test_update_validates_new_title(forum: PostsFixture) -> None:
    post = forum.create.execute(AUTHOR, "Draft", "body")

    with pytest.raises(ValidationError) as exc_info:
        forum.update.execute(post.id, AUTHOR, "   ", "body")

    assert exc_info.value.code == "invalid_title"


def test_update_missing_post_raises_not_found(forum: PostsFixture) -> None:
    with pytest.raises(PostNotFoundError):
        forum.update.execute(42, AUTHOR, "Title", "body")


def test_delete_is_limited_to_author(forum: PostsFixture) -> None:
    post = forum.create.execute(AUTHOR, "Draft", "body")

    with pytest.raises(PostAccessDeniedError):
        forum.delete.execute(post.id, READER)

    forum.delete.execute(post.id, AUTHOR)

    with pytest.raises(PostNotFoundError):
        forum.get.execute(post.id)


def test_comments_are_listed_oldest_first(forum: PostsFixture) -> None:
    post = forum.create.execute(AUTHOR, "Topic", "body")

    forum.add_comment.execute(post.id, READER, "  first!  ")
    forum.clock.advance(minutes=1)
    forum.add_comment.execute(post.id, AUTHOR, "thanks")

    comments = forum.list_comments.execute(post.id)
    assert [(c.author_id, c.content) for c in comments] == [(READER, "first!"), (AUTHOR, "thanks")]
    assert comments[0].created_at < comments[1].created_at


def test_comment_on_missing_post_raises_not_found(forum: PostsFixture) -> None:
    with pytest.raises(PostNotFoundError):
        forum.add_comment.execute(7, READER, "hello?")
    with pytest.raises(PostNotFoundError):
        forum.list_comments.execute(7)


@pytest.mark.parametrize("content", ["", "   ", "x" * 1001])
def test_comment_content_is_validated(forum: PostsFixture, content: str) -> None:
    post = forum.create.execute(AUTHOR, "Topic", "body")

    with pytest.raises(ValidationError) as exc_info:
        forum.add_comment.execute(post.id, READER, content)

    assert exc_info.value.code == "invalid_content"
    assert forum.comments.comments == []


def test_repeating_a_reaction_withdraws_it(forum: PostsFixture) -> None:
    post = forum.create.execute(AUTHOR, "Topic", "body")

    liked, reaction = forum.react.execute(post.id, READER, Reaction.LIKE)
    assert (liked.likes, liked.dislikes, reaction) == (1, 0, Reaction.LIKE)

    withdrawn, reaction = forum.react.execute(post.id, READER, Reaction.LIKE)
    assert (withdrawn.likes, withdrawn.dislikes, reaction) == (0, 0, None)


def test_opposite_reaction_replaces_previous_one(forum: PostsFixture) -> None:
    post = forum.create.execute(AUTHOR, "Topic", "body")
    forum.react.execute(post.id, READER, Reaction.LIKE)
    forum.react.execute(post.id, AUTHOR, Reaction.LIKE)

    switched, reaction = forum.react.execute(post.id, READER, Reaction.DISLIKE)

    assert reaction is Reaction.DISLIKE
    assert (switched.likes, switched.dislikes) == (1, 1)


def test_react_to_missing_post_raises_not_found(forum: PostsFixture) -> None:
    with pytest.raises(PostNotFoundError):
        forum.react.execute(99, READER, Reaction.DISLIKE)
