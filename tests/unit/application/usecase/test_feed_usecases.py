"""Unit tests for feed use cases."""

from datetime import datetime, timedelta, timezone

import pytest

from forum.application.usecase.feed import (
    GetBoardRequest,
    GetBoardUseCase,
    GetRecentPostsRequest,
    GetRecentPostsUseCase,
    GetUserActivityRequest,
    GetUserActivityUseCase,
)
from forum.domain.error import InvalidInputError
from forum.domain.repository import PostRepository
from forum.domain.service import ModerationService
from forum.domain.value import Category, PostId
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

BASE = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


async def _seed(post_repo, count, category=Category.SCIENCE):
    for i in range(count):
        await post_repo.create(
            make_post(f"p{i}", category=category, created_at=BASE + timedelta(hours=i))
        )


class TestGetBoard:
    """Tests for GetBoardUseCase."""

    @pytest.mark.asyncio
    async def test_pinned_posts_on_every_page(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetBoardUseCase)
        post_repo = await unit_env.get(PostRepository)
        moderation = await unit_env.get(ModerationService)
        await _seed(post_repo, 20)
        for post_id in ("p0", "p5", "p10"):
            await moderation.toggle_pin(PostId(post_id))

        # Act
        first = await use_case.execute(GetBoardRequest(page=1))
        second = await use_case.execute(GetBoardRequest(page=2))

        # Assert
        assert len(first.pinned) == 3
        assert len(first.posts) == 15
        assert len(second.pinned) == 3
        assert len(second.posts) == 2
        assert first.total_pages == 2

    @pytest.mark.asyncio
    async def test_category_board(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetBoardUseCase)
        post_repo = await unit_env.get(PostRepository)
        await _seed(post_repo, 2)
        await post_repo.create(make_post("n1", category=Category.NOTICE))

        # Act
        board = await use_case.execute(GetBoardRequest(category=Category.NOTICE))

        # Assert
        assert board.category == Category.NOTICE
        assert [p.post_id for p in board.posts] == ["n1"]

    @pytest.mark.asyncio
    async def test_page_zero(self, unit_env):
        use_case = await unit_env.get(GetBoardUseCase)
        with pytest.raises(InvalidInputError):
            await use_case.execute(GetBoardRequest(page=0))


class TestGetRecentPosts:
    """Tests for GetRecentPostsUseCase."""

    @pytest.mark.asyncio
    async def test_five_newest(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetRecentPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        await _seed(post_repo, 7)

        # Act
        response = await use_case.execute(GetRecentPostsRequest())

        # Assert
        assert [p.post_id for p in response.posts] == ["p6", "p5", "p4", "p3", "p2"]


class TestGetUserActivity:
    """Tests for GetUserActivityUseCase."""

    @pytest.mark.asyncio
    async def test_activity(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetUserActivityUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.create(make_post("mine", hidden_user_id="u1", created_at=BASE))
        await post_repo.create(
            make_post(
                "theirs",
                hidden_user_id="u2",
                created_at=BASE + timedelta(days=1),
                likes=1,
                liked_user_ids=["u1"],
                comments=[make_comment("c1", user_id="u1")],
            )
        )

        # Act
        activity = await use_case.execute(GetUserActivityRequest(user_id="u1"))

        # Assert
        assert [p.post_id for p in activity.posts] == ["mine"]
        assert [p.post_id for p in activity.liked_posts] == ["theirs"]
        assert activity.liked_posts[0].liked_by_me is True
        assert [(c.post_id, c.comment.comment_id) for c in activity.comments] == [
            ("theirs", "c1")
        ]
        assert activity.comments[0].post_title == "Why is the sky blue?"
