"""Unit tests for post use cases."""

import pytest

from forum.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
    TogglePinRequest,
    TogglePinUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from forum.domain.error import InvalidInputError, NotAuthorizedError, NotFoundError
from forum.domain.repository import PostRepository
from forum.domain.service import AdminService, JWTService
from forum.domain.value import ANONYMOUS_AUTHOR, Category, PostId
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _admin_session(unit_env, admin_id="root"):
    admin_service = await unit_env.get(AdminService)
    jwt_service = await unit_env.get(JWTService)
    account = await admin_service.create_admin(admin_id, "Root", "s3cret!")
    return jwt_service.create_token(account.id, account.name)


class TestCreatePost:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_token_returned_once(self, unit_env):
        """The token is in the create response but not in the view."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)

        # Act
        response = await use_case.execute(
            CreatePostRequest(
                title="Pendulum periods",
                content="Measured with a phone stopwatch",
                category=Category.TRIAL,
                author=ANONYMOUS_AUTHOR,
                hidden_user_id="u1",
            )
        )

        # Assert
        assert response.token
        assert response.post.is_mine is True
        assert response.post.author == ANONYMOUS_AUTHOR
        assert response.post.category_label == "2. 연구 중 시행착오 나눔"
        dumped = response.post.model_dump()
        assert "token" not in dumped
        assert "hidden_user_id" not in dumped

    @pytest.mark.asyncio
    async def test_missing_category(self, unit_env):
        use_case = await unit_env.get(CreatePostUseCase)
        with pytest.raises(InvalidInputError):
            await use_case.execute(CreatePostRequest(title="t", content="c", author="a"))


class TestGetPost:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_viewer_flags(self, unit_env):
        """Like and ownership flags are relative to the viewer."""
        # Arrange
        use_case = await unit_env.get(GetPostUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.create(
            make_post(
                "p1",
                hidden_user_id="u1",
                likes=1,
                liked_user_ids=["u2"],
                comments=[make_comment("c1", user_id="u2", is_anonymous=True)],
            )
        )

        # Act
        as_owner = await use_case.execute(GetPostRequest(post_id="p1", viewer_id="u1"))
        as_fan = await use_case.execute(GetPostRequest(post_id="p1", viewer_id="u2"))

        # Assert
        assert as_owner.post.is_mine and not as_owner.post.liked_by_me
        assert as_fan.post.liked_by_me and not as_fan.post.is_mine
        assert as_fan.post.comments[0].is_mine
        assert as_fan.post.comments[0].author == ANONYMOUS_AUTHOR
        assert as_owner.post.comment_count == 1

    @pytest.mark.asyncio
    async def test_missing(self, unit_env):
        use_case = await unit_env.get(GetPostUseCase)
        with pytest.raises(NotFoundError):
            await use_case.execute(GetPostRequest(post_id="missing"))


class TestUpdatePost:
    """Tests for UpdatePostUseCase."""

    @pytest.mark.asyncio
    async def test_partial_update_by_token(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.create(make_post("p1", hidden_user_id="", token="t1"))

        # Act
        response = await use_case.execute(
            UpdatePostRequest(post_id="p1", token="t1", content="Updated body")
        )

        # Assert
        assert response.post.content == "Updated body"
        assert response.post.title == "Why is the sky blue?"

    @pytest.mark.asyncio
    async def test_wrong_token(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.create(make_post("p1"))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(UpdatePostRequest(post_id="p1", token="bad", title="x"))


class TestDeletePost:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_admin_session_deletes(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.create(make_post("p1"))
        admin_token = await _admin_session(unit_env)

        # Act
        response = await use_case.execute(
            DeletePostRequest(post_id="p1", admin_token=admin_token)
        )

        # Assert
        assert response.deleted is True
        assert await post_repo.find_by_id(PostId("p1")) is None

    @pytest.mark.asyncio
    async def test_removed_admin_loses_bypass(self, unit_env):
        """A still-valid session for a removed admin grants nothing."""
        # Arrange
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        admin_service = await unit_env.get(AdminService)
        await post_repo.create(make_post("p1"))
        admin_token = await _admin_session(unit_env, admin_id="gone")
        await admin_service.create_admin("root", "Root", "s3cret!")
        await admin_service.remove_admin("root", "gone")

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(DeletePostRequest(post_id="p1", admin_token=admin_token))

    @pytest.mark.asyncio
    async def test_forged_session_is_ignored(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.create(make_post("p1"))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeletePostRequest(post_id="p1", admin_token="not.a.jwt")
            )

    @pytest.mark.asyncio
    async def test_owner_deletes(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.create(make_post("p1", hidden_user_id="u1"))

        # Act
        await use_case.execute(DeletePostRequest(post_id="p1", user_id="u1"))

        # Assert
        assert await post_repo.find_by_id(PostId("p1")) is None


class TestToggleLike:
    """Tests for ToggleLikeUseCase."""

    @pytest.mark.asyncio
    async def test_like_and_unlike(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ToggleLikeUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.create(make_post("p1"))

        # Act
        liked = await use_case.execute(ToggleLikeRequest(post_id="p1", user_id="alice"))
        unliked = await use_case.execute(ToggleLikeRequest(post_id="p1", user_id="alice"))

        # Assert
        assert (liked.liked, liked.likes) == (True, 1)
        assert liked.post.liked_by_me is True
        assert (unliked.liked, unliked.likes) == (False, 0)

    @pytest.mark.asyncio
    async def test_missing_user_id(self, unit_env):
        use_case = await unit_env.get(ToggleLikeUseCase)
        with pytest.raises(InvalidInputError):
            await use_case.execute(ToggleLikeRequest(post_id="p1"))


class TestTogglePin:
    """Tests for TogglePinUseCase."""

    @pytest.mark.asyncio
    async def test_admin_pins(self, unit_env):
        # Arrange
        use_case = await unit_env.get(TogglePinUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.create(make_post("p1"))
        admin_token = await _admin_session(unit_env)

        # Act
        response = await use_case.execute(
            TogglePinRequest(post_id="p1", admin_token=admin_token)
        )

        # Assert
        assert response.post.is_pinned is True
        assert response.post.pinned_at is not None

    @pytest.mark.asyncio
    async def test_non_admin_cannot_pin(self, unit_env):
        # Arrange
        use_case = await unit_env.get(TogglePinUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.create(make_post("p1"))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(TogglePinRequest(post_id="p1"))

        saved = await post_repo.find_by_id(PostId("p1"))
        assert saved.is_pinned is False
