"""Unit tests for comment use cases."""

import pytest

from forum.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
)
from forum.domain.error import NotAuthorizedError
from forum.domain.repository import PostRepository
from forum.domain.service import AdminService, JWTService
from forum.domain.value import ANONYMOUS_AUTHOR
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAddComment:
    """Tests for AddCommentUseCase."""

    @pytest.mark.asyncio
    async def test_returns_new_comment_id(self, unit_env):
        # Arrange
        use_case = await unit_env.get(AddCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.create(make_post("p1"))

        # Act
        response = await use_case.execute(
            AddCommentRequest(
                post_id="p1",
                content="Control group?",
                author="Mendel",
                user_id="u5",
                is_anonymous=True,
            )
        )

        # Assert
        assert response.post.comment_count == 1
        view = response.post.comments[0]
        assert view.comment_id == response.comment_id
        assert view.author == ANONYMOUS_AUTHOR
        assert view.is_mine is True


class TestEditComment:
    """Tests for EditCommentUseCase."""

    @pytest.mark.asyncio
    async def test_owner_edits(self, unit_env):
        # Arrange
        use_case = await unit_env.get(EditCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.create(make_post("p1", comments=[make_comment("c1", user_id="u1")]))

        # Act
        response = await use_case.execute(
            EditCommentRequest(
                post_id="p1", comment_id="c1", user_id="u1", content="Fixed", author="Darwin"
            )
        )

        # Assert
        assert response.post.comments[0].content == "Fixed"
        assert response.post.comments[0].edited_at is not None

    @pytest.mark.asyncio
    async def test_admin_session_grants_no_edit(self, unit_env):
        """Edit requests carry no admin session at all."""
        # Arrange
        use_case = await unit_env.get(EditCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.create(make_post("p1", comments=[make_comment("c1", user_id="u1")]))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                EditCommentRequest(post_id="p1", comment_id="c1", content="x", author="x")
            )


class TestDeleteComment:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_admin_session_deletes(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        admin_service = await unit_env.get(AdminService)
        jwt_service = await unit_env.get(JWTService)
        await post_repo.create(make_post("p1", comments=[make_comment("c1")]))
        account = await admin_service.create_admin("root", "Root", "s3cret!")
        token = jwt_service.create_token(account.id, account.name)

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(post_id="p1", comment_id="c1", admin_token=token)
        )

        # Assert
        assert response.post.comments == []

    @pytest.mark.asyncio
    async def test_stranger_rejected(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.create(make_post("p1", comments=[make_comment("c1")]))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(post_id="p1", comment_id="c1", user_id="other")
            )
