"""Unit tests for ModerationService."""

import pytest

from forum.domain.error import NotFoundError
from forum.domain.repository import PostRepository
from forum.domain.service import ModerationService
from forum.domain.value import PostId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestTogglePin:
    """Tests for toggle_pin."""

    @pytest.mark.asyncio
    async def test_pin_sets_timestamp(self, unit_env):
        """Pinning records when the post was pinned."""
        # Arrange
        moderation = await unit_env.get(ModerationService)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.create(make_post("p1"))

        # Act
        post = await moderation.toggle_pin(PostId("p1"))

        # Assert
        assert post.is_pinned is True
        assert post.pinned_at is not None

    @pytest.mark.asyncio
    async def test_unpin_clears_timestamp(self, unit_env):
        """Toggling twice leaves the post unpinned with no timestamp."""
        # Arrange
        moderation = await unit_env.get(ModerationService)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.create(make_post("p1"))

        # Act
        await moderation.toggle_pin(PostId("p1"))
        post = await moderation.toggle_pin(PostId("p1"))

        # Assert
        assert post.is_pinned is False
        assert post.pinned_at is None

    @pytest.mark.asyncio
    async def test_pin_missing_post(self, unit_env):
        """Pinning a missing post raises NotFoundError."""
        # Arrange
        moderation = await unit_env.get(ModerationService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await moderation.toggle_pin(PostId("missing"))
