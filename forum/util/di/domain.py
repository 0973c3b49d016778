"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import AdminSettings, AuthSettings
from forum.domain.repository import AdminRepository, PostRepository
from forum.domain.service import (
    AdminService,
    CommentService,
    JWTService,
    ModerationService,
    PostService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; they hold no state of their own.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(self, post_repository: PostRepository) -> CommentService:
        """Provide comment domain service."""
        return CommentService(post_repository=post_repository)

    @provide
    def get_moderation_service(
        self, post_repository: PostRepository
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(post_repository=post_repository)

    @provide
    def get_admin_service(
        self, admin_repository: AdminRepository, admin_settings: AdminSettings
    ) -> AdminService:
        """Provide admin registry domain service."""
        return AdminService(
            admin_repository=admin_repository, admin_settings=admin_settings
        )
