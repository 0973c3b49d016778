"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.admin import (
    AdminLoginUseCase,
    ChangePasswordUseCase,
    CreateAdminUseCase,
    GetCurrentAdminUseCase,
    ListAdminsUseCase,
    RemoveAdminUseCase,
)
from forum.application.usecase.comment import (
    AddCommentUseCase,
    DeleteCommentUseCase,
    EditCommentUseCase,
)
from forum.application.usecase.feed import (
    GetBoardUseCase,
    GetRecentPostsUseCase,
    GetUserActivityUseCase,
)
from forum.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    ToggleLikeUseCase,
    TogglePinUseCase,
    UpdatePostUseCase,
)
from forum.config import ListingSettings
from forum.domain.service import (
    AdminService,
    CommentService,
    JWTService,
    ModerationService,
    PostService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self,
        post_service: PostService,
        admin_service: AdminService,
        jwt_service: JWTService,
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_service=post_service,
            admin_service=admin_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(self, post_service: PostService) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_pin_use_case(
        self,
        moderation_service: ModerationService,
        admin_service: AdminService,
        jwt_service: JWTService,
    ) -> TogglePinUseCase:
        """Provide toggle pin use case."""
        return TogglePinUseCase(
            moderation_service=moderation_service,
            admin_service=admin_service,
            jwt_service=jwt_service,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, comment_service: CommentService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_edit_comment_use_case(
        self, comment_service: CommentService
    ) -> EditCommentUseCase:
        """Provide edit comment use case."""
        return EditCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        admin_service: AdminService,
        jwt_service: JWTService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            admin_service=admin_service,
            jwt_service=jwt_service,
        )

    # Feed use cases
    @provide(scope=Scope.REQUEST)
    def get_board_use_case(
        self, post_service: PostService, listing_settings: ListingSettings
    ) -> GetBoardUseCase:
        """Provide get board use case."""
        return GetBoardUseCase(
            post_service=post_service, listing_settings=listing_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_recent_posts_use_case(
        self, post_service: PostService, listing_settings: ListingSettings
    ) -> GetRecentPostsUseCase:
        """Provide get recent posts use case."""
        return GetRecentPostsUseCase(
            post_service=post_service, listing_settings=listing_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_user_activity_use_case(
        self, post_service: PostService
    ) -> GetUserActivityUseCase:
        """Provide get user activity use case."""
        return GetUserActivityUseCase(post_service=post_service)

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_admin_login_use_case(
        self, admin_service: AdminService, jwt_service: JWTService
    ) -> AdminLoginUseCase:
        """Provide admin login use case."""
        return AdminLoginUseCase(admin_service=admin_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_admin_use_case(
        self, admin_service: AdminService, jwt_service: JWTService
    ) -> GetCurrentAdminUseCase:
        """Provide get current admin use case."""
        return GetCurrentAdminUseCase(
            admin_service=admin_service, jwt_service=jwt_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_admins_use_case(
        self, admin_service: AdminService, jwt_service: JWTService
    ) -> ListAdminsUseCase:
        """Provide list admins use case."""
        return ListAdminsUseCase(admin_service=admin_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_create_admin_use_case(
        self, admin_service: AdminService, jwt_service: JWTService
    ) -> CreateAdminUseCase:
        """Provide create admin use case."""
        return CreateAdminUseCase(admin_service=admin_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_admin_use_case(
        self, admin_service: AdminService, jwt_service: JWTService
    ) -> RemoveAdminUseCase:
        """Provide remove admin use case."""
        return RemoveAdminUseCase(admin_service=admin_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_change_password_use_case(
        self, admin_service: AdminService, jwt_service: JWTService
    ) -> ChangePasswordUseCase:
        """Provide change password use case."""
        return ChangePasswordUseCase(
            admin_service=admin_service, jwt_service=jwt_service
        )
