"""Get user activity use case."""

from pydantic import BaseModel

from forum.application.usecase.views import (
    CommentView,
    PostView,
    comment_view,
    post_view,
)
from forum.domain.service import PostService, authored_by, comments_by, liked_by
from forum.domain.value import UserId


class ActivityComment(BaseModel):
    """A user's comment with a reference to its post."""

    post_id: str
    post_title: str
    comment: CommentView


class GetUserActivityRequest(BaseModel):
    """Get user activity request."""

    user_id: str


class GetUserActivityResponse(BaseModel):
    """A user's posts, liked posts and comments."""

    user_id: str
    posts: list[PostView]
    liked_posts: list[PostView]
    comments: list[ActivityComment]


class GetUserActivityUseCase:
    """Use case for the "my activity" page."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get user activity use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetUserActivityRequest) -> GetUserActivityResponse:
        """Execute get user activity flow.

        Posts are matched on the hidden owner id, never the display name.
        """
        user_id = UserId(request.user_id)
        posts = await self.post_service.list_posts()

        return GetUserActivityResponse(
            user_id=request.user_id,
            posts=[post_view(p, user_id) for p in authored_by(posts, user_id)],
            liked_posts=[post_view(p, user_id) for p in liked_by(posts, user_id)],
            comments=[
                ActivityComment(
                    post_id=activity.post.id,
                    post_title=activity.post.title,
                    comment=comment_view(activity.comment, user_id),
                )
                for activity in comments_by(posts, user_id)
            ],
        )
