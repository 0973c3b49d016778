"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator, model_validator

from forum.domain.value.common import ValueObject

ANONYMOUS_AUTHOR = "익명"


class Category(str, Enum):
    """Board categories.

    `NOTICE` is reserved for announcements; the numbered research
    categories follow the club's inquiry process.
    """

    NOTICE = "notice"
    INTRO = "intro"
    DESIGN = "design"
    TRIAL = "trial"
    RESULT = "result"
    FEEDBACK = "feedback"
    HUMANITIES = "humanities"
    SCIENCE = "science"
    FUSION = "fusion"

    @property
    def label(self) -> str:
        """Human-readable board label."""
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    Category.NOTICE: "공지",
    Category.INTRO: "0. 탐구입문",
    Category.DESIGN: "1. 탐구 설계・자료 추천",
    Category.TRIAL: "2. 연구 중 시행착오 나눔",
    Category.RESULT: "3. 이상한 결과・결론 도출 질문",
    Category.FEEDBACK: "4. 탐구 피드백・보완 제안",
    Category.HUMANITIES: "5. 인문 계열 지식 토론",
    Category.SCIENCE: "6. 자연 계열 지식 토론",
    Category.FUSION: "7. 융합형 토론・모델 제안",
}


class MediaType(str, Enum):
    """Type tag of a media attachment."""

    IMAGE = "image"
    VIDEO = "video"
    NONE = "none"

    @classmethod
    def from_mimetype(cls, mimetype: str | None) -> "MediaType":
        """Classify an uploaded file by its MIME type."""
        if not mimetype:
            return cls.NONE
        if mimetype.startswith("image/"):
            return cls.IMAGE
        if mimetype.startswith("video/"):
            return cls.VIDEO
        return cls.NONE


class MediaAttachment(ValueObject):
    """Reference to an uploaded file.

    The core only stores the URL and its type; it never inspects file bytes.
    """

    url: str
    type: MediaType

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL is not blank."""
        if not v.strip():
            raise ValueError("Media URL must not be empty")
        return v

    @model_validator(mode="after")
    def validate_type(self) -> "MediaAttachment":
        """An attachment with a URL must be an image or a video."""
        if self.type == MediaType.NONE:
            raise ValueError("Media attachment type must be image or video")
        return self


class PostContentPatch(ValueObject):
    """Editable post fields. `None` leaves the stored value untouched."""

    title: str | None = None
    content: str | None = None
    category: Category | None = None
    link: str | None = None
    media: list[MediaAttachment] | None = None

    def changes(self) -> dict[str, object]:
        """Return only the fields that were supplied."""
        return {
            name: getattr(self, name)
            for name in type(self).model_fields
            if getattr(self, name) is not None
        }


class CommentPatch(ValueObject):
    """Replacement values for an edited comment."""

    content: str
    author: str
    is_anonymous: bool = False
