from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class PostType(str, Enum):
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"
    DRAFT = "DRAFT"


class NotificationType(str, Enum):
    NEW_POST = "NEW_POST"
    NEW_LIKE = "NEW_LIKE"
    NEW_COMMENT = "NEW_COMMENT"
    NEW_FOLLOW = "NEW_FOLLOW"


class UserRole(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class LoginRequest(ApiModel):
    username: str
    password: str


class LoginResponse(ApiModel):
    token: str
    username: str
    message: str | None = None


class TokenValidation(ApiModel):
    valid: bool
    username: str | None = None
    error: str | None = None


class UserSummary(ApiModel):
    id: int
    username: str
    first_name: str | None = None
    last_name: str | None = None
    profile_image: str | None = None


class User(ApiModel):
    id: int
    username: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    bio: str | None = None
    profile_image: str | None = None
    role: UserRole | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserUpdate(ApiModel):
    email: str | None = None
    first_name: str | None = Field(default=None, max_length=50)
    last_name: str | None = Field(default=None, max_length=50)
    bio: str | None = Field(default=None, max_length=500)
    profile_image: str | None = None


class Post(ApiModel):
    id: int
    title: str
    content: str
    type: PostType | None = None
    image_url: str | None = None
    active: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    author: UserSummary | None = None
    likes_count: int = 0
    comments_count: int = 0
    liked_by_current_user: bool | None = None


class PostCreate(ApiModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    type: PostType = PostType.PUBLIC
    image_url: str | None = None


class PostUpdate(ApiModel):
    title: str | None = Field(default=None, max_length=200)
    content: str | None = None
    type: PostType | None = None
    image_url: str | None = None


class Comment(ApiModel):
    id: int
    content: str
    active: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    author: UserSummary | None = None
    post_id: int | None = None


class CommentCreate(ApiModel):
    content: str = Field(min_length=1, max_length=1000)


class Notification(ApiModel):
    id: int
    type: NotificationType
    actor: UserSummary | None = None
    post_id: int | None = None
    comment_id: int | None = None
    read: bool = False
    created_at: datetime | None = None
    message: str | None = None


class Follow(ApiModel):
    id: int
    follower: UserSummary
    following: UserSummary
    created_at: datetime | None = None


class FollowStats(ApiModel):
    followers: int
    following: int
    is_following: bool | None = None


class LikeCount(ApiModel):
    count: int


class LikeStatus(ApiModel):
    liked: bool


class UnreadCount(ApiModel):
    count: int


class MessageResponse(ApiModel):
    message: str | None = None
    error: str | None = None


class Page(ApiModel, Generic[T]):
    content: List[T] = Field(default_factory=list)
    total_elements: int = 0
    total_pages: int = 0
    number: int = 0
    size: int = 0
    number_of_elements: int | None = None
    first: bool | None = None
    last: bool | None = None
    empty: bool | None = None


class PageRequest(ApiModel):
    page: int = Field(default=0, ge=0)
    size: int = Field(default=20, ge=1)
    sort: str | None = None

    def to_params(self) -> dict[str, object]:
        return self.model_dump(exclude_none=True)
