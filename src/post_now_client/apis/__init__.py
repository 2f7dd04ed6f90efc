from .auth import AuthApi
from .base import BaseApi, MutableAuth
from .comments import CommentsApi
from .follow import FollowApi
from .likes import LikesApi
from .notifications import NotificationApi
from .posts import PostsApi
from .users import UsersApi

__all__ = [
    "AuthApi",
    "BaseApi",
    "CommentsApi",
    "FollowApi",
    "LikesApi",
    "MutableAuth",
    "NotificationApi",
    "PostsApi",
    "UsersApi",
]
