from .apis import (
    AuthApi,
    CommentsApi,
    FollowApi,
    LikesApi,
    NotificationApi,
    PostsApi,
    UsersApi,
)
from .config import DEFAULT_API_BASE_URL, ClientSettings, ConfigError, load_settings
from .configuration import Configuration, get_auth_config
from .exceptions import (
    ApiError,
    AuthError,
    ConflictError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidResponseError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    ValidationError,
)
from .http_client import HttpClient
from .models import (
    Comment,
    Follow,
    FollowStats,
    LoginResponse,
    Notification,
    NotificationType,
    Page,
    Post,
    PostCreate,
    PostType,
    PostUpdate,
    TokenValidation,
    User,
    UserSummary,
    UserUpdate,
)
from .registry import (
    ApiClientRegistry,
    clear_auth_token,
    get_api_client,
    get_auth_token,
    reset_api_client,
    set_auth_token,
)
from .storage import AUTH_TOKEN_KEY, LocalStorage, MemoryStorage

__version__ = "0.1.0"

__all__ = [
    "AUTH_TOKEN_KEY",
    "ApiClientRegistry",
    "ApiError",
    "AuthApi",
    "AuthError",
    "ClientSettings",
    "Comment",
    "CommentsApi",
    "ConflictError",
    "ConfigError",
    "Configuration",
    "DEFAULT_API_BASE_URL",
    "Follow",
    "FollowApi",
    "FollowStats",
    "ForbiddenError",
    "HttpClient",
    "InvalidCredentialsError",
    "InvalidResponseError",
    "LikesApi",
    "LocalStorage",
    "LoginResponse",
    "MemoryStorage",
    "NotFoundError",
    "Notification",
    "NotificationApi",
    "NotificationType",
    "Page",
    "Post",
    "PostCreate",
    "PostType",
    "PostUpdate",
    "PostsApi",
    "RateLimitError",
    "ServerError",
    "TokenValidation",
    "TransportError",
    "User",
    "UserSummary",
    "UserUpdate",
    "UsersApi",
    "ValidationError",
    "clear_auth_token",
    "get_api_client",
    "get_auth_config",
    "get_auth_token",
    "load_settings",
    "reset_api_client",
    "set_auth_token",
]
