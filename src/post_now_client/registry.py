from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterator

from .apis import (
    AuthApi,
    CommentsApi,
    FollowApi,
    LikesApi,
    MutableAuth,
    NotificationApi,
    PostsApi,
    UsersApi,
)
from .apis.base import BaseApi
from .config import ClientSettings, load_settings
from .configuration import get_auth_config
from .http_client import HttpClient
from .logger import log_action
from .models import LoginResponse
from .storage import AUTH_TOKEN_KEY, KeyValueStorage, LocalStorage

RESOURCE_CLIENTS: tuple[tuple[str, type[BaseApi]], ...] = (
    ("auth", AuthApi),
    ("posts", PostsApi),
    ("users", UsersApi),
    ("comments", CommentsApi),
    ("likes", LikesApi),
    ("notifications", NotificationApi),
    ("follow", FollowApi),
)

logger = logging.getLogger(__name__)


@dataclass
class ApiClientRegistry:
    """One resource client per API group, all sharing the stored bearer token.

    Every client owns its own Configuration, built from storage when the
    registry is created. Token changes go through ``set_auth_token`` and
    ``clear_auth_token``, which update storage first and then every client's
    existing Configuration in place, so a reference to a client's
    configuration never goes stale.
    """

    settings: ClientSettings | None = None
    storage: KeyValueStorage | None = None
    http: HttpClient | None = None
    auth: AuthApi = field(init=False)
    posts: PostsApi = field(init=False)
    users: UsersApi = field(init=False)
    comments: CommentsApi = field(init=False)
    likes: LikesApi = field(init=False)
    notifications: NotificationApi = field(init=False)
    follow: FollowApi = field(init=False)

    def __post_init__(self) -> None:
        self.settings = self.settings or load_settings()
        if self.storage is None:
            self.storage = LocalStorage(
                app_name=self.settings.storage_app_name,
                directory=self.settings.storage_dir,
            )
        self.http = self.http or HttpClient(settings=self.settings)
        self._lock = threading.Lock()
        for name, api_type in RESOURCE_CLIENTS:
            setattr(self, name, api_type(configuration=get_auth_config(self.storage, self.settings), http=self.http))

    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in RESOURCE_CLIENTS)

    def items(self) -> Iterator[tuple[str, object]]:
        for name in self.names():
            yield name, getattr(self, name)

    def clients(self) -> Iterator[object]:
        for _, client in self.items():
            yield client

    def get_auth_token(self) -> str | None:
        return self.storage.get_item(AUTH_TOKEN_KEY)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.get_auth_token())

    def set_auth_token(self, token: str) -> None:
        """Persist ``token`` and hand it to every client.

        Raises ValueError for an empty token; use ``clear_auth_token`` to log out.
        """
        if not token:
            raise ValueError("token must be a non-empty string")
        with self._lock:
            self.storage.set_item(AUTH_TOKEN_KEY, token)
            updated = self._apply_token(token)
        log_action(logger, "registry", "set_auth_token", "success", clients_updated=updated)

    def clear_auth_token(self) -> None:
        with self._lock:
            self.storage.remove_item(AUTH_TOKEN_KEY)
            updated = self._apply_token(None)
        log_action(logger, "registry", "clear_auth_token", "success", clients_updated=updated)

    def login(self, username: str, password: str) -> LoginResponse:
        response = self.auth.login(username, password)
        self.set_auth_token(response.token)
        return response

    def logout(self) -> None:
        self.clear_auth_token()

    def _apply_token(self, token: str | None) -> int:
        updated = 0
        for client in self.clients():
            if not isinstance(client, MutableAuth):
                continue
            client.set_access_token(token)
            updated += 1
        return updated


_default_registry: ApiClientRegistry | None = None
_default_lock = threading.Lock()


def get_api_client() -> ApiClientRegistry:
    """Process-wide registry, built on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = ApiClientRegistry()
        return _default_registry


def reset_api_client(registry: ApiClientRegistry | None = None) -> None:
    global _default_registry
    with _default_lock:
        _default_registry = registry


def set_auth_token(token: str) -> None:
    """Set the token on the default registry. An empty token raises ValueError."""
    get_api_client().set_auth_token(token)


def clear_auth_token() -> None:
    get_api_client().clear_auth_token()


def get_auth_token() -> str | None:
    return get_api_client().get_auth_token()
