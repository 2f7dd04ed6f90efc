from __future__ import annotations

from dataclasses import dataclass, field

from .config import ClientSettings
from .storage import AUTH_TOKEN_KEY, KeyValueStorage

DEFAULT_HEADERS = {"Content-Type": "application/json"}


def _default_headers() -> dict[str, str]:
    return dict(DEFAULT_HEADERS)


@dataclass
class Configuration:
    """Settings bundle owned by one resource API client.

    Each client gets its own instance; the registry mutates ``access_token``
    in place when the credential changes.
    """

    base_path: str
    access_token: str | None = None
    headers: dict[str, str] = field(default_factory=_default_headers)

    def auth_headers(self) -> dict[str, str]:
        headers = dict(self.headers)
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers


def get_auth_config(storage: KeyValueStorage, settings: ClientSettings) -> Configuration:
    """Build a Configuration carrying whatever token storage currently holds."""
    token = storage.get_item(AUTH_TOKEN_KEY)
    return Configuration(
        base_path=settings.api_base_url,
        access_token=token or None,
        headers=_default_headers(),
    )
