from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_API_BASE_URL = "http://localhost:8090/api"
DEFAULT_STORAGE_APP_NAME = "post-now"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ClientSettings:
    env_name: str
    api_base_url: str
    connect_timeout_seconds: float = 5.0
    read_timeout_seconds: float = 15.0
    verify_ssl: bool = True
    storage_app_name: str = DEFAULT_STORAGE_APP_NAME
    storage_dir: str | None = None

    @property
    def normalized_env(self) -> str:
        return self.env_name.lower().strip()


def _coerce_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _read_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected a number, got {raw!r}") from exc


def _validate(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)


def resolve_api_base_url(env_name: str) -> str:
    """Profile override, then the plain override, then the local default."""
    env_key = env_name.upper()
    return (
        (os.getenv(f"POST_NOW_API_URL_{env_key}") or "").strip()
        or (os.getenv("POST_NOW_API_URL") or "").strip()
        or DEFAULT_API_BASE_URL
    )


def load_settings(env_file: str | None = None) -> ClientSettings:
    """Load settings from environment with optional .env override."""
    load_dotenv(env_file)

    env_name = (os.getenv("POST_NOW_ENV") or "dev").strip()
    api_base_url = resolve_api_base_url(env_name)
    _validate(
        api_base_url.startswith(("http://", "https://")),
        f"Invalid POST_NOW_API_URL: expected an http(s) URL, got {api_base_url!r}",
    )

    timeout_seconds = _read_float("POST_NOW_TIMEOUT_SECONDS", "10")
    _validate(
        timeout_seconds > 0,
        f"Invalid POST_NOW_TIMEOUT_SECONDS: expected > 0, got {timeout_seconds}",
    )

    connect_timeout_seconds = _read_float(
        "POST_NOW_CONNECT_TIMEOUT_SECONDS", str(min(timeout_seconds, 5.0))
    )
    _validate(
        connect_timeout_seconds > 0,
        (
            "Invalid POST_NOW_CONNECT_TIMEOUT_SECONDS: "
            f"expected > 0, got {connect_timeout_seconds}"
        ),
    )

    read_timeout_seconds = _read_float(
        "POST_NOW_READ_TIMEOUT_SECONDS",
        str(max(timeout_seconds, connect_timeout_seconds)),
    )
    _validate(
        read_timeout_seconds > 0,
        f"Invalid POST_NOW_READ_TIMEOUT_SECONDS: expected > 0, got {read_timeout_seconds}",
    )

    verify_ssl = _coerce_bool(os.getenv("POST_NOW_VERIFY_SSL"), True)
    storage_dir = (os.getenv("POST_NOW_STORAGE_DIR") or "").strip() or None

    return ClientSettings(
        env_name=env_name,
        api_base_url=api_base_url.rstrip("/"),
        connect_timeout_seconds=connect_timeout_seconds,
        read_timeout_seconds=read_timeout_seconds,
        verify_ssl=verify_ssl,
        storage_dir=storage_dir,
    )
