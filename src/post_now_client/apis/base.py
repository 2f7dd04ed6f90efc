from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from ..configuration import Configuration
from ..http_client import HttpClient, build_url
from ..models import PageRequest


@runtime_checkable
class MutableAuth(Protocol):
    """Anything whose bearer token the registry can swap in place."""

    def set_access_token(self, token: str | None) -> None: ...


@dataclass
class BaseApi:
    configuration: Configuration
    http: HttpClient = field(repr=False)

    def set_access_token(self, token: str | None) -> None:
        self.configuration.access_token = token or None

    def _request(self, method: str, path: str, **kwargs):
        headers = kwargs.pop("headers", {})
        merged = {**self.configuration.auth_headers(), **headers}
        url = build_url(self.configuration.base_path, path)
        return self.http.request(method, url, headers=merged, **kwargs)

    def _expect_object(self, data: Any, operation: str) -> dict[str, Any]:
        if not isinstance(data, dict):
            raise ValueError(f"Expected {operation} response to be a JSON object")
        return data


def page_params(page: int = 0, size: int = 20, sort: str | None = None, **extra: Any) -> dict[str, Any]:
    params = PageRequest(page=page, size=size, sort=sort).to_params()
    params.update({key: value for key, value in extra.items() if value is not None})
    return params


def coerce_model(value: Any, model_type: type[Any]):
    if isinstance(value, model_type):
        return value
    return model_type.model_validate(value)
