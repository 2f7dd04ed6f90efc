from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable
from urllib.parse import urljoin

import requests

from .config import ClientSettings
from .error_mapper import map_error
from .exceptions import InvalidResponseError, TransportError

ResponseHook = Callable[[requests.Response], None]
RequestHook = Callable[[str, str, dict[str, Any]], None]

logger = logging.getLogger(__name__)


def build_url(base_path: str, path: str) -> str:
    base = base_path.rstrip("/") + "/"
    return urljoin(base, path.lstrip("/"))


@dataclass
class LastOperation:
    method: str
    url: str
    status_code: int
    duration_ms: int
    result: str


@dataclass
class HttpClient:
    settings: ClientSettings
    session: requests.Session | None = None
    before_request: RequestHook | None = None
    after_response: ResponseHook | None = None
    last_operation: LastOperation | None = None

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = requests.Session()

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> dict[str, Any] | list[Any] | None:
        if self.session is None:
            raise RuntimeError("HTTP session not initialized")
        request_headers = {"Accept": "application/json"}
        if headers:
            request_headers.update(headers)
        if files:
            # requests writes the multipart boundary itself.
            request_headers.pop("Content-Type", None)

        normalized_method = method.upper()
        request_context = {
            "headers": request_headers,
            "json_body": json_body,
            "params": params,
        }
        if self.before_request:
            self.before_request(normalized_method, url, request_context)

        started = time.monotonic()
        try:
            response = self.session.request(
                method=normalized_method,
                url=url,
                headers=request_headers,
                json=json_body,
                params=params,
                files=files,
                data=data,
                timeout=(self.settings.connect_timeout_seconds, self.settings.read_timeout_seconds),
                verify=self.settings.verify_ssl,
            )
        except requests.RequestException as exc:
            self._record_operation(normalized_method, url, 0, started, "transport_error")
            raise TransportError(
                code="TRANSPORT_ERROR",
                message=str(exc),
                details={"type": type(exc).__name__},
                status_code=0,
                raw_payload=None,
            ) from exc

        if self.after_response:
            self.after_response(response)
        if response.ok:
            if not response.content:
                self._record_operation(normalized_method, url, response.status_code, started, "success")
                return None
            try:
                body = response.json()
            except ValueError as exc:
                self._record_operation(normalized_method, url, response.status_code, started, "invalid_response")
                raise InvalidResponseError(
                    code="INVALID_RESPONSE",
                    message="Response body is not valid JSON",
                    details={"content_type": response.headers.get("Content-Type")},
                    status_code=response.status_code,
                    raw_payload={"body": response.text},
                ) from exc
            self._record_operation(normalized_method, url, response.status_code, started, "success")
            return body

        payload = None
        try:
            payload = response.json()
        except ValueError:
            payload = {"message": response.text} if response.text else {}
        self._record_operation(normalized_method, url, response.status_code, started, "error")
        raise map_error(response.status_code, payload if isinstance(payload, dict) else {})

    def _record_operation(self, method: str, url: str, status_code: int, started: float, result: str) -> None:
        self.last_operation = LastOperation(
            method=method,
            url=url,
            status_code=status_code,
            duration_ms=int((time.monotonic() - started) * 1000),
            result=result,
        )
        logger.debug(
            "%s %s -> %s (%s, %dms)",
            method,
            url,
            status_code,
            result,
            self.last_operation.duration_ms,
        )
