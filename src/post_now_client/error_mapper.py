from __future__ import annotations

from typing import Mapping

from .exceptions import (
    ApiError,
    AuthError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationError,
)

_DEFAULT_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    409: "CONFLICT",
    422: "UNPROCESSABLE_ENTITY",
    429: "TOO_MANY_REQUESTS",
}


def _default_code(status_code: int) -> str:
    if status_code >= 500:
        return "SERVER_ERROR"
    return _DEFAULT_CODES.get(status_code, "HTTP_ERROR")


def map_error(status_code: int, payload: Mapping[str, object] | None) -> ApiError:
    # Handlers answer with {"error": "..."}; Spring's fallback body carries
    # both "error" (reason phrase) and "message".
    payload = payload or {}
    code = str(payload.get("code") or _default_code(status_code))
    message = str(payload.get("message") or payload.get("error") or "Request failed")
    details = payload.get("details")
    mapped: type[ApiError]
    if status_code in {401}:
        mapped = AuthError
    elif status_code in {403}:
        mapped = ForbiddenError
    elif status_code in {404}:
        mapped = NotFoundError
    elif status_code in {400, 422}:
        mapped = ValidationError
    elif status_code == 409:
        mapped = ConflictError
    elif status_code == 429:
        mapped = RateLimitError
    elif status_code >= 500:
        mapped = ServerError
    else:
        mapped = ApiError
    return mapped(
        code=code,
        message=message,
        details=details,
        status_code=status_code,
        raw_payload=dict(payload),
    )
