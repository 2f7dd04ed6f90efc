from __future__ import annotations

from ..exceptions import InvalidCredentialsError, ValidationError
from ..models import LoginRequest, LoginResponse, TokenValidation
from .base import BaseApi


class AuthApi(BaseApi):
    def login(self, username: str, password: str) -> LoginResponse:
        payload = LoginRequest(username=username, password=password)
        try:
            data = self._request("POST", "/auth/login", json_body=payload.to_payload())
        except ValidationError as exc:
            raise InvalidCredentialsError(
                code="INVALID_CREDENTIALS",
                message=exc.message,
                details=exc.details,
                status_code=exc.status_code,
                raw_payload=exc.raw_payload,
            ) from exc
        return LoginResponse.model_validate(self._expect_object(data, "login"))

    def validate_token(self) -> TokenValidation:
        # An invalid token comes back as 400 with {"valid": false, ...}.
        try:
            data = self._request("GET", "/auth/validate")
        except ValidationError as exc:
            payload = exc.raw_payload if isinstance(exc.raw_payload, dict) else {}
            if "valid" not in payload:
                raise
            return TokenValidation.model_validate(payload)
        return TokenValidation.model_validate(self._expect_object(data, "validate"))
