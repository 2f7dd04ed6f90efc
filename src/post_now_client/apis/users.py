from __future__ import annotations

from typing import Any, Mapping

from ..models import Page, User, UserUpdate
from .base import BaseApi, coerce_model, page_params
from .posts import ImageFile


class UsersApi(BaseApi):
    def get_current_user(self) -> User:
        data = self._request("GET", "/users/me")
        return User.model_validate(self._expect_object(data, "current user"))

    def get_user(self, username: str) -> User:
        data = self._request("GET", f"/users/{username}")
        return User.model_validate(self._expect_object(data, "user"))

    def get_all_users(self, page: int = 0, size: int = 20, sort: str | None = None) -> Page[User]:
        data = self._request("GET", "/users", params=page_params(page, size, sort))
        return Page[User].model_validate(self._expect_object(data, "users"))

    def search_users(self, query: str, page: int = 0, size: int = 20) -> Page[User]:
        data = self._request("GET", "/users/search", params=page_params(page, size, query=query))
        return Page[User].model_validate(self._expect_object(data, "user search"))

    def update_current_user(self, update: UserUpdate | Mapping[str, Any]) -> User:
        payload = coerce_model(update, UserUpdate)
        data = self._request("PUT", "/users/me", json_body=payload.to_payload())
        return User.model_validate(self._expect_object(data, "update user"))

    def delete_current_user(self) -> None:
        self._request("DELETE", "/users/me")

    def upload_profile_image(self, image: ImageFile) -> User:
        data = self._request("POST", "/users/me/profile-image", files={"image": image})
        return User.model_validate(self._expect_object(data, "profile image"))

    def delete_profile_image(self) -> User:
        data = self._request("DELETE", "/users/me/profile-image")
        return User.model_validate(self._expect_object(data, "profile image"))
