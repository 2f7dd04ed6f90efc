from __future__ import annotations

from ..models import Follow, FollowStats, Page, UserSummary
from .base import BaseApi, page_params


class FollowApi(BaseApi):
    def follow_user(self, username: str) -> Follow:
        data = self._request("POST", f"/users/{username}/follow")
        return Follow.model_validate(self._expect_object(data, "follow"))

    def unfollow_user(self, username: str) -> None:
        self._request("DELETE", f"/users/{username}/follow")

    def get_followers(self, username: str, page: int = 0, size: int = 20) -> Page[UserSummary]:
        data = self._request("GET", f"/users/{username}/followers", params=page_params(page, size))
        return Page[UserSummary].model_validate(self._expect_object(data, "followers"))

    def get_following(self, username: str, page: int = 0, size: int = 20) -> Page[UserSummary]:
        data = self._request("GET", f"/users/{username}/following", params=page_params(page, size))
        return Page[UserSummary].model_validate(self._expect_object(data, "following"))

    def get_follow_stats(self, username: str) -> FollowStats:
        data = self._request("GET", f"/users/{username}/follow-stats")
        return FollowStats.model_validate(self._expect_object(data, "follow stats"))
