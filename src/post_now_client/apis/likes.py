from __future__ import annotations

from ..models import LikeCount, LikeStatus, MessageResponse
from .base import BaseApi


class LikesApi(BaseApi):
    def get_likes_count(self, post_id: int) -> int:
        data = self._request("GET", f"/likes/post/{post_id}/count")
        return LikeCount.model_validate(self._expect_object(data, "likes count")).count

    def is_post_liked(self, post_id: int) -> bool:
        data = self._request("GET", f"/likes/post/{post_id}/status")
        return LikeStatus.model_validate(self._expect_object(data, "like status")).liked

    def like_post(self, post_id: int) -> MessageResponse:
        data = self._request("POST", f"/likes/post/{post_id}")
        return MessageResponse.model_validate(data or {})

    def unlike_post(self, post_id: int) -> MessageResponse:
        data = self._request("DELETE", f"/likes/post/{post_id}")
        return MessageResponse.model_validate(data or {})

    def toggle_like(self, post_id: int) -> MessageResponse:
        data = self._request("POST", f"/likes/post/{post_id}/toggle")
        return MessageResponse.model_validate(data or {})
