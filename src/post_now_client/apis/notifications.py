from __future__ import annotations

from ..models import Notification, Page, UnreadCount
from .base import BaseApi, page_params


class NotificationApi(BaseApi):
    def get_notifications(self, page: int = 0, size: int = 20) -> Page[Notification]:
        data = self._request("GET", "/notifications", params=page_params(page, size))
        return Page[Notification].model_validate(self._expect_object(data, "notifications"))

    def get_unread_notifications(self, page: int = 0, size: int = 20) -> Page[Notification]:
        data = self._request("GET", "/notifications/unread", params=page_params(page, size))
        return Page[Notification].model_validate(self._expect_object(data, "unread notifications"))

    def get_unread_count(self) -> int:
        data = self._request("GET", "/notifications/unread-count")
        return UnreadCount.model_validate(self._expect_object(data, "unread count")).count

    def mark_as_read(self, notification_id: int) -> None:
        self._request("PUT", f"/notifications/{notification_id}/read")

    def mark_all_as_read(self) -> None:
        self._request("PUT", "/notifications/read-all")
