from __future__ import annotations

from ..models import Comment, CommentCreate, Page
from .base import BaseApi, page_params


class CommentsApi(BaseApi):
    def get_comments_by_post(self, post_id: int, page: int = 0, size: int = 20) -> Page[Comment]:
        data = self._request("GET", f"/comments/post/{post_id}", params=page_params(page, size))
        return Page[Comment].model_validate(self._expect_object(data, "post comments"))

    def get_comments_by_user(self, username: str, page: int = 0, size: int = 20) -> Page[Comment]:
        data = self._request("GET", f"/comments/user/{username}", params=page_params(page, size))
        return Page[Comment].model_validate(self._expect_object(data, "user comments"))

    def create_comment(self, post_id: int, content: str) -> Comment:
        payload = CommentCreate(content=content)
        data = self._request("POST", f"/comments/post/{post_id}", json_body=payload.to_payload())
        return Comment.model_validate(self._expect_object(data, "create comment"))

    def delete_comment(self, comment_id: int) -> None:
        self._request("DELETE", f"/comments/{comment_id}")
