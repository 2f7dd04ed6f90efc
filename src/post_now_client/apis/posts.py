from __future__ import annotations

from typing import Any, BinaryIO, Mapping, Union

from ..models import Page, Post, PostCreate, PostUpdate
from .base import BaseApi, coerce_model, page_params

# (filename, content) or (filename, content, content_type), as requests takes them.
ImageFile = Union[tuple[str, Union[BinaryIO, bytes]], tuple[str, Union[BinaryIO, bytes], str]]


class PostsApi(BaseApi):
    def get_all_posts(self, page: int = 0, size: int = 20, sort: str | None = None) -> Page[Post]:
        data = self._request("GET", "/posts", params=page_params(page, size, sort))
        return Page[Post].model_validate(self._expect_object(data, "posts"))

    def get_post(self, post_id: int) -> Post:
        data = self._request("GET", f"/posts/{post_id}")
        return Post.model_validate(self._expect_object(data, "post"))

    def search_posts(self, query: str, page: int = 0, size: int = 20, sort: str | None = None) -> Page[Post]:
        params = page_params(page, size, sort, query=query)
        data = self._request("GET", "/posts/search", params=params)
        return Page[Post].model_validate(self._expect_object(data, "post search"))

    def get_posts_by_author(
        self, username: str, page: int = 0, size: int = 20, sort: str | None = None
    ) -> Page[Post]:
        data = self._request("GET", f"/posts/user/{username}", params=page_params(page, size, sort))
        return Page[Post].model_validate(self._expect_object(data, "author posts"))

    def create_post(self, post: PostCreate | Mapping[str, Any]) -> Post:
        payload = coerce_model(post, PostCreate)
        data = self._request("POST", "/posts", json_body=payload.to_payload())
        return Post.model_validate(self._expect_object(data, "create post"))

    def create_post_with_image(self, title: str, content: str, image: ImageFile | None = None) -> Post:
        # Plain fields travel as filename-less parts so the body is multipart even without an image.
        files: dict[str, Any] = {"title": (None, title), "content": (None, content)}
        if image is not None:
            files["image"] = image
        data = self._request("POST", "/posts", files=files)
        return Post.model_validate(self._expect_object(data, "create post"))

    def update_post(self, post_id: int, update: PostUpdate | Mapping[str, Any]) -> Post:
        payload = coerce_model(update, PostUpdate)
        data = self._request("PUT", f"/posts/{post_id}", json_body=payload.to_payload())
        return Post.model_validate(self._expect_object(data, "update post"))

    def update_post_image(self, post_id: int, image: ImageFile) -> Post:
        data = self._request("POST", f"/posts/{post_id}/image", files={"image": image})
        return Post.model_validate(self._expect_object(data, "update post image"))

    def delete_post_image(self, post_id: int) -> Post:
        data = self._request("DELETE", f"/posts/{post_id}/image")
        return Post.model_validate(self._expect_object(data, "delete post image"))

    def delete_post(self, post_id: int) -> None:
        self._request("DELETE", f"/posts/{post_id}")
