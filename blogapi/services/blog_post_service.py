"""Blog post use cases: validation in front of the post and image repositories."""
from __future__ import annotations

import logging
from typing import Optional

from blogapi.db.models import BlogPost, Image
from blogapi.repositories.base import Repository
from blogapi.repositories.sql_repository import SQLRepository
from blogapi.services.errors import InvalidInputError, InvalidStateError, NotFoundError

logger = logging.getLogger(__name__)


def _require_positive(value: Optional[int], label: str = "id") -> int:
    if value is None or value <= 0:
        raise InvalidInputError(f"{label} must be greater than 0")
    return value


def _check_post_fields(post: BlogPost) -> None:
    if not post.title:
        raise InvalidInputError("BlogPost must have a title")
    if not post.content:
        raise InvalidInputError("BlogPost must have a content")
    if post.date is None:
        raise InvalidInputError("BlogPost must have a published date")


class BlogPostService:
    """Create, read, update and delete posts; attach and detach their images.

    Multi-step operations call the repositories one after the other. Each call
    is its own transaction, so a failure half way leaves the earlier calls
    committed.
    """

    def __init__(
        self,
        posts: Optional[Repository[BlogPost]] = None,
        images: Optional[Repository[Image]] = None,
    ) -> None:
        self.posts = posts if posts is not None else SQLRepository(BlogPost)
        self.images = images if images is not None else SQLRepository(Image)

    def _require_post(self, post_id: int) -> BlogPost:
        post = self.posts.read(post_id)
        if post is None:
            raise NotFoundError("BlogPost does not exist")
        return post

    def _owned_images(self, post: BlogPost) -> list[Image]:
        ids = list(post.image_ids)
        if not ids:
            return []
        by_id = {image.id: image for image in self.images.execute_named_query("Image.byIds", {"ids": ids})}
        return [by_id[image_id] for image_id in ids if image_id in by_id]

    # -------------------------- posts --------------------------
    def list_posts(self, *, author: Optional[str] = None, tag: Optional[str] = None) -> list[BlogPost]:
        if author:
            return self.posts.execute_named_query("BlogPost.byAuthor", {"author": author})
        if tag:
            return self.posts.execute_named_query("BlogPost.byTag", {"tag": tag})
        return self.posts.read_all()

    def create_post(self, post: Optional[BlogPost]) -> BlogPost:
        if post is None:
            raise InvalidInputError("BlogPost must not be empty")
        _check_post_fields(post)
        if post.id is None:
            raise InvalidInputError("BlogPost must have an id")
        if self.posts.read(post.id) is not None:
            raise InvalidStateError("BlogPost already exists")
        created = self.posts.create(post)
        logger.info("Created blog post %s", created.id)
        return created

    def update_post(self, post: Optional[BlogPost]) -> BlogPost:
        if post is None:
            raise InvalidInputError("BlogPost must not be empty")
        if post.id is None:
            raise InvalidInputError("BlogPost must have an id")
        _check_post_fields(post)
        stored = self._require_post(post.id)
        stored.title = post.title
        stored.content = post.content
        stored.author = post.author
        stored.date = post.date
        stored.tags = list(post.tags or [])
        stored.preview_image = post.preview_image
        updated = self.posts.update(stored)
        logger.info("Updated blog post %s", updated.id)
        return updated

    def delete_post(self, post_id: int) -> BlogPost:
        _require_positive(post_id)
        post = self._require_post(post_id)
        owned = self._owned_images(post)
        self.posts.delete(post)
        for image in owned:
            self.images.delete(image)
        logger.info("Deleted blog post %s with %d image(s)", post_id, len(owned))
        return post

    def get_post(self, post_id: int) -> BlogPost:
        _require_positive(post_id)
        return self._require_post(post_id)

    # -------------------------- images --------------------------
    def add_image(self, post_id: int, image: Optional[Image]) -> BlogPost:
        _require_positive(post_id)
        post = self._require_post(post_id)
        if image is None:
            raise InvalidInputError("Image must not be empty")
        if image.description is None:
            raise InvalidInputError("Image must have a description")
        if image.id is None:
            raise InvalidInputError("Image must have an id")
        image.post_id = post.id
        self.images.create(image)
        post.image_ids.append(image.id)
        updated = self.posts.update(post)
        logger.info("Attached image %s to blog post %s", image.id, post_id)
        return updated

    def remove_image(self, post_id: int, image_id: int) -> BlogPost:
        _require_positive(post_id)
        post = self._require_post(post_id)
        _require_positive(image_id, "image id")
        image = self.images.read(image_id)
        if image is None:
            raise NotFoundError("Image does not exist")
        if image_id not in post.image_ids:
            raise InvalidStateError("Image is not associated with the BlogPost")
        post.image_ids.remove(image_id)
        # unlink first so the post never points at a deleted image
        updated = self.posts.update(post)
        self.images.delete(image)
        logger.info("Detached image %s from blog post %s", image_id, post_id)
        return updated

    def list_images(self, post_id: int) -> list[Image]:
        _require_positive(post_id)
        post = self._require_post(post_id)
        return self._owned_images(post)
