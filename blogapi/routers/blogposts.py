from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Request

from blogapi.schemas import BlogPostOut, BlogPostPayload, ImageOut, ImagePayload
from blogapi.services.blog_post_service import BlogPostService

router = APIRouter(prefix="/blogposts", tags=["blogposts"])


def _get_service(request: Request) -> BlogPostService:
    svc = getattr(getattr(request.app, "state", None), "blog_post_service", None)
    if not svc:
        raise RuntimeError("BlogPostService not configured")
    return svc


def _post_out(post) -> BlogPostOut:
    return BlogPostOut.model_validate(post)


@router.get("/list", response_model=list[BlogPostOut])
def list_blog_posts(request: Request, author: Optional[str] = None, tag: Optional[str] = None):
    posts = _get_service(request).list_posts(author=author, tag=tag)
    return [_post_out(post) for post in posts]


@router.post("", response_model=BlogPostOut)
def create_blog_post(payload: BlogPostPayload, request: Request):
    return _post_out(_get_service(request).create_post(payload.to_entity()))


@router.put("", response_model=BlogPostOut)
def update_blog_post(payload: BlogPostPayload, request: Request):
    return _post_out(_get_service(request).update_post(payload.to_entity()))


@router.delete("/{post_id}", response_model=BlogPostOut)
def delete_blog_post(post_id: int, request: Request):
    return _post_out(_get_service(request).delete_post(post_id))


@router.get("/{post_id}", response_model=BlogPostOut)
def get_blog_post(post_id: int, request: Request):
    return _post_out(_get_service(request).get_post(post_id))


@router.post("/{post_id}/images", response_model=BlogPostOut)
def add_image_to_blog_post(post_id: int, payload: ImagePayload, request: Request):
    return _post_out(_get_service(request).add_image(post_id, payload.to_entity()))


@router.delete("/{post_id}/images/{image_id}", response_model=BlogPostOut)
def delete_image_from_blog_post(post_id: int, image_id: int, request: Request):
    return _post_out(_get_service(request).remove_image(post_id, image_id))


@router.get("/{post_id}/images", response_model=list[ImageOut])
def list_images_for_blog_post(post_id: int, request: Request):
    images = _get_service(request).list_images(post_id)
    return [ImageOut.model_validate(image) for image in images]
