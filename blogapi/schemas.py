"""Request/response bodies for the HTTP layer.

Binary fields travel as base64 text. Payload fields are all optional so that
missing values reach the services, which own the validation rules.
"""
from __future__ import annotations

import base64
import binascii
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blogapi.db.models import BlogPost, Image
from blogapi.services.errors import InvalidInputError


def decode_base64(value: Optional[str], field: str) -> Optional[bytes]:
    if value is None:
        return None
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidInputError(f"{field} must be base64 encoded") from exc


def _encode_bytes(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(value)).decode("ascii")
    return value


class BlogPostPayload(BaseModel):
    id: Optional[int] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    date: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    preview_image: Optional[str] = None

    def to_entity(self) -> BlogPost:
        return BlogPost(
            id=self.id,
            title=self.title,
            content=self.content,
            author=self.author,
            date=self.date,
            tags=list(self.tags),
            preview_image=decode_base64(self.preview_image, "preview_image"),
        )


class ImagePayload(BaseModel):
    id: Optional[int] = None
    data: Optional[str] = None
    mime_type: Optional[str] = None
    description: Optional[str] = None

    def to_entity(self) -> Image:
        return Image(
            id=self.id,
            data=decode_base64(self.data, "data"),
            mime_type=self.mime_type,
            description=self.description,
        )


class ImageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    mime_type: Optional[str] = None
    description: Optional[str] = None
    post_id: Optional[int] = None
    data: Optional[str] = None

    @field_validator("data", mode="before")
    @classmethod
    def _data_as_base64(cls, value: Any) -> Any:
        return _encode_bytes(value)


class BlogPostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    author: Optional[str] = None
    date: str
    tags: list[str] = Field(default_factory=list)
    preview_image: Optional[str] = None
    image_ids: list[int] = Field(default_factory=list)

    @field_validator("preview_image", mode="before")
    @classmethod
    def _preview_as_base64(cls, value: Any) -> Any:
        return _encode_bytes(value)

    @field_validator("tags", "image_ids", mode="before")
    @classmethod
    def _materialize(cls, value: Any) -> Any:
        # association proxies are iterable but not lists
        return list(value) if value is not None else []
