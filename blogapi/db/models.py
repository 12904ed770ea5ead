"""SQLAlchemy models for blog posts and their images."""
from __future__ import annotations

from sqlalchemy import (
    Column,
    ForeignKey,
    Integer,
    LargeBinary,
    String,
    Text,
)
from sqlalchemy.ext.associationproxy import association_proxy
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship

from .session import Base


class IdentityByIdMixin:
    """Two entities are equal when they share type and id, whatever the other fields hold."""

    def __eq__(self, other):
        if self is other:
            return True
        if type(self) is not type(other):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash((type(self).__name__, self.id))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"


class BlogPost(IdentityByIdMixin, Base):
    __tablename__ = "blog_posts"

    id = Column(Integer, primary_key=True, autoincrement=False)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    author = Column(String(255), nullable=True)
    date = Column(String(64), nullable=False)
    preview_image = Column(LargeBinary, nullable=True)

    tag_rows = relationship(
        "PostTag",
        order_by="PostTag.position",
        collection_class=ordering_list("position"),
        cascade="all,delete-orphan",
        lazy="selectin",
    )
    image_links = relationship(
        "PostImageLink",
        order_by="PostImageLink.image_id",
        cascade="all,delete-orphan",
        lazy="selectin",
    )

    tags = association_proxy("tag_rows", "tag", creator=lambda tag: PostTag(tag=tag))
    # the post owns only the ids; Image rows are fetched explicitly
    image_ids = association_proxy(
        "image_links",
        "image_id",
        creator=lambda image_id: PostImageLink(image_id=image_id),
    )


class PostTag(Base):
    __tablename__ = "blog_post_tags"

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("blog_posts.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    tag = Column(String(255), nullable=False)


class PostImageLink(Base):
    __tablename__ = "blog_post_images"

    post_id = Column(Integer, ForeignKey("blog_posts.id", ondelete="CASCADE"), primary_key=True)
    image_id = Column(Integer, ForeignKey("images.id", ondelete="CASCADE"), primary_key=True)


class Image(IdentityByIdMixin, Base):
    __tablename__ = "images"

    id = Column(Integer, primary_key=True, autoincrement=False)
    data = Column(LargeBinary, nullable=True)
    mime_type = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    post_id = Column(Integer, ForeignKey("blog_posts.id", ondelete="SET NULL"), nullable=True)
