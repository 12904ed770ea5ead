"""Named queries resolvable through ``SQLRepository.execute_named_query``.

Each entry is a ``select`` with bound parameters; callers supply the values
by name.
"""
from __future__ import annotations

from sqlalchemy import bindparam, select

from .models import BlogPost, Image, PostTag

NAMED_QUERIES = {
    "BlogPost.byAuthor": select(BlogPost).where(BlogPost.author == bindparam("author")).order_by(BlogPost.id),
    "BlogPost.byTag": (
        select(BlogPost)
        .where(BlogPost.id.in_(select(PostTag.post_id).where(PostTag.tag == bindparam("tag"))))
        .order_by(BlogPost.id)
    ),
    "Image.byIds": select(Image).where(Image.id.in_(bindparam("ids", expanding=True))),
}


def get_named_query(name: str):
    """Return the statement registered under ``name`` or None."""
    return NAMED_QUERIES.get(name)
