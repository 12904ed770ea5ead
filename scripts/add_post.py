#!/usr/bin/env python3
"""
Create a blog post directly in the configured database.

Usage:
  python scripts/add_post.py --id 1 --title "Hello" --content "First post" --date 2024-01-01 \
      [--author alice] [--tag news --tag intro]
"""
from __future__ import annotations

import argparse
import sys

from blogapi.core.logging import configure_logging
from blogapi.db.create_tables import create_all
from blogapi.db.models import BlogPost
from blogapi.services.blog_post_service import BlogPostService
from blogapi.services.errors import BlogError


def main() -> None:
    ap = argparse.ArgumentParser(description="Create a blog post")
    ap.add_argument("--id", type=int, required=True, help="Post id (caller assigned)")
    ap.add_argument("--title", required=True)
    ap.add_argument("--content", required=True)
    ap.add_argument("--date", required=True, help="Published date, e.g. 2024-01-01")
    ap.add_argument("--author")
    ap.add_argument("--tag", action="append", default=[], help="Repeat for several tags")
    ap.add_argument("--create-tables", action="store_true", help="Create missing tables first")
    args = ap.parse_args()

    configure_logging("INFO")
    if args.create_tables:
        create_all()

    post = BlogPost(
        id=args.id,
        title=args.title,
        content=args.content,
        author=args.author,
        date=args.date,
        tags=args.tag,
    )
    try:
        created = BlogPostService().create_post(post)
    except BlogError as exc:
        raise SystemExit(f"Rejected: {exc.message}")
    print("OK: post created")
    print(f"  ID: {created.id}")
    print(f"  Title: {created.title}")
    if created.tags:
        print(f"  Tags: {', '.join(created.tags)}")


if __name__ == "__main__":
    try:
        main()
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
