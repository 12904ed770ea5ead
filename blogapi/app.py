"""FastAPI application factory for the blog backend."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogapi import __version__
from blogapi.core.config import Settings, get_settings
from blogapi.core.logging import configure_logging
from blogapi.db.create_tables import create_all
from blogapi.middleware import SecurityHeadersMiddleware, register_error_handlers
from blogapi.routers import blogposts as blogposts_router
from blogapi.routers import images as images_router
from blogapi.services.blog_post_service import BlogPostService
from blogapi.services.image_service import ImageService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.create_tables_on_startup:
            create_all()
        logger.info("Blog API started (env=%s)", settings.app_env)
        yield

    app = FastAPI(title="Blog API", version=__version__, lifespan=lifespan)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(settings.cors_origins),
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
    register_error_handlers(app)

    app.state.blog_post_service = BlogPostService()
    app.state.image_service = ImageService()

    app.include_router(blogposts_router.router)
    app.include_router(images_router.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
