"""Blog CRUD backend: posts and their images over FastAPI + SQLAlchemy."""

__version__ = "0.1.0"
