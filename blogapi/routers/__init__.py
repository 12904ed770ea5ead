"""
FastAPI routers grouped by resource (blog posts, images).

Each module exposes an APIRouter that the application factory includes.
"""
