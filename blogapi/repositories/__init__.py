"""
Persistence adapters.

Services depend on the ``Repository`` interface; ``SQLRepository`` is the
SQLAlchemy implementation, parameterized by the mapped model it serves.
"""

from .base import PersistenceError, Repository
from .sql_repository import SQLRepository

__all__ = ["PersistenceError", "Repository", "SQLRepository"]
