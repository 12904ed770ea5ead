"""Generic data access backed by SQLAlchemy, one session per call."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Optional, Type

from sqlalchemy import inspect, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blogapi.db.queries import get_named_query
from blogapi.db.session import get_session
from blogapi.repositories.base import E, PersistenceError, Repository

logger = logging.getLogger(__name__)


class SQLRepository(Repository[E]):
    """CRUD helpers for a single mapped model wrapping the SQLAlchemy session."""

    def __init__(self, model: Type[E]) -> None:
        self.model = model

    @property
    def name(self) -> str:
        return self.model.__name__

    def _identity(self, entity: E) -> Any:
        values = inspect(self.model).primary_key_from_instance(entity)
        return values[0] if len(values) == 1 else tuple(values)

    @contextmanager
    def _transaction(self, action: str) -> Iterator[Session]:
        with get_session() as session:
            try:
                yield session
                session.commit()
            except SQLAlchemyError as exc:
                session.rollback()
                logger.error("%s %s failed", action, self.name, exc_info=True)
                raise PersistenceError(f"{action} {self.name} failed: {exc}") from exc

    # -------------------------- crud --------------------------
    def _load_relationships(self, entity: E) -> None:
        # must run while attached; callers read collections after the session closes
        for key in inspect(self.model).relationships.keys():
            getattr(entity, key)

    def create(self, entity: E) -> E:
        with self._transaction("create") as session:
            session.add(entity)
            session.flush()
            session.refresh(entity)
            self._load_relationships(entity)
        return entity

    def read(self, entity_id: Any) -> Optional[E]:
        with self._transaction("read") as session:
            return session.get(self.model, entity_id)

    def update(self, entity: E) -> E:
        identity = self._identity(entity)
        with self._transaction("update") as session:
            if session.get(self.model, identity) is None:
                raise PersistenceError(f"update {self.name} failed: no row with id {identity}")
            merged = session.merge(entity)
            session.flush()
            self._load_relationships(merged)
        return merged

    def delete(self, entity: E) -> None:
        identity = self._identity(entity)
        with self._transaction("delete") as session:
            stored = session.get(self.model, identity)
            if stored is not None:
                session.delete(stored)

    def read_all(self) -> list[E]:
        with self._transaction("read_all") as session:
            return list(session.execute(select(self.model)).scalars().all())

    # -------------------------- queries --------------------------
    def execute_query(self, query_text: str, parameters: Optional[Mapping[str, Any]] = None) -> list[E]:
        stmt = select(self.model).from_statement(text(query_text))
        with self._transaction("query") as session:
            found = list(session.execute(stmt, dict(parameters or {})).scalars().all())
            for entity in found:
                self._load_relationships(entity)
            return found

    def execute_named_query(self, name: str, parameters: Optional[Mapping[str, Any]] = None) -> list[E]:
        stmt = get_named_query(name)
        if stmt is None:
            raise PersistenceError(f"Unknown named query: {name}")
        with self._transaction("named query") as session:
            return list(session.execute(stmt, dict(parameters or {})).scalars().all())
