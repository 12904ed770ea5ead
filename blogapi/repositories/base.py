"""Repository port shared by every persisted entity."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Mapping, Optional, TypeVar

E = TypeVar("E")


class PersistenceError(Exception):
    """Raised when a repository call cannot complete its transaction."""


class Repository(ABC, Generic[E]):
    """CRUD contract for one entity type.

    Every method runs in its own transaction: nothing is atomic across calls.
    """

    @abstractmethod
    def create(self, entity: E) -> E:
        """Insert a new entity."""

    @abstractmethod
    def read(self, entity_id: Any) -> Optional[E]:
        """Fetch by primary key; None when absent."""

    @abstractmethod
    def update(self, entity: E) -> E:
        """Replace the stored entity with the same id."""

    @abstractmethod
    def delete(self, entity: E) -> None:
        """Remove the stored entity with the same id."""

    @abstractmethod
    def read_all(self) -> list[E]:
        """Fetch every stored entity, in no particular order."""

    @abstractmethod
    def execute_query(self, query_text: str, parameters: Optional[Mapping[str, Any]] = None) -> list[E]:
        """Run an ad-hoc parameterized query returning entities."""

    @abstractmethod
    def execute_named_query(self, name: str, parameters: Optional[Mapping[str, Any]] = None) -> list[E]:
        """Run a registered query returning entities."""
