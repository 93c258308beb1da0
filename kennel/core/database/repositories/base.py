"""
Base repository and shared CRUD operations.

Entities carry no persistence behaviour of their own. A repository composes
an entity class with a ``DatastoreAdapter`` (storage) and an
``AssociationResolver`` (associations) to give it one: ``find``, ``save``,
``delete`` and friends.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Dict, Generic, List, Optional, TypeVar

from kennel.core.errors import UnsavedRecordError

from ..associations import AssociationResolver
from ..base import Entity

if TYPE_CHECKING:
    from ..adapter import DatastoreAdapter

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=Entity)


class BaseRepository(Generic[EntityType]):
    """Repository with common CRUD operations for one table."""

    table: ClassVar[str]

    def __init__(self, adapter: "DatastoreAdapter", resolver: Optional[AssociationResolver] = None) -> None:
        """Initialize repository with a datastore adapter.

        Args:
            adapter: Open (or soon to be opened) datastore adapter
            resolver: Association resolver; one over ``adapter`` is built if omitted
        """
        self.adapter = adapter
        self.resolver = resolver or AssociationResolver(adapter)
        self.model = adapter.model_for(self.table)

    def create(self, **attributes: Any) -> EntityType:
        """Create and persist a new record.

        Returns:
            Persisted record with its generated id
        """
        return self.adapter.create(self.table, attributes)

    def find(self, entity_id: int) -> EntityType:
        """Get a record by id, raising ``RecordNotFoundError`` if absent."""
        return self.adapter.find(self.table, entity_id)

    def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        """Get a record by id.

        Returns:
            Record instance or None if not found
        """
        return self.adapter.get(self.table, entity_id)

    def first(self) -> Optional[EntityType]:
        return self.adapter.first(self.table)

    def save(self, entity: EntityType) -> EntityType:
        """Insert ``entity`` or write back its changes."""
        return self.adapter.save(entity)

    def update(self, entity: EntityType) -> EntityType:
        """Write back changes to an already persisted record.

        Raises:
            UnsavedRecordError: ``entity`` was never saved
        """
        if entity.id is None:
            raise UnsavedRecordError(type(entity).__name__, "updating it")
        return self.adapter.save(entity)

    def delete(self, entity_id: int) -> bool:
        """Delete a record by id.

        Returns:
            True if deleted, False if not found
        """
        return self.adapter.delete(self.table, entity_id)

    def delete_all(self) -> int:
        return self.adapter.delete_all(self.table)

    def count(self) -> int:
        return self.adapter.count(self.table)

    def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """List records ordered by id with optional pagination and filtering.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
            filters: Column equality filters

        Returns:
            List of records
        """
        return self.adapter.query(self.table, filters=filters, limit=limit, offset=offset)
