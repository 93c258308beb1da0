"""
Association declarations and resolution.

Associations are declared explicitly per entity instead of being inferred
from class names:

- ``BelongsTo``: the record holds a foreign key to ``target_table``.
- ``HasMany``: rows of ``target_table`` hold a foreign key to the record.

``AssociationResolver`` reads and writes those associations through a
``DatastoreAdapter``. Reading a belongs-to association performs a primary-key
lookup; writing one only changes the foreign-key attribute in memory, it is
persisted when the record is saved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Type, Union

from kennel.core.errors import AssociationTypeMismatchError, UnknownAssociationError, UnsavedRecordError
from kennel.core.logging_config import get_logger

if TYPE_CHECKING:
    from .adapter import DatastoreAdapter
    from .base import Entity

logger = get_logger(__name__)


@dataclass(frozen=True)
class BelongsTo:
    """The record references one ``result_type`` row through ``field``."""

    name: str
    field: str
    target_table: str
    result_type: Type[Any]


@dataclass(frozen=True)
class HasMany:
    """Rows of ``target_table`` reference the record through ``foreign_key``."""

    name: str
    target_table: str
    foreign_key: str


Association = Union[BelongsTo, HasMany]
AssociationMap = Mapping[type, Mapping[str, Association]]


class AssociationResolver:
    """Resolve declared associations against a datastore."""

    def __init__(self, adapter: "DatastoreAdapter", associations: Optional[AssociationMap] = None) -> None:
        """Initialize the resolver.

        Args:
            adapter: Datastore used for lookups
            associations: Declarations per entity class; defaults to the
                entities package registry
        """
        if associations is None:
            from .entities import ASSOCIATIONS

            associations = ASSOCIATIONS
        self.adapter = adapter
        self.associations = associations

    def declared(self, record_or_type: Union["Entity", type]) -> Dict[str, Association]:
        entity_type = record_or_type if isinstance(record_or_type, type) else type(record_or_type)
        return dict(self.associations.get(entity_type, {}))

    def association_for(self, record_or_type: Union["Entity", type], name: str) -> Association:
        """Look up the association declared under ``name``.

        Raises:
            UnknownAssociationError: Nothing is declared under that name
        """
        entity_type = record_or_type if isinstance(record_or_type, type) else type(record_or_type)
        try:
            return self.associations[entity_type][name]
        except KeyError:
            raise UnknownAssociationError(entity_type.__name__, name) from None

    def _belongs_to(self, record: "Entity", association: Union[BelongsTo, str]) -> BelongsTo:
        if isinstance(association, str):
            association = self.association_for(record, association)
        if not isinstance(association, BelongsTo):
            raise UnknownAssociationError(type(record).__name__, association.name, kind="belongs-to association")
        return association

    def _has_many(self, record: "Entity", association: Union[HasMany, str]) -> HasMany:
        if isinstance(association, str):
            association = self.association_for(record, association)
        if not isinstance(association, HasMany):
            raise UnknownAssociationError(type(record).__name__, association.name, kind="has-many association")
        return association

    def get_referenced(self, record: "Entity", association: Union[BelongsTo, str]) -> Optional["Entity"]:
        """Return the record referenced by a belongs-to association.

        A ``None`` foreign key yields ``None`` without querying the datastore.

        Args:
            record: Record holding the foreign key
            association: ``BelongsTo`` declaration or its name

        Returns:
            The referenced record, or None when the foreign key is unset

        Raises:
            RecordNotFoundError: The foreign key points at a missing row
        """
        association = self._belongs_to(record, association)
        key = getattr(record, association.field)
        if key is None:
            logger.debug(f"{type(record).__name__}.{association.field} is unset; '{association.name}' is None")
            return None
        logger.debug(f"Resolving {type(record).__name__}.{association.name} -> {association.target_table}[{key}]")
        return self.adapter.find(association.target_table, key)

    def set_referenced(
        self, record: "Entity", association: Union[BelongsTo, str], entity: Optional["Entity"]
    ) -> None:
        """Point a belongs-to association at ``entity``.

        Only the foreign-key attribute changes and nothing is persisted.
        Assigning ``None`` clears the foreign key.

        Raises:
            AssociationTypeMismatchError: ``entity`` is not a ``result_type``
            UnsavedRecordError: ``entity`` has no primary key yet
        """
        association = self._belongs_to(record, association)
        if entity is None:
            setattr(record, association.field, None)
            return
        if not isinstance(entity, association.result_type):
            raise AssociationTypeMismatchError(
                association.name, association.result_type.__name__, type(entity).__name__
            )
        if entity.id is None:
            raise UnsavedRecordError(type(entity).__name__, f"assigning it to '{association.name}'")
        setattr(record, association.field, entity.id)

    def get_collection(self, record: "Entity", association: Union[HasMany, str]) -> List["Entity"]:
        """Return every row referencing ``record`` through a has-many association.

        A record without a primary key cannot be referenced yet, so it yields
        an empty list without querying the datastore.
        """
        association = self._has_many(record, association)
        if record.id is None:
            return []
        return self.adapter.where(association.target_table, **{association.foreign_key: record.id})
