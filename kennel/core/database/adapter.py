"""
Datastore adapter.

A thin, table-name keyed facade over a SQLAlchemy engine. Components that need
persistence receive an adapter instance instead of reaching for a global
connection.

Transaction model
-----------------

Each method opens a ``Session``, performs its operation, commits and closes
the session. Returned records are detached and keep their loaded values, so
they can be read, compared and saved again later.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Type

from sqlalchemy import delete, func
from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from kennel.core.errors import (
    DatastoreNotOpenError,
    RecordNotFoundError,
    UnknownAttributeError,
    UnknownTableError,
)
from kennel.core.logging_config import get_logger

from .base import Entity
from .entities import TABLES
from .utils import QueryBuilder, create_all, create_engine, create_sessionmaker

if TYPE_CHECKING:
    from kennel.core.config import Settings

logger = get_logger(__name__)


class DatastoreAdapter:
    """Primary-key oriented access to the entity tables."""

    def __init__(
        self,
        database_url: str,
        tables: Optional[Mapping[str, Type[Entity]]] = None,
        echo: bool = False,
        create_schema: bool = True,
    ) -> None:
        """Initialize the adapter. Nothing is connected until ``open()``.

        Args:
            database_url: SQLAlchemy connection URL
            tables: Table name to entity class registry; defaults to ``TABLES``
            echo: Log every emitted SQL statement
            create_schema: Create missing tables on ``open()``
        """
        self.database_url = database_url
        self.tables: Dict[str, Type[Entity]] = dict(TABLES if tables is None else tables)
        self.echo = echo
        self.create_schema = create_schema
        self._engine: Optional[Engine] = None
        self._session_factory = None

    @classmethod
    def from_settings(cls, settings: Optional["Settings"] = None) -> "DatastoreAdapter":
        if settings is None:
            from kennel.core.config import get_settings

            settings = get_settings()
        database = settings.database
        return cls(database.url, echo=database.echo, create_schema=database.create_schema)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise DatastoreNotOpenError()
        return self._engine

    def open(self) -> "DatastoreAdapter":
        """Create the engine and, if enabled, the schema. Opening twice is a no-op."""
        if self._engine is not None:
            return self
        self._engine = create_engine(self.database_url, echo=self.echo)
        self._session_factory = create_sessionmaker(self._engine)
        if self.create_schema:
            create_all(self._engine)
        logger.info(f"Datastore opened: {self._engine.url.render_as_string(hide_password=True)}")
        return self

    def close(self) -> None:
        """Dispose of the engine. Closing a closed adapter is a no-op."""
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Datastore closed")

    def __enter__(self) -> "DatastoreAdapter":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _session(self) -> Session:
        if self._session_factory is None:
            raise DatastoreNotOpenError()
        return self._session_factory()

    # ------------------------------------------------------------------
    # Table registry
    # ------------------------------------------------------------------

    def model_for(self, table: str) -> Type[Entity]:
        """Return the entity class registered for ``table``.

        Raises:
            UnknownTableError: No entity is registered under that name
        """
        try:
            return self.tables[table]
        except KeyError:
            raise UnknownTableError(table) from None

    def table_for(self, record: Entity) -> str:
        """Return the table name ``record`` is stored in."""
        for table, model in self.tables.items():
            if type(record) is model:
                return table
        raise UnknownTableError(type(record).__name__)

    def _check_attributes(self, table: str, model: Type[Entity], names) -> None:
        unknown = sorted(set(names) - set(model.model_fields))
        if unknown:
            raise UnknownAttributeError(table, unknown)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def get(self, table: str, record_id: Any) -> Optional[Entity]:
        """Look up a record by primary key.

        Returns:
            The record, or None if no row has that key
        """
        model = self.model_for(table)
        with self._session() as session:
            record = session.get(model, record_id)
        logger.debug(f"get {table}[{record_id}] -> {'hit' if record is not None else 'miss'}")
        return record

    def find(self, table: str, record_id: Any) -> Entity:
        """Look up a record by primary key.

        Raises:
            RecordNotFoundError: No row has that key
        """
        record = self.get(table, record_id)
        if record is None:
            raise RecordNotFoundError(table, record_id)
        return record

    def create(self, table: str, attributes: Mapping[str, Any]) -> Entity:
        """Insert a new record and return it with its generated id.

        Raises:
            UnknownAttributeError: ``attributes`` names a column the table lacks
        """
        model = self.model_for(table)
        self._check_attributes(table, model, attributes)
        return self.save(model(**attributes))

    def save(self, record: Entity) -> Entity:
        """Insert a new record or write back changes to a loaded one."""
        table = self.table_for(record)
        with self._session() as session:
            session.add(record)
            session.commit()
            session.refresh(record)
        logger.debug(f"saved {table}[{record.id}]")
        return record

    def delete(self, table: str, record_id: Any) -> bool:
        """Delete a record by primary key.

        Returns:
            True if deleted, False if not found
        """
        model = self.model_for(table)
        with self._session() as session:
            record = session.get(model, record_id)
            if record is None:
                return False
            session.delete(record)
            session.commit()
        logger.debug(f"deleted {table}[{record_id}]")
        return True

    def delete_all(self, table: str) -> int:
        """Delete every row of ``table`` and return how many went."""
        model = self.model_for(table)
        with self.engine.begin() as conn:
            result = conn.execute(delete(model.__table__))
        logger.debug(f"deleted all {table}: {result.rowcount} row(s)")
        return result.rowcount

    def first(self, table: str) -> Optional[Entity]:
        """Return the record with the lowest primary key, or None if the table is empty."""
        model = self.model_for(table)
        with self._session() as session:
            return session.exec(select(model).order_by(model.id).limit(1)).first()

    def all(self, table: str) -> List[Entity]:
        return self.query(table)

    def where(self, table: str, **filters: Any) -> List[Entity]:
        """Return the records whose columns equal ``filters``, ordered by primary key."""
        return self.query(table, filters=filters)

    def query(
        self,
        table: str,
        filters: Optional[Mapping[str, Any]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Entity]:
        """List records with optional equality filters and pagination.

        Raises:
            UnknownAttributeError: ``filters`` names a column the table lacks
        """
        model = self.model_for(table)
        stmt = select(model).order_by(model.id)
        if filters:
            self._check_attributes(table, model, filters)
            stmt = QueryBuilder.apply_filters(stmt, model, dict(filters))
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        with self._session() as session:
            return list(session.exec(stmt))

    def count(self, table: str) -> int:
        model = self.model_for(table)
        with self._session() as session:
            return session.exec(select(func.count()).select_from(model)).one()
