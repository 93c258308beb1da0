"""
Database layer for Kennel.

Structure:
- entities/: SQLModel entity models, one module per table
- repositories/: Persistence capability per entity
- adapter.py: Table-name keyed datastore adapter
- associations.py: Belongs-to / has-many declarations and their resolver
- session.py: Datastore lifecycle helpers
- utils.py: Engine, session factory and repository bundle helpers
"""

from .adapter import DatastoreAdapter
from .associations import AssociationResolver, BelongsTo, HasMany
from .base import Base, Entity
from .entities import ASSOCIATIONS, TABLES, Dog, Person, Rating
from .session import datastore_session, init_db
from .utils import RepoBundle, build_repos, create_all, create_engine, create_sessionmaker

__all__ = [
    "ASSOCIATIONS",
    "AssociationResolver",
    "Base",
    "BelongsTo",
    "DatastoreAdapter",
    "Dog",
    "Entity",
    "HasMany",
    "Person",
    "Rating",
    "RepoBundle",
    "TABLES",
    "build_repos",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "datastore_session",
    "init_db",
]
