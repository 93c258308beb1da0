"""
Database utility functions for engine and session management.

This module provides the core utility functions for creating database engines,
session factories, query helpers and repository bundles.

Functions:
- create_engine: Creates a SQLAlchemy engine with URL normalization
- create_sessionmaker: Creates a session factory with safe defaults
- create_all: Creates all tables from ORM metadata (for tests/dev)
- build_repos: Builds the complete repository bundle for dependency injection
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional, Type

from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import Session

from .associations import AssociationResolver
from .base import Base
from .repositories import DogRepository, PersonRepository, RatingRepository

if TYPE_CHECKING:
    from .adapter import DatastoreAdapter


def normalize_url(db_url: str) -> str:
    """Rewrite bare ``postgres://`` / ``postgresql://`` URLs to the psycopg driver."""
    return re.sub(r"^postgres(?:ql)?://", "postgresql+psycopg://", db_url, count=1)


def create_engine(db_url: str, echo: bool = False) -> Engine:
    """Create a SQLAlchemy engine.

    In-memory SQLite databases live inside a single connection, so they get a
    ``StaticPool`` shared by every session of the engine.

    Args:
        db_url: Database connection URL
        echo: Log every emitted SQL statement

    Returns:
        Configured Engine instance
    """
    url = normalize_url(db_url)
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:"):
        return sa_create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return sa_create_engine(url, echo=echo, pool_pre_ping=True)


def create_sessionmaker(engine: Engine) -> sessionmaker:
    """Create a ``sessionmaker`` with safe defaults for this project.

    Records outlive the session that loaded them, so attributes are not
    expired on commit.
    """
    return sessionmaker(bind=engine, class_=Session, expire_on_commit=False)


def create_all(engine: Engine) -> None:
    """Create all tables for the current ORM metadata.

    This is mainly intended for tests and local development.
    """
    Base.metadata.create_all(engine)


class QueryBuilder:
    """Utility class for building SQLModel-based database queries."""

    @staticmethod
    def apply_filters(stmt, model: Type[Any], filters: Dict[str, Any]):
        """Apply equality filters to a SQLModel select statement.

        A ``None`` value matches ``IS NULL``.
        """
        for key, value in filters.items():
            stmt = stmt.where(getattr(model, key) == value)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a SQLModel select statement."""
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt


@dataclass(frozen=True)
class RepoBundle:
    """Convenience bundle of all repositories for dependency injection."""

    people: PersonRepository
    dogs: DogRepository
    ratings: RatingRepository
    resolver: AssociationResolver


def build_repos(adapter: "DatastoreAdapter") -> RepoBundle:
    """Build a ``RepoBundle`` sharing one resolver over ``adapter``."""
    resolver = AssociationResolver(adapter)
    return RepoBundle(
        people=PersonRepository(adapter, resolver),
        dogs=DogRepository(adapter, resolver),
        ratings=RatingRepository(adapter, resolver),
        resolver=resolver,
    )
