"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the database layer using SQLModel.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import ConfigDict
from sqlmodel import SQLModel


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


class Entity(Base):
    """Base class for persisted records.

    Records compare structurally: same type and same column values, primary
    key included. Two loads of the same row are therefore equal even though
    they are distinct Python objects.
    """

    def attributes(self) -> Dict[str, Any]:
        """Return the column values as a plain dict."""
        return self.model_dump()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return type(self) is type(other) and self.attributes() == other.attributes()
