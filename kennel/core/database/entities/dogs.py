"""
Dog entity models.

A dog belongs to an owner (a ``Person``) and collects ratings from judges.
"""

from __future__ import annotations

from typing import Dict, Optional

from sqlmodel import Field

from ..associations import Association, BelongsTo, HasMany
from ..base import Entity
from .people import Person


class DogBase(Entity):
    """Base fields for dog."""

    name: str = Field(description="Dog name")
    license: str = Field(description="License number, e.g. OH-9384764")
    age: Optional[int] = Field(default=None, description="Age in years")
    breed: Optional[str] = Field(default=None, description="Breed")


class Dog(DogBase, table=True):
    """Persistent dog record.

    Table: dogs
    """

    __tablename__ = "dogs"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    # Foreign key to owner
    owner_id: Optional[int] = Field(default=None, foreign_key="people.id", index=True)

    def __repr__(self) -> str:
        return f"Dog(id={self.id}, name={self.name}, owner_id={self.owner_id})"


DOG_ASSOCIATIONS: Dict[str, Association] = {
    "owner": BelongsTo("owner", field="owner_id", target_table="people", result_type=Person),
    "ratings": HasMany("ratings", target_table="ratings", foreign_key="dog_id"),
}
