"""
Person entity models.

People own dogs and judge them. A person is only ever referenced by other
records (``Dog.owner_id``, ``Rating.judge_id``); it holds no foreign keys.
"""

from __future__ import annotations

from typing import Dict, Optional

from sqlmodel import Field

from ..associations import Association
from ..base import Entity


class PersonBase(Entity):
    """Base fields for person."""

    first_name: str = Field(description="Given name")
    last_name: str = Field(description="Family name")


class Person(PersonBase, table=True):
    """Persistent person record.

    Table: people
    """

    __tablename__ = "people"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"Person(id={self.id}, first_name={self.first_name}, last_name={self.last_name})"


PERSON_ASSOCIATIONS: Dict[str, Association] = {}
