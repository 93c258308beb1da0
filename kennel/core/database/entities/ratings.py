"""
Rating entity models.

A rating is one judge's verdict on one dog. It belongs to the dog
(``dog_id``) and to the judging ``Person`` (``judge_id``).
"""

from __future__ import annotations

from typing import Dict, Optional

from sqlmodel import Field

from ..associations import Association, BelongsTo
from ..base import Entity
from .dogs import Dog
from .people import Person


class RatingBase(Entity):
    """Base fields for rating."""

    coolness: Optional[int] = Field(default=None, description="Coolness score")
    cuteness: Optional[int] = Field(default=None, description="Cuteness score")


class Rating(RatingBase, table=True):
    """Persistent rating record.

    Both foreign keys are unset on a freshly constructed rating.

    Table: ratings
    """

    __tablename__ = "ratings"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    judge_id: Optional[int] = Field(default=None, foreign_key="people.id", index=True)
    dog_id: Optional[int] = Field(default=None, foreign_key="dogs.id", index=True)

    def __repr__(self) -> str:
        return f"Rating(id={self.id}, dog_id={self.dog_id}, judge_id={self.judge_id})"


RATING_ASSOCIATIONS: Dict[str, Association] = {
    "dog": BelongsTo("dog", field="dog_id", target_table="dogs", result_type=Dog),
    "judge": BelongsTo("judge", field="judge_id", target_table="people", result_type=Person),
}
