"""
Rating repository interface and implementation.

Reading ``dog_of`` / ``judge_of`` performs a primary-key lookup. The
``assign_*`` helpers only set the foreign key on the in-memory rating; call
``save`` to persist it.
"""

from __future__ import annotations

from typing import List, Optional

from ..entities.dogs import Dog
from ..entities.people import Person
from ..entities.ratings import Rating
from .base import BaseRepository


class RatingRepository(BaseRepository[Rating]):
    """Repository for ratings."""

    table = "ratings"

    def list_for_dog(self, dog_id: int) -> List[Rating]:
        return self.list(filters={"dog_id": dog_id})

    def list_by_judge(self, judge_id: int) -> List[Rating]:
        return self.list(filters={"judge_id": judge_id})

    def dog_of(self, rating: Rating) -> Optional[Dog]:
        """Return the rated dog, or None if ``dog_id`` is unset.

        Raises:
            RecordNotFoundError: ``dog_id`` points at a missing dog
        """
        return self.resolver.get_referenced(rating, "dog")

    def judge_of(self, rating: Rating) -> Optional[Person]:
        """Return the judging person, or None if ``judge_id`` is unset.

        Raises:
            RecordNotFoundError: ``judge_id`` points at a missing person
        """
        return self.resolver.get_referenced(rating, "judge")

    def assign_dog(self, rating: Rating, dog: Optional[Dog]) -> Rating:
        self.resolver.set_referenced(rating, "dog", dog)
        return rating

    def assign_judge(self, rating: Rating, judge: Optional[Person]) -> Rating:
        self.resolver.set_referenced(rating, "judge", judge)
        return rating
