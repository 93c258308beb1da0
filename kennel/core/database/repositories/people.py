"""
Person repository.
"""

from __future__ import annotations

from typing import List

from ..entities.dogs import Dog
from ..entities.people import Person
from ..entities.ratings import Rating
from .base import BaseRepository


class PersonRepository(BaseRepository[Person]):
    """Repository for people, who own and judge dogs."""

    table = "people"

    def find_by_name(self, first_name: str, last_name: str) -> List[Person]:
        return self.list(filters={"first_name": first_name, "last_name": last_name})

    def dogs_owned_by(self, person: Person) -> List[Dog]:
        if person.id is None:
            return []
        return self.adapter.where("dogs", owner_id=person.id)

    def ratings_judged_by(self, person: Person) -> List[Rating]:
        if person.id is None:
            return []
        return self.adapter.where("ratings", judge_id=person.id)
