"""
Dog repository interface and implementation.

Besides CRUD, it follows the dog's associations: its owner (belongs-to) and
its ratings (has-many).
"""

from __future__ import annotations

from typing import List, Optional

from ..entities.dogs import Dog
from ..entities.people import Person
from ..entities.ratings import Rating
from .base import BaseRepository


class DogRepository(BaseRepository[Dog]):
    """Repository for dogs."""

    table = "dogs"

    def list_for_owner(self, owner_id: int) -> List[Dog]:
        """Get all dogs owned by a person.

        Args:
            owner_id: Person id

        Returns:
            Dogs ordered by id
        """
        return self.list(filters={"owner_id": owner_id})

    def owner_of(self, dog: Dog) -> Optional[Person]:
        return self.resolver.get_referenced(dog, "owner")

    def assign_owner(self, dog: Dog, owner: Optional[Person]) -> Dog:
        """Set ``dog.owner_id`` from ``owner`` without saving."""
        self.resolver.set_referenced(dog, "owner", owner)
        return dog

    def ratings_of(self, dog: Dog) -> List[Rating]:
        return self.resolver.get_collection(dog, "ratings")
