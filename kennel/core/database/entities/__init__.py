"""
Database entity models.

One module per table:

- people: owners and judges
- dogs: dogs and their owner association
- ratings: judges' ratings of dogs

``TABLES`` maps table names to entity classes and ``ASSOCIATIONS`` maps entity
classes to their declared associations. Both are explicit registries; nothing
is discovered by reflection.
"""

from typing import Dict, Mapping, Type

from ..associations import Association
from ..base import Entity
from .dogs import DOG_ASSOCIATIONS, Dog
from .people import PERSON_ASSOCIATIONS, Person
from .ratings import RATING_ASSOCIATIONS, Rating

TABLES: Dict[str, Type[Entity]] = {
    "people": Person,
    "dogs": Dog,
    "ratings": Rating,
}

ASSOCIATIONS: Dict[type, Mapping[str, Association]] = {
    Person: PERSON_ASSOCIATIONS,
    Dog: DOG_ASSOCIATIONS,
    Rating: RATING_ASSOCIATIONS,
}

__all__ = [
    "ASSOCIATIONS",
    "Dog",
    "Person",
    "Rating",
    "TABLES",
]
