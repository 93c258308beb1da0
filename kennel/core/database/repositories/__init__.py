"""
Database repository layer.

One repository per entity, each composing the entity with the datastore
adapter and the association resolver.

Modules:
- base: BaseRepository with the shared CRUD operations
- people: Person repository
- dogs: Dog repository (owner and ratings associations)
- ratings: Rating repository (dog and judge associations)
"""

from .base import BaseRepository
from .dogs import DogRepository
from .people import PersonRepository
from .ratings import RatingRepository

__all__ = [
    "BaseRepository",
    "DogRepository",
    "PersonRepository",
    "RatingRepository",
]
