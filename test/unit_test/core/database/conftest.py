"""Test configuration for database unit tests.

This module provides common fixtures for testing the database layer against
a fresh in-memory SQLite datastore per test.
"""

from __future__ import annotations

from typing import Dict, Generator

import pytest

from kennel.core.database.adapter import DatastoreAdapter
from kennel.core.database.utils import RepoBundle, build_repos


@pytest.fixture(scope="function")
def adapter() -> Generator[DatastoreAdapter, None, None]:
    """Open an adapter over an in-memory SQLite database."""
    datastore = DatastoreAdapter("sqlite://")
    datastore.open()
    try:
        yield datastore
    finally:
        datastore.close()


@pytest.fixture(scope="function")
def repos(adapter: DatastoreAdapter) -> RepoBundle:
    return build_repos(adapter)


@pytest.fixture(scope="function")
def sample_person_data() -> dict:
    """Sample judge/owner data for testing."""
    return {"first_name": "Teagan", "last_name": "Hickman"}


@pytest.fixture(scope="function")
def sample_dog_data() -> dict:
    """Sample dog data for testing."""
    return {
        "name": "Tenley",
        "license": "OH-9384764",
        "age": 1,
        "breed": "Golden Doodle",
        "owner_id": 1,
    }


@pytest.fixture(scope="function")
def sample_rating_data() -> dict:
    """Sample rating scores for testing."""
    return {"coolness": 5, "cuteness": 6}


@pytest.fixture(scope="function")
def seeded(adapter: DatastoreAdapter, sample_person_data, sample_dog_data, sample_rating_data) -> Dict[str, object]:
    """Clear the tables and create one person, one dog and one rating."""
    adapter.delete_all("ratings")
    adapter.delete_all("dogs")
    adapter.delete_all("people")

    teagan = adapter.create("people", sample_person_data)
    dog = adapter.create("dogs", sample_dog_data)
    rating = adapter.create("ratings", {**sample_rating_data, "judge_id": teagan.id, "dog_id": dog.id})
    return {"person": teagan, "dog": dog, "rating": rating}
