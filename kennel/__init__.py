"""Kennel.

This package persists dogs, the people who own and judge them, and the ratings
those judges hand out.

High-level architecture
-----------------------

- **Entity records** (``kennel.core.database.entities``): passive SQLModel
  tables for ``Person``, ``Dog`` and ``Rating``. They hold foreign keys, never
  embedded objects.
- **Datastore adapter** (``kennel.core.database.adapter``): a table-name keyed
  facade over a SQLAlchemy engine offering ``find``, ``create``, ``first`` and
  ``delete_all``.
- **Association resolver** (``kennel.core.database.associations``): turns a
  foreign key into the referenced record and an assigned record back into a
  foreign key, driven by explicit ``BelongsTo`` / ``HasMany`` declarations.
- **Repositories** (``kennel.core.database.repositories``): the per-entity
  persistence capability, composed from the adapter and the resolver.

Typical workflow
----------------

1. Open a ``DatastoreAdapter`` (or use ``datastore_session``).
2. Build the repositories with ``build_repos``.
3. Create people and dogs, rate the dogs, and follow the associations.
"""

__version__ = "0.1.0"
