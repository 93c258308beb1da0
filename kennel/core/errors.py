"""Exception hierarchy for the Kennel persistence layer."""

from __future__ import annotations

from typing import Any, Iterable


class KennelError(Exception):
    pass


class DatastoreNotOpenError(KennelError):
    def __init__(self) -> None:
        super().__init__("Datastore adapter is not open; call open() first")


class UnknownTableError(KennelError):
    def __init__(self, table: str) -> None:
        self.table = table
        super().__init__(f"Unknown table: '{table}'")


class UnknownAttributeError(KennelError):
    def __init__(self, table: str, names: Iterable[str]) -> None:
        self.table = table
        self.names = list(names)
        super().__init__(f"Unknown attribute(s) for '{table}': {', '.join(self.names)}")


class RecordNotFoundError(KennelError):
    """A primary-key lookup for a non-null key found no row."""

    def __init__(self, table: str, record_id: Any) -> None:
        self.table = table
        self.record_id = record_id
        super().__init__(f"Couldn't find record in '{table}' with id={record_id!r}")


class UnknownAssociationError(KennelError):
    def __init__(self, entity: str, name: str, kind: str = "association") -> None:
        self.entity = entity
        self.name = name
        super().__init__(f"{entity} has no {kind} named '{name}'")


class AssociationTypeMismatchError(KennelError):
    def __init__(self, association: str, expected: str, actual: str) -> None:
        self.association = association
        self.expected = expected
        self.actual = actual
        super().__init__(f"Association '{association}' expects {expected}, got {actual}")


class UnsavedRecordError(KennelError):
    """The record has no primary key yet."""

    def __init__(self, record_type: str, context: str) -> None:
        self.record_type = record_type
        super().__init__(f"{record_type} has no primary key; save it before {context}")
