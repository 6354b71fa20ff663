"""
Phonebook core: clean-architecture layout.

- domain: entities (Person, Organization) and field validation. No outer dependencies.
- application: use cases (ContactBook), ports (ContactRepository), DTOs.
- infrastructure: adapters (InMemoryContactRepository, JsonContactRepository), JSON codec.
"""

from phonebook.application import (
    ContactBook,
    ContactRepository,
    ContactSummary,
    InvalidIndex,
    RecordAdded,
    RecordEdited,
    RecordRemoved,
    SaveFailed,
    SearchHit,
    UnknownField,
    UnknownKind,
)
from phonebook.domain import Contact, Organization, Person
from phonebook.infrastructure import (
    InMemoryContactRepository,
    JsonContactRepository,
    ParseError,
)

__all__ = [
    "Contact",
    "ContactBook",
    "ContactRepository",
    "ContactSummary",
    "InMemoryContactRepository",
    "InvalidIndex",
    "JsonContactRepository",
    "Organization",
    "ParseError",
    "Person",
    "RecordAdded",
    "RecordEdited",
    "RecordRemoved",
    "SaveFailed",
    "SearchHit",
    "UnknownField",
    "UnknownKind",
]
