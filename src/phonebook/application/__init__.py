"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from phonebook.application.contact_book import (
    KINDS,
    ContactBook,
    format_details,
    records_message,
)
from phonebook.application.dto import (
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
from phonebook.application.ports import ContactRepository

__all__ = [
    "KINDS",
    "ContactBook",
    "ContactRepository",
    "ContactSummary",
    "InvalidIndex",
    "RecordAdded",
    "RecordEdited",
    "RecordRemoved",
    "SaveFailed",
    "SearchHit",
    "UnknownField",
    "UnknownKind",
    "format_details",
    "records_message",
]
