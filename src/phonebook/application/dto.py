"""Result types returned by ContactBook. Positions are 0-based."""

from dataclasses import dataclass, field

from phonebook.domain import Contact


@dataclass(frozen=True)
class ContactSummary:
    """One line of the listing."""

    position: int
    label: str
    kind: str


@dataclass(frozen=True)
class SearchHit:
    """A search match and the position it occupies in the full list."""

    position: int
    contact: Contact


# --- add results ---


@dataclass(frozen=True)
class RecordAdded:
    """Contact was appended and saved. Warnings name the fields replaced by placeholders."""

    position: int
    contact: Contact
    warnings: tuple[str, ...] = field(default=())


@dataclass(frozen=True)
class UnknownKind:
    """Contact kind is neither person nor organization."""

    kind: str


# --- edit / remove / get results ---


@dataclass(frozen=True)
class RecordEdited:
    position: int
    contact: Contact
    warnings: tuple[str, ...] = field(default=())


@dataclass(frozen=True)
class RecordRemoved:
    position: int
    contact: Contact


@dataclass(frozen=True)
class InvalidIndex:
    """No contact at the requested position."""

    position: int


@dataclass(frozen=True)
class UnknownField:
    """The field cannot be edited on this kind of contact."""

    name: str
    allowed: tuple[str, ...]


@dataclass(frozen=True)
class SaveFailed:
    """The change could not be written to storage; the book is unchanged."""

    reason: str
