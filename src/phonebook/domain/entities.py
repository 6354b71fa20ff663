"""Domain entities: Person and Organization, the two variants of Contact."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import ClassVar

# Placeholders stored when input fails validation.
NO_NUMBER = "[no number]"
NO_DATA = "[no data]"

GENDERS = ("M", "F")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Person:
    """
    A private individual in the phone book.
    Immutable; edits produce a replacement that keeps `created`.
    """

    kind: ClassVar[str] = "Person"
    # edit name -> attribute
    EDITABLE_FIELDS: ClassVar[dict[str, str]] = {
        "name": "name",
        "surname": "surname",
        "number": "phone",
        "phone": "phone",
        "birth": "birth_date",
        "birthdate": "birth_date",
        "gender": "gender",
    }

    name: str = ""
    phone: str = NO_NUMBER
    surname: str = ""
    gender: str = NO_DATA
    birth_date: str = NO_DATA
    created: datetime = field(default_factory=utc_now)
    time_edited: datetime | None = field(default=None)

    def __post_init__(self):
        if self.name is None or self.phone is None:
            raise ValueError("Person name and phone must not be None.")
        if self.time_edited is None:
            object.__setattr__(self, "time_edited", self.created)

    def display_name(self) -> str:
        return f"{self.name} {self.surname}"

    def searchable_values(self) -> tuple[str, ...]:
        return (self.name, self.surname, self.phone)


@dataclass(frozen=True)
class Organization:
    """An organization (company, shop, office) in the phone book."""

    kind: ClassVar[str] = "Organization"
    EDITABLE_FIELDS: ClassVar[dict[str, str]] = {
        "address": "address",
        "number": "phone",
        "phone": "phone",
    }

    name: str = ""
    phone: str = NO_NUMBER
    address: str = ""
    created: datetime = field(default_factory=utc_now)
    time_edited: datetime | None = field(default=None)

    def __post_init__(self):
        if self.name is None or self.phone is None:
            raise ValueError("Organization name and phone must not be None.")
        if self.time_edited is None:
            object.__setattr__(self, "time_edited", self.created)

    def display_name(self) -> str:
        return self.name

    def searchable_values(self) -> tuple[str, ...]:
        return (self.name, self.phone)


Contact = Person | Organization


def with_field(contact: Contact, attribute: str, value: str, edited_at: datetime) -> Contact:
    """Return a copy of contact with one attribute changed and time_edited touched.

    time_edited never moves backwards, even if the clock does.
    """
    return replace(
        contact,
        **{attribute: value},
        time_edited=max(edited_at, contact.time_edited),
    )


def editable_attribute(contact: Contact, field_name: str) -> str | None:
    """Map a user-typed field name ("Birth", "birth_date", "number") to an attribute, or None."""
    key = (field_name or "").strip().lower().replace("_", "").replace(" ", "")
    return contact.EDITABLE_FIELDS.get(key)
