"""Contact book use cases: add, list, search, edit, remove, count."""

import re
from collections.abc import Callable, Mapping
from datetime import datetime

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
from phonebook.domain import (
    Contact,
    Organization,
    Person,
    clean_birth_date,
    clean_gender,
    clean_phone,
    editable_attribute,
    utc_now,
    with_field,
)

KIND_PERSON = "person"
KIND_ORGANIZATION = "organization"
KINDS = (KIND_PERSON, KIND_ORGANIZATION)


def records_message(count: int) -> str:
    return f"The Phone Book has {count} records."


def format_details(contact: Contact) -> list[str]:
    """Detail card for one contact, one line per field."""
    if isinstance(contact, Person):
        lines = [
            f"Name: {contact.name}",
            f"Surname: {contact.surname}",
            f"Birth date: {contact.birth_date}",
            f"Gender: {contact.gender}",
            f"Number: {contact.phone}",
        ]
    else:
        lines = [
            f"Organization name: {contact.name}",
            f"Address: {contact.address}",
            f"Number: {contact.phone}",
        ]
    lines.append(f"Time created: {contact.created:%Y-%m-%dT%H:%M:%S}")
    lines.append(f"Time last edit: {contact.time_edited:%Y-%m-%dT%H:%M:%S}")
    return lines


def _query_pattern(query: str) -> re.Pattern:
    try:
        return re.compile(f".*(?:{query}).*", re.IGNORECASE)
    except re.error:
        return re.compile(f".*{re.escape(query)}.*", re.IGNORECASE)


class ContactBook:
    """The phone book seen by the console. Every mutation is persisted by the repository.

    A mutation the repository cannot persist returns SaveFailed and leaves the
    book as it was.
    """

    def __init__(
        self,
        repository: ContactRepository,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repo = repository
        self._clock = clock

    # --- add ---

    def add_person(
        self, name: str, surname: str, birth_date: str, gender: str, phone: str
    ) -> RecordAdded | SaveFailed:
        """Append a person. Bad birth date, gender or number become placeholders."""
        birth_date, w_birth = clean_birth_date(birth_date)
        gender, w_gender = clean_gender(gender)
        phone, w_phone = clean_phone(phone)
        now = self._clock()
        person = Person(
            name=name,
            phone=phone,
            surname=surname,
            gender=gender,
            birth_date=birth_date,
            created=now,
            time_edited=now,
        )
        warnings = tuple(w for w in (w_birth, w_gender, w_phone) if w)
        return self._append(person, warnings)

    def add_organization(
        self, name: str, address: str, phone: str
    ) -> RecordAdded | SaveFailed:
        """Append an organization. A bad number becomes a placeholder."""
        phone, w_phone = clean_phone(phone)
        now = self._clock()
        organization = Organization(
            name=name, phone=phone, address=address, created=now, time_edited=now
        )
        return self._append(organization, (w_phone,) if w_phone else ())

    def _append(self, contact: Contact, warnings: tuple[str, ...]) -> RecordAdded | SaveFailed:
        try:
            position = self._repo.add(contact)
        except OSError as e:
            return SaveFailed(reason=str(e))
        return RecordAdded(position=position, contact=contact, warnings=warnings)

    def add(
        self, kind: str, fields: Mapping[str, str]
    ) -> RecordAdded | UnknownKind | SaveFailed:
        """Dispatch on kind ("person" or "organization"). Missing fields are empty."""
        kind_clean = (kind or "").strip().lower()
        if kind_clean == KIND_PERSON:
            return self.add_person(
                name=fields.get("name", ""),
                surname=fields.get("surname", ""),
                birth_date=fields.get("birth_date", ""),
                gender=fields.get("gender", ""),
                phone=fields.get("phone", ""),
            )
        if kind_clean == KIND_ORGANIZATION:
            return self.add_organization(
                name=fields.get("name", ""),
                address=fields.get("address", ""),
                phone=fields.get("phone", ""),
            )
        return UnknownKind(kind=kind)

    # --- read ---

    def list_contacts(self) -> list[ContactSummary]:
        return [
            ContactSummary(position=i, label=c.display_name(), kind=c.kind)
            for i, c in enumerate(self._repo.list_all())
        ]

    def listing(self) -> list[str]:
        """Numbered listing ("1- Ann Smith"), or the zero-records line."""
        summaries = self.list_contacts()
        if not summaries:
            return [records_message(0)]
        return [f"{s.position + 1}- {s.label}" for s in summaries]

    def get(self, position: int) -> Contact | InvalidIndex:
        try:
            return self._repo.get(position)
        except IndexError:
            return InvalidIndex(position=position)

    def details(self, contact: Contact) -> list[str]:
        return format_details(contact)

    def search(self, query: str) -> list[SearchHit]:
        """Case-insensitive match of ".*query.*" against name, surname and number.

        Hits keep list order and carry the position in the full list.
        """
        pattern = _query_pattern(query or "")
        return [
            SearchHit(position=position, contact=contact)
            for position, contact in enumerate(self._repo.list_all())
            if any(pattern.fullmatch(v) for v in contact.searchable_values())
        ]

    def count(self) -> int:
        return self._repo.count()

    def count_message(self) -> str:
        return records_message(self.count())

    # --- mutate ---

    def edit(
        self, position: int, field: str, value: str
    ) -> RecordEdited | InvalidIndex | UnknownField | SaveFailed:
        """Change one field of the contact at position and touch time_edited."""
        contact = self.get(position)
        if isinstance(contact, InvalidIndex):
            return contact
        attribute = editable_attribute(contact, field)
        if attribute is None:
            return UnknownField(name=field, allowed=tuple(contact.EDITABLE_FIELDS))

        warning = None
        if attribute == "phone":
            value, warning = clean_phone(value)
        elif attribute == "gender":
            value, warning = clean_gender(value)
        elif attribute == "birth_date":
            value, warning = clean_birth_date(value)

        updated = with_field(contact, attribute, value, self._clock())
        try:
            self._repo.replace(position, updated)
        except OSError as e:
            return SaveFailed(reason=str(e))
        return RecordEdited(
            position=position,
            contact=updated,
            warnings=(warning,) if warning else (),
        )

    def remove(self, position: int) -> RecordRemoved | InvalidIndex | SaveFailed:
        try:
            removed = self._repo.remove(position)
        except IndexError:
            return InvalidIndex(position=position)
        except OSError as e:
            return SaveFailed(reason=str(e))
        return RecordRemoved(position=position, contact=removed)
