"""Tagged-envelope JSON encoding for the contact list.

Each element carries a "type" discriminator ("Person" or "Organization") next
to the shared fields (name, phone, created, timeEdited) and the variant's own
fields. Timestamps are RFC 3339 UTC strings.
"""

import json
import re
from datetime import datetime, timezone

from phonebook.domain import Contact, Organization, Person

TYPE_KEY = "type"

# Up to nine fractional digits are accepted; datetime keeps six.
_FRACTION_RE = re.compile(r"\.(\d+)")


class ParseError(ValueError):
    """The persisted document is not a valid contact list."""


def _datetime_to_iso(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _iso_to_datetime(s: str) -> datetime:
    text = s.strip().replace("Z", "+00:00").replace("z", "+00:00")
    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        raise ValueError(f"timestamp without offset: {s!r}")
    return dt.astimezone(timezone.utc)


def _encode(contact: Contact) -> dict:
    envelope = {
        TYPE_KEY: contact.kind,
        "name": contact.name,
        "phone": contact.phone,
    }
    if isinstance(contact, Person):
        envelope["surname"] = contact.surname
        envelope["gender"] = contact.gender
        envelope["birthDate"] = contact.birth_date
    elif isinstance(contact, Organization):
        envelope["address"] = contact.address
    else:
        raise TypeError(f"Not a contact: {contact!r}")
    envelope["created"] = _datetime_to_iso(contact.created)
    envelope["timeEdited"] = _datetime_to_iso(contact.time_edited)
    return envelope


def _require_str(obj: dict, key: str, index: int) -> str:
    value = obj.get(key)
    if not isinstance(value, str):
        raise ParseError(f"Element {index}: missing or non-string field '{key}'.")
    return value


def _require_time(obj: dict, key: str, index: int) -> datetime:
    raw = _require_str(obj, key, index)
    try:
        return _iso_to_datetime(raw)
    except ValueError as e:
        raise ParseError(f"Element {index}: bad timestamp in '{key}': {e}") from e


def _decode(obj: object, index: int) -> Contact:
    if not isinstance(obj, dict):
        raise ParseError(f"Element {index} is not an object.")
    kind = obj.get(TYPE_KEY)
    name = _require_str(obj, "name", index)
    phone = _require_str(obj, "phone", index)
    created = _require_time(obj, "created", index)
    time_edited = _require_time(obj, "timeEdited", index)
    if kind == Person.kind:
        return Person(
            name=name,
            phone=phone,
            surname=_require_str(obj, "surname", index),
            gender=_require_str(obj, "gender", index),
            birth_date=_require_str(obj, "birthDate", index),
            created=created,
            time_edited=time_edited,
        )
    if kind == Organization.kind:
        return Organization(
            name=name,
            phone=phone,
            address=_require_str(obj, "address", index),
            created=created,
            time_edited=time_edited,
        )
    raise ParseError(f"Element {index}: unknown contact type {kind!r}.")


def serialize(records: list[Contact]) -> bytes:
    """Encode records as a pretty-printed UTF-8 JSON array."""
    payload = [_encode(c) for c in records]
    return json.dumps(payload, ensure_ascii=False, indent=2).encode("utf-8")


def deserialize(data: bytes) -> list[Contact]:
    """Decode a JSON array of contacts. Raises ParseError on malformed input."""
    try:
        payload = json.loads(data)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ParseError(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        raise ParseError("Invalid JSON: nested too deeply.") from e
    if not isinstance(payload, list):
        raise ParseError("Top-level JSON value must be an array.")
    return [_decode(obj, i) for i, obj in enumerate(payload)]
