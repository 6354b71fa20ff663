"""Input checks for contact fields. Failures map to placeholders, never errors."""

import re

from phonebook.domain.entities import GENDERS, NO_DATA, NO_NUMBER

_PARENTHESIZED_FIRST = r"\(\w+\)([- ]\w{2,})*"
_PARENTHESIZED_SECOND = r"\w+[- ]\(\w{2,}\)([- ]\w{2,})*"
_GROUPS = r"\w+[- ]\w{2,}([- ]\w{2,})*"

_NUMBER_RE = re.compile(
    rf"\+?(\w+|{_PARENTHESIZED_FIRST}|{_PARENTHESIZED_SECOND}|{_GROUPS})",
    re.IGNORECASE,
)

WRONG_NUMBER = "Wrong number format!"
BAD_GENDER = "Bad gender!"
BAD_BIRTH_DATE = "Bad birth date!"


def is_valid_number(candidate: str) -> bool:
    """Return True if candidate is an accepted phone number shape.

    Accepted: an optional leading "+", then a single word, or groups separated
    by "-" or " " where every group after the first has at least two
    characters. At most one group, the first or the second, may be wrapped in
    parentheses. "+0 (123) 456-789-ABcd" and "(123) 234 345-456" pass,
    "123 (345) (456)" and "12-3" do not.
    """
    if candidate is None:
        return False
    return _NUMBER_RE.fullmatch(candidate) is not None


def clean_phone(raw: str) -> tuple[str, str | None]:
    """Return (stored value, warning or None)."""
    if is_valid_number(raw):
        return raw, None
    return NO_NUMBER, WRONG_NUMBER


def clean_gender(raw: str) -> tuple[str, str | None]:
    gender = (raw or "").strip().upper()
    if gender in GENDERS:
        return gender, None
    return NO_DATA, BAD_GENDER


def clean_birth_date(raw: str) -> tuple[str, str | None]:
    if not raw or not raw.strip():
        return NO_DATA, BAD_BIRTH_DATE
    return raw, None
