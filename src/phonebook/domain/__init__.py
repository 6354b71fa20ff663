"""Domain layer: entities and value objects. No dependencies on outer layers."""

from phonebook.domain.entities import (
    GENDERS,
    NO_DATA,
    NO_NUMBER,
    Contact,
    Organization,
    Person,
    editable_attribute,
    utc_now,
    with_field,
)
from phonebook.domain.validation import (
    clean_birth_date,
    clean_gender,
    clean_phone,
    is_valid_number,
)

__all__ = [
    "GENDERS",
    "NO_DATA",
    "NO_NUMBER",
    "Contact",
    "Organization",
    "Person",
    "editable_attribute",
    "clean_birth_date",
    "clean_gender",
    "clean_phone",
    "is_valid_number",
    "utc_now",
    "with_field",
]
