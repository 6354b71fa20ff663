"""Infrastructure layer: concrete implementations of application ports."""

from phonebook.infrastructure.json_codec import ParseError, deserialize, serialize
from phonebook.infrastructure.json_repository import JsonContactRepository
from phonebook.infrastructure.memory_repository import InMemoryContactRepository

__all__ = [
    "InMemoryContactRepository",
    "JsonContactRepository",
    "ParseError",
    "deserialize",
    "serialize",
]
