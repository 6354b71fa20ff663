"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from phonebook.domain import Contact


class ContactRepository(Protocol):
    """Ordered store of contacts. Indices are 0-based; out of range raises IndexError.

    Mutations raise OSError when they cannot be persisted; the stored list is
    then left as it was before the call.
    """

    def add(self, contact: Contact) -> int:
        """Append a contact and return its index."""
        ...

    def get(self, index: int) -> Contact:
        """Return the contact at index."""
        ...

    def list_all(self) -> list[Contact]:
        """Return all contacts in insertion order."""
        ...

    def replace(self, index: int, contact: Contact) -> None:
        """Store contact in place of the one at index."""
        ...

    def remove(self, index: int) -> Contact:
        """Delete and return the contact at index. Later indices shift down by one."""
        ...

    def count(self) -> int:
        """Return the number of stored contacts."""
        ...
