"""In-memory implementation of ContactRepository (no file)."""

from phonebook.domain import Contact


class InMemoryContactRepository:
    """Stores contacts in memory. Order preserved by insertion.

    Every mutation builds the new list, hands it to `_persist`, and only then
    replaces the current one, so a failed persist leaves the list untouched.
    """

    def __init__(self, contacts: list[Contact] | None = None) -> None:
        self._contacts: list[Contact] = list(contacts or [])

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._contacts):
            raise IndexError(f"No contact at index {index}.")

    def _commit(self, contacts: list[Contact]) -> None:
        self._persist(contacts)
        self._contacts = contacts

    def add(self, contact: Contact) -> int:
        self._commit([*self._contacts, contact])
        return len(self._contacts) - 1

    def get(self, index: int) -> Contact:
        self._check(index)
        return self._contacts[index]

    def list_all(self) -> list[Contact]:
        return list(self._contacts)

    def replace(self, index: int, contact: Contact) -> None:
        self._check(index)
        contacts = list(self._contacts)
        contacts[index] = contact
        self._commit(contacts)

    def remove(self, index: int) -> Contact:
        self._check(index)
        contacts = list(self._contacts)
        removed = contacts.pop(index)
        self._commit(contacts)
        return removed

    def count(self) -> int:
        return len(self._contacts)

    def _persist(self, contacts: list[Contact]) -> None:
        """Store contacts durably. Nothing to do in memory."""
