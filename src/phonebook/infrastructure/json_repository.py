"""File-backed ContactRepository: one JSON array, rewritten after every change."""

import logging
from pathlib import Path

from phonebook.domain import Contact
from phonebook.infrastructure.json_codec import ParseError, deserialize, serialize
from phonebook.infrastructure.memory_repository import InMemoryContactRepository

logger = logging.getLogger(__name__)

DEFAULT_FILE = "phonebook.json"


class JsonContactRepository(InMemoryContactRepository):
    """Keeps the contact list in memory and writes a full snapshot on every mutation.

    The file is loaded once at construction. A missing file is created holding
    an empty array; a corrupt one leaves the list empty and the reason on
    `load_error`. Concurrent writers are not coordinated (last writer wins).
    """

    def __init__(self, path: str | Path = DEFAULT_FILE) -> None:
        super().__init__()
        self._path = Path(path)
        self.load_error: str | None = None
        self.load()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> None:
        """Replace the in-memory list with the file contents. Never raises on bad data."""
        self._contacts = []
        self.load_error = None
        try:
            if not self._path.exists():
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._path.write_text("[]", encoding="utf-8")
                logger.info("Created empty phone book at %s", self._path)
            self._contacts = deserialize(self._path.read_bytes())
        except ParseError as e:
            self.load_error = str(e)
            logger.error("Error deserializing contacts from %s: %s", self._path, e)
        except OSError as e:
            self.load_error = str(e)
            logger.error("Error loading contacts from %s: %s", self._path, e)

    def save(self) -> None:
        """Write the current list to a temporary sibling and swap it into place."""
        self._persist(self._contacts)

    def _persist(self, contacts: list[Contact]) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_bytes(serialize(contacts))
            tmp.replace(self._path)
        except OSError as e:
            if tmp.is_file():
                tmp.unlink()
            logger.error("Error saving contacts to %s: %s", self._path, e)
            raise
        logger.debug("Saved %d contacts to %s", len(contacts), self._path)
