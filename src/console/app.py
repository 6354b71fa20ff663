"""Line-oriented menu over ContactBook. Reads one line, acts, prompts again."""

from collections.abc import Callable, Iterable

from phonebook.application import (
    KINDS,
    ContactBook,
    InvalidIndex,
    RecordEdited,
    RecordRemoved,
    SaveFailed,
    UnknownField,
)
from phonebook.domain import Contact, Person, editable_attribute

MENU_PROMPT = "\n[menu] Enter action (add, list, search, count, exit): "
LIST_PROMPT = "\n[list] Enter action ([number], back): "
SEARCH_PROMPT = "[search] Enter action ([number], back, again): "
RECORD_PROMPT = "[record] Enter action (edit, delete, menu): "

INVALID_INDEX = "Invalid index."
INVALID_NUMBER = "Invalid input. Please enter a number."
SAVE_FAILED = "Error saving contacts: {reason}"


class ConsoleApp:
    """Menu loop. read_line(prompt) returns one line; EOFError ends the loop."""

    def __init__(
        self,
        book: ContactBook,
        *,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._book = book
        self._read = read_line
        self._write = write

    def _ask(self, prompt: str) -> str:
        return self._read(prompt).strip()

    def _write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self._write(line)

    def run(self) -> None:
        actions = {
            "add": self.add,
            "list": self.list_contacts,
            "search": self.search,
            "count": self.count,
        }
        while True:
            try:
                action = self._ask(MENU_PROMPT).lower()
            except EOFError:
                return
            if action == "exit":
                return
            handler = actions.get(action)
            if handler is None:
                continue
            try:
                handler()
            except EOFError:
                return

    # --- top-level actions ---

    def add(self) -> None:
        while True:
            kind = self._ask("Enter the type (person, organization): ").lower()
            if kind in KINDS:
                break
            self._write("Wrong input")
        if kind == "person":
            fields = {
                "name": self._ask("Enter the name: "),
                "surname": self._ask("Enter the surname: "),
                "birth_date": self._ask("Enter the birth date: "),
                "gender": self._ask("Enter the gender (M, F): "),
                "phone": self._ask("Enter the number: "),
            }
        else:
            fields = {
                "name": self._ask("Enter the organization name: "),
                "address": self._ask("Enter the address: "),
                "phone": self._ask("Enter the number: "),
            }
        result = self._book.add(kind, fields)
        if isinstance(result, SaveFailed):
            self._write(SAVE_FAILED.format(reason=result.reason))
            return
        self._write_lines(result.warnings)
        self._write("The record added.")

    def list_contacts(self) -> None:
        self._write_lines(self._book.listing())
        if self._book.count() == 0:
            return
        choice = self._ask(LIST_PROMPT).lower()
        if choice == "back":
            return
        position = self._parse_number(choice, self._book.count())
        if position is None:
            return
        self.record_menu(position)

    def search(self) -> None:
        while True:
            query = self._ask("Enter search query: ")
            hits = self._book.search(query)
            self._write(f"Found {len(hits)} results:")
            for n, hit in enumerate(hits, start=1):
                self._write(f"{n}. {hit.contact.display_name()}")
            choice = self._ask(SEARCH_PROMPT).lower()
            if choice == "again":
                continue
            if choice == "back":
                return
            selected = self._parse_number(choice, len(hits))
            if selected is None:
                return
            self.record_menu(hits[selected].position)
            return

    def count(self) -> None:
        self._write(self._book.count_message())

    # --- record level ---

    def record_menu(self, position: int) -> None:
        contact = self._book.get(position)
        if isinstance(contact, InvalidIndex):
            self._write(INVALID_INDEX)
            return
        self._show(contact)
        while True:
            action = self._ask(RECORD_PROMPT).lower()
            if action == "menu":
                return
            if action == "delete":
                result = self._book.remove(position)
                if isinstance(result, RecordRemoved):
                    self._write("The record removed!")
                elif isinstance(result, SaveFailed):
                    self._write(SAVE_FAILED.format(reason=result.reason))
                else:
                    self._write(INVALID_INDEX)
                return
            if action == "edit":
                self.edit(position, contact)
                refreshed = self._book.get(position)
                if isinstance(refreshed, InvalidIndex):
                    return
                contact = refreshed

    def edit(self, position: int, contact: Contact) -> None:
        if isinstance(contact, Person):
            prompt = "Select a field (name, surname, birth, gender, number): "
        else:
            prompt = "Select a field (address, number): "
        field = self._ask(prompt).lower()
        if editable_attribute(contact, field) is None:
            self._write("Wrong input")
            return
        value = self._ask(f"Enter {field}: ")
        result = self._book.edit(position, field, value)
        if isinstance(result, RecordEdited):
            self._write_lines(result.warnings)
            self._write("Saved")
            self._show(result.contact)
        elif isinstance(result, UnknownField):
            self._write("Wrong input")
        elif isinstance(result, SaveFailed):
            self._write(SAVE_FAILED.format(reason=result.reason))
        else:
            self._write(INVALID_INDEX)

    def _show(self, contact: Contact) -> None:
        self._write_lines(self._book.details(contact))
        self._write("")

    def _parse_number(self, raw: str, upper: int) -> int | None:
        """Turn a 1-based selection into a 0-based position, or report and return None."""
        try:
            number = int(raw)
        except ValueError:
            self._write(INVALID_NUMBER)
            return None
        if not 1 <= number <= upper:
            self._write(INVALID_INDEX)
            return None
        return number - 1
