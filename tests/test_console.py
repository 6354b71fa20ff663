"""Console loop tests: scripted input lines, captured output."""

import json

from console.app import ConsoleApp
from phonebook.application import ContactBook
from phonebook.infrastructure import InMemoryContactRepository, JsonContactRepository


class _Script:
    """Feeds lines to ConsoleApp; raises EOFError when exhausted."""

    def __init__(self, *lines: str) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)


def _run(book: ContactBook, *lines: str) -> tuple[list[str], _Script]:
    out: list[str] = []
    script = _Script(*lines)
    ConsoleApp(book, read_line=script, write=out.append).run()
    return out, script


def _book() -> ContactBook:
    return ContactBook(InMemoryContactRepository())


ADD_ANN = ("add", "person", "Ann", "Smith", "1990-01-01", "F", "+1 202 555")
ADD_ACME = ("add", "organization", "Acme", "1 Main St", "123 456")


def test_add_and_list() -> None:
    book = _book()
    out, _ = _run(book, *ADD_ANN, *ADD_ACME, "list", "back", "exit")
    assert out.count("The record added.") == 2
    assert "1- Ann Smith" in out
    assert "2- Acme" in out


def test_add_reprompts_on_wrong_kind() -> None:
    book = _book()
    out, _ = _run(book, "add", "robot", "", "organization", "Acme", "x", "1", "exit")
    assert out.count("Wrong input") == 2
    assert book.count() == 1


def test_add_reports_placeholders() -> None:
    book = _book()
    out, _ = _run(book, "add", "person", "Ann", "Smith", "", "x", "12-3", "exit")
    assert "Bad birth date!" in out
    assert "Bad gender!" in out
    assert "Wrong number format!" in out
    assert book.get(0).phone == "[no number]"


def test_count_and_unknown_commands() -> None:
    book = _book()
    out, script = _run(book, "dance", "count", *ADD_ACME, "COUNT", "exit")
    assert out[0] == "The Phone Book has 0 records."
    assert out[-1] == "The Phone Book has 1 records."
    assert sum("[menu]" in p for p in script.prompts) == 5


def test_list_empty_book() -> None:
    out, script = _run(_book(), "list", "exit")
    assert out == ["The Phone Book has 0 records."]
    assert not any("[list]" in p for p in script.prompts)


def test_list_select_shows_details_then_menu() -> None:
    book = _book()
    out, _ = _run(book, *ADD_ANN, "list", "1", "menu", "exit")
    assert "Name: Ann" in out
    assert "Surname: Smith" in out
    assert "Number: +1 202 555" in out


def test_list_bad_selection_returns_to_menu() -> None:
    book = _book()
    out, _ = _run(book, *ADD_ANN, "list", "abc", "list", "7", "count", "exit")
    assert "Invalid input. Please enter a number." in out
    assert "Invalid index." in out
    assert out[-1] == "The Phone Book has 1 records."


def test_edit_from_list() -> None:
    book = _book()
    out, _ = _run(book, *ADD_ANN, "list", "1", "edit", "surname", "Jones", "menu", "exit")
    assert "Saved" in out
    assert "Surname: Jones" in out
    assert book.get(0).surname == "Jones"


def test_edit_wrong_field_stays_in_record_menu() -> None:
    book = _book()
    out, _ = _run(book, *ADD_ACME, "list", "1", "edit", "surname", "edit", "address", "2 Side St", "menu", "exit")
    assert "Wrong input" in out
    assert book.get(0).address == "2 Side St"


def test_delete_from_list() -> None:
    book = _book()
    out, _ = _run(book, *ADD_ANN, *ADD_ACME, "list", "1", "delete", "list", "back", "exit")
    assert "The record removed!" in out
    assert book.listing() == ["1- Acme"]
    assert out[-1] == "1- Acme"


def test_search_uses_temporary_numbers() -> None:
    book = _book()
    book.add_organization("Zeta", "x", "1")
    book.add_person("Ann", "Smith", "1990", "F", "2")
    book.add_organization("Bank Org", "x", "3")
    out, _ = _run(book, "search", "ann", "2", "delete", "exit")
    assert "Found 2 results:" in out
    assert "1. Ann Smith" in out
    assert "2. Bank Org" in out
    assert "The record removed!" in out
    assert book.listing() == ["1- Zeta", "2- Ann Smith"]


def test_search_again_and_back() -> None:
    book = _book()
    book.add_person("Ann", "Smith", "1990", "F", "2")
    out, script = _run(book, "search", "zzz", "again", "smi", "back", "count", "exit")
    assert "Found 0 results:" in out
    assert "Found 1 results:" in out
    assert sum("search query" in p for p in script.prompts) == 2
    assert out[-1] == "The Phone Book has 1 records."


def test_search_selection_out_of_range() -> None:
    book = _book()
    book.add_person("Ann", "Smith", "1990", "F", "2")
    out, _ = _run(book, "search", "ann", "3", "exit")
    assert "Invalid index." in out
    assert book.count() == 1


def test_end_of_input_stops_loop() -> None:
    book = _book()
    out, _ = _run(book, "add", "person", "Ann")
    assert book.count() == 0
    assert out == []


def test_session_persists_to_file(tmp_path) -> None:
    path = tmp_path / "phonebook.json"
    book = ContactBook(JsonContactRepository(path))
    _run(book, *ADD_ANN, *ADD_ACME, "list", "2", "edit", "number", "999", "menu", "exit")
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert [e["type"] for e in payload] == ["Person", "Organization"]
    assert payload[1]["phone"] == "999"


def test_edit_accepts_attribute_spelling() -> None:
    book = _book()
    out, _ = _run(book, *ADD_ANN, "list", "1", "edit", "birth_date", "2000-02-02", "menu", "exit")
    assert "Wrong input" not in out
    assert "Birth date: 2000-02-02" in out
    assert book.get(0).birth_date == "2000-02-02"


def test_save_failure_is_reported_and_loop_continues(tmp_path) -> None:
    path = tmp_path / "phonebook.json"
    book = ContactBook(JsonContactRepository(path))
    (tmp_path / "phonebook.json.tmp").mkdir()
    out, _ = _run(book, *ADD_ACME, "count", "exit")
    assert any(line.startswith("Error saving contacts:") for line in out)
    assert "The record added." not in out
    assert out[-1] == "The Phone Book has 0 records."
