"""
Console phone book: menu loop over a JSON-backed ContactBook.
Run: python -m console (from repo root, with .env or env vars set).
"""
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/console/__main__.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
# Load .env from repo root or current dir
for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
    if path.exists():
        load_dotenv(path)
        break

from console.app import ConsoleApp
from phonebook.application import ContactBook
from phonebook.infrastructure import JsonContactRepository
from phonebook.infrastructure.json_repository import DEFAULT_FILE

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=os.environ.get("LOG_LEVEL", "WARNING").strip().upper() or "WARNING",
)
logger = logging.getLogger(__name__)


def build_book() -> tuple[ContactBook, JsonContactRepository]:
    """Create the repository and book from PHONEBOOK_FILE."""
    file_path = os.environ.get("PHONEBOOK_FILE", "").strip() or DEFAULT_FILE
    repo = JsonContactRepository(Path(file_path))
    book = ContactBook(repo)
    return book, repo


def main() -> None:
    book, repo = build_book()
    if repo.load_error:
        print(f"Error loading contacts: {repo.load_error}")
    logger.info("Phone book loaded from %s (%d records)", repo.path, book.count())
    ConsoleApp(book).run()


if __name__ == "__main__":
    main()
