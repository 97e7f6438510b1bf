import logging
from typing import Optional

import typer

from config import settings
from lending import Book, LendingError, Person
from lending.ui_helpers import set_output_mode, print_heading, print_report, print_event, print_error

logging.basicConfig(level=settings.log_level, format="%(levelname)s: %(name)s: %(message)s")
logger = logging.getLogger(__name__)

APP_NAME = settings.app_name

# --- Typer CLI Uygulaması ---
app = typer.Typer(help=f"{APP_NAME} CLI")

def _version_callback(value: bool):
    if value:
        print(f"{APP_NAME} {settings.app_version}")
        raise typer.Exit()

@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """Global options for the CLI (e.g. output mode)."""
    if output:
        set_output_mode(output)

@app.command("demo")
def cli_demo(
    title: str = typer.Option("Java programming for dummies", "--title", help="Book title"),
    author: str = typer.Option("Vivek Chandra", "--author", help="Book author"),
    first_name: str = typer.Option("Roman", "--first-name", help="Borrower's first name"),
    last_name: str = typer.Option("Vanoyan", "--last-name", help="Borrower's last name"),
):
    """Create a book and a person, loan the book, then return it, showing both after each step."""
    try:
        book = Book(title, author)
        print_heading("Display book information after creating a book")
        print_report(book)

        person = Person(first_name, last_name)
        print_heading("Display person information after creating a person")
        print_report(person)

        person.loan(book)
        print_heading("Display person information after borrowing a book")
        print_report(person)
        print_heading("Display book information after borrowing a book")
        print_report(book)

        print_heading("Return the borrowed book")
        person.return_book(book)
        print_heading("Display person information after returning the book")
        print_report(person)
        print_heading("Display book information after returning the book")
        print_report(book)
    except LendingError as e:
        print_error(e)
        raise typer.Exit(code=1)

@app.command("loan")
def cli_loan(
    title: str,
    author: str,
    first_name: str,
    last_name: str,
    times: int = typer.Option(1, "--times", "-n", min=1, help="How many times to try loaning the same book"),
):
    """Loan a new book to a new person, optionally retrying the same loan."""
    try:
        book = Book(title, author)
        person = Person(first_name, last_name)
    except LendingError as e:
        print_error(e)
        raise typer.Exit(code=1)

    failed = False
    for attempt in range(1, times + 1):
        try:
            person.loan(book)
            print_event(f"Loaned {book.id} to person {person.id}")
        except LendingError as e:
            logger.debug(f"Loan attempt {attempt} rejected: {e}")
            print_error(e)
            failed = True

    print_report(person)
    if failed:
        raise typer.Exit(code=1)

@app.command("return-book")
def cli_return_book(
    title: str,
    author: str,
    first_name: str,
    last_name: str,
    borrow_first: bool = typer.Option(False, "--borrow-first", help="Loan the book before returning it"),
):
    """Return a new book; without --borrow-first the person never held it and the return is rejected."""
    try:
        book = Book(title, author)
        person = Person(first_name, last_name)
        if borrow_first:
            person.loan(book)
        person.return_book(book)
        print_event(f"Returned {book.id} from person {person.id}")
    except LendingError as e:
        print_error(e)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
