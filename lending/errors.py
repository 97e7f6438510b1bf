"""Errors raised by the lending model."""

from __future__ import annotations


class LendingError(Exception):
    """Base class for every failure raised by the lending package."""
    pass


class InvalidArgument(LendingError, ValueError):
    """A required value was missing or empty."""
    pass


class BookUnavailable(LendingError):
    """Loan attempted on a book that is already loaned."""

    def __init__(self, book) -> None:
        self.book = book
        super().__init__(f"Book {book.id} ({book.title}) is currently loaned.")


class BookNotBorrowed(LendingError, LookupError):
    """Return attempted on a book the person does not hold."""

    def __init__(self, book, person) -> None:
        self.book = book
        self.person = person
        super().__init__(f"Book {book.id} ({book.title}) is not borrowed by person {person.id}.")
