from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, List, Tuple

from lending.errors import BookNotBorrowed, BookUnavailable, InvalidArgument, LendingError
from lending.sequence import next_person_id
from lending.validators import TextValidator

if TYPE_CHECKING:
    from lending.book import Book

logger = logging.getLogger(__name__)


class Person:
    """A library member who borrows and returns books.

    The person keeps the books it currently holds in borrow order. Both sides
    of a loan (this list and the book's borrower) are updated together by
    ``loan`` and ``return_book``; nothing else touches them.
    """

    def __init__(self, first_name: str, last_name: str) -> None:
        self._first_name = TextValidator.require(first_name, "First name")
        self._last_name = TextValidator.require(last_name, "Last name")
        self._id = next_person_id()
        self._borrowed_books: List[Book] = []
        self._lock = threading.Lock()
        logger.debug(f"Person created: id={self._id}, name={self._first_name} {self._last_name}")

    @property
    def id(self) -> int:
        return self._id

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        self._first_name = TextValidator.require(value, "First name")

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str) -> None:
        self._last_name = TextValidator.require(value, "Last name")

    @property
    def borrowed_books(self) -> Tuple[Book, ...]:
        return tuple(self._borrowed_books)

    def has_borrowed(self, book: Book) -> bool:
        return any(b is book for b in self._borrowed_books)

    # ------------------------- Borrow / return ------------------------- #
    def loan(self, book: Book) -> None:
        """Borrow ``book``.

        Raises:
            InvalidArgument: book is None.
            BookUnavailable: the book is already on loan (to anyone).
        """
        if book is None:
            raise InvalidArgument("Book can not be empty")
        with self._lock:
            if self.has_borrowed(book):
                raise BookUnavailable(book)
            self._borrowed_books.append(book)
            try:
                # mark_loaned checks availability and claims the book in one step
                book.mark_loaned(self)
            except LendingError:
                self._borrowed_books.pop()
                raise
        logger.info(f"Book {book.id} loaned to person {self._id}")

    def return_book(self, book: Book) -> None:
        """Give ``book`` back.

        Raises:
            InvalidArgument: book is None.
            BookNotBorrowed: this person does not hold the book.
        """
        if book is None:
            raise InvalidArgument("Book can not be empty")
        with self._lock:
            if not self.has_borrowed(book) or book.borrower is not self:
                logger.debug(f"Person {self._id} tried to return book {book.id} they do not hold")
                raise BookNotBorrowed(book, self)
            index = next(i for i, held in enumerate(self._borrowed_books) if held is book)
            del self._borrowed_books[index]
            try:
                # mark_returned re-checks the holder under the book's lock
                book.mark_returned(self)
            except LendingError:
                self._borrowed_books.insert(index, book)
                raise
        logger.info(f"Book {book.id} returned by person {self._id}")

    # ------------------------- Reports ------------------------- #
    def describe_identity(self) -> str:
        return (
            "Person information:\n"
            f"first name : {self._first_name}\n"
            f"last name : {self._last_name}\n"
            f"id : {self._id}\n"
        )

    def describe(self) -> str:
        lines = [self.describe_identity()]
        for book in self._borrowed_books:
            lines.append(f"{book.id} {book.title}\n")
        return "".join(lines)

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "first_name": self._first_name,
            "last_name": self._last_name,
            "borrowed_books": [b.id for b in self._borrowed_books],
        }

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self._first_name} {self._last_name} ({self._id})"

    def __repr__(self) -> str:
        return f"Person(id={self._id!r}, first_name={self._first_name!r}, last_name={self._last_name!r})"
