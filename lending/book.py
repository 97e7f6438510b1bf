from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Optional

from lending.errors import BookNotBorrowed, BookUnavailable, InvalidArgument
from lending.sequence import next_book_id
from lending.validators import TextValidator

if TYPE_CHECKING:
    from lending.person import Person

logger = logging.getLogger(__name__)


class Book:
    """A single book in the library and its current loan status.

    Loan status is one fact: the borrower reference. ``available`` is derived
    from it, so a book can never be unavailable without a borrower or the
    other way around.
    """

    def __init__(self, title: str, author: str) -> None:
        self._title = TextValidator.require(title, "Title of a book")
        self._author = TextValidator.require(author, "Author of a book")
        self._id = next_book_id()
        self._borrower: Optional[Person] = None
        self._lock = threading.Lock()
        logger.debug(f"Book created: id={self._id}, title={self._title!r}")

    @classmethod
    def loaned_to(cls, title: str, author: str, borrower: "Person") -> "Book":
        """Create a book that starts out on loan to ``borrower``."""
        if borrower is None:
            raise InvalidArgument("Borrower can not be empty")
        book = cls(title, author)
        borrower.loan(book)
        return book

    # ------------------------- Metadata ------------------------- #
    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = TextValidator.require(value, "Title of a book")

    @property
    def author(self) -> str:
        return self._author

    @author.setter
    def author(self, value: str) -> None:
        self._author = TextValidator.require(value, "Author of a book")

    # ------------------------- Loan status ------------------------- #
    @property
    def borrower(self) -> Optional[Person]:
        return self._borrower

    @property
    def available(self) -> bool:
        return self._borrower is None

    def mark_loaned(self, borrower: "Person") -> None:
        """Book half of ``Person.loan``: claim the book for ``borrower``.

        The borrower must already list the book, so a loan can only be
        completed through ``Person.loan``.
        """
        if borrower is None:
            raise InvalidArgument("Borrower can not be empty")
        with self._lock:
            if self._borrower is not None:
                logger.debug(f"Book {self._id} is already loaned to person {self._borrower.id}")
                raise BookUnavailable(self)
            if not borrower.has_borrowed(self):
                raise InvalidArgument(f"Book {self._id} must be loaned through Person.loan")
            self._borrower = borrower

    def mark_returned(self, borrower: "Person") -> None:
        """Book half of ``Person.return_book``: release the book held by ``borrower``.

        Fails if ``borrower`` is not the current holder, or if the borrower
        still lists the book.
        """
        if borrower is None:
            raise InvalidArgument("Borrower can not be empty")
        with self._lock:
            if self._borrower is not borrower:
                logger.debug(f"Book {self._id} is not held by person {borrower.id}")
                raise BookNotBorrowed(self, borrower)
            if borrower.has_borrowed(self):
                raise InvalidArgument(f"Book {self._id} must be returned through Person.return_book")
            self._borrower = None

    # ------------------------- Reports ------------------------- #
    def describe(self) -> str:
        info = (
            "Book information:\n"
            f"title : {self._title}\n"
            f"author : {self._author}\n"
        )
        borrower = self._borrower
        if borrower is None:
            return info
        # Borrower is summarised by identity only; its book lines would point back here.
        return info + "\n" + borrower.describe_identity()

    def to_dict(self) -> dict:
        borrower = self._borrower
        return {
            "id": self._id,
            "title": self._title,
            "author": self._author,
            "available": borrower is None,
            "borrower_id": borrower.id if borrower is not None else None,
        }

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self._title} by {self._author} ({self._id})"

    def __repr__(self) -> str:
        return f"Book(id={self._id!r}, title={self._title!r}, author={self._author!r})"
