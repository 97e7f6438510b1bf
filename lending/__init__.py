"""Library Lending - core domain package

This package contains the in-memory lending model:
- Book entity (book.py)
- Person entity and the borrow/return protocol (person.py)
- Error taxonomy (errors.py)
- Id generators (sequence.py)
- Input validation (validators.py)
- Report rendering for the CLI (ui_helpers.py)
"""

from lending.book import Book
from lending.errors import BookNotBorrowed, BookUnavailable, InvalidArgument, LendingError
from lending.person import Person

__all__ = [
    "Book",
    "Person",
    "LendingError",
    "InvalidArgument",
    "BookUnavailable",
    "BookNotBorrowed",
]
