import pytest

from lending import Book, Person, InvalidArgument, BookUnavailable, BookNotBorrowed


def test_new_book_is_available(book):
    assert book.available is True
    assert book.borrower is None
    assert book.title == "Java programming for dummies"
    assert book.author == "Vivek Chandra"

def test_book_ids_are_sequential_and_unique():
    first = Book("Dune", "Frank Herbert")
    second = Book("Emma", "Jane Austen")
    assert first.id == "book-0"
    assert second.id == "book-1"

def test_title_and_author_are_stripped():
    book = Book("  Ulysses ", " James Joyce  ")
    assert book.title == "Ulysses"
    assert book.author == "James Joyce"

@pytest.mark.parametrize("title,author", [
    (None, "Author"),
    ("", "Author"),
    ("   ", "Author"),
    ("Title", None),
    ("Title", ""),
])
def test_create_rejects_missing_fields(title, author):
    with pytest.raises(InvalidArgument):
        Book(title, author)

def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError, match="Title of a book can not be empty"):
        Book("", "Someone")

def test_setters_validate(book):
    book.title = "Python for dummies"
    assert book.title == "Python for dummies"
    with pytest.raises(InvalidArgument):
        book.author = ""
    assert book.author == "Vivek Chandra"

def test_mark_loaned_outside_person_loan_is_rejected(book, person):
    # A direct claim would leave the book held by nobody's list
    with pytest.raises(InvalidArgument, match="must be loaned through Person.loan"):
        book.mark_loaned(person)
    assert book.available is True
    assert book.borrower is None
    assert person.borrowed_books == ()

def test_mark_loaned_on_loaned_book_fails(book, person):
    other = Person("Ada", "Lovelace")
    person.loan(book)
    with pytest.raises(BookUnavailable) as exc_info:
        book.mark_loaned(other)
    assert exc_info.value.book is book
    assert book.borrower is person

def test_mark_loaned_requires_borrower(book):
    with pytest.raises(InvalidArgument):
        book.mark_loaned(None)
    assert book.available is True

def test_mark_returned_on_available_book_fails(book, person):
    with pytest.raises(BookNotBorrowed):
        book.mark_returned(person)
    assert book.available is True

def test_mark_returned_by_someone_else_fails(book, person):
    other = Person("Ada", "Lovelace")
    person.loan(book)
    with pytest.raises(BookNotBorrowed):
        book.mark_returned(other)
    assert book.borrower is person

def test_mark_returned_outside_return_book_is_rejected(book, person):
    person.loan(book)
    with pytest.raises(InvalidArgument, match="must be returned through Person.return_book"):
        book.mark_returned(person)
    assert book.borrower is person
    assert person.borrowed_books == (book,)

def test_mark_returned_requires_borrower(book, person):
    person.loan(book)
    with pytest.raises(InvalidArgument):
        book.mark_returned(None)
    assert book.borrower is person

def test_loaned_to_keeps_both_sides_in_sync(person):
    book = Book.loaned_to("Dune", "Frank Herbert", person)
    assert book.available is False
    assert book.borrower is person
    assert person.borrowed_books == (book,)

def test_loaned_to_requires_borrower():
    with pytest.raises(InvalidArgument):
        Book.loaned_to("Dune", "Frank Herbert", None)

def test_describe_available_book(book):
    assert book.describe() == (
        "Book information:\n"
        "title : Java programming for dummies\n"
        "author : Vivek Chandra\n"
    )

def test_describe_loaned_book_shows_borrower_identity_only(book, person):
    second = Book("Dune", "Frank Herbert")
    person.loan(book)
    person.loan(second)

    assert book.describe() == (
        "Book information:\n"
        "title : Java programming for dummies\n"
        "author : Vivek Chandra\n"
        "\n"
        "Person information:\n"
        "first name : Roman\n"
        "last name : Vanoyan\n"
        "id : 1\n"
    )
    # Borrowed book lines belong to the person report, not the book report
    assert "book-1 Dune" not in book.describe()

def test_to_dict(book, person):
    assert book.to_dict() == {
        "id": "book-0",
        "title": "Java programming for dummies",
        "author": "Vivek Chandra",
        "available": True,
        "borrower_id": None,
    }
    person.loan(book)
    data = book.to_dict()
    assert data["available"] is False
    assert data["borrower_id"] == 1
