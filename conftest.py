import pytest

from lending import Book, Person
from lending.sequence import book_ids, person_ids
from lending.ui_helpers import OUTPUT_MODE_ENV

@pytest.fixture(autouse=True)
def fresh_state(monkeypatch):
    # Her test book-0 / 1 numaralarından başlasın
    book_ids.reset()
    person_ids.reset()
    # The CLI writes the output mode into the environment; setenv makes pytest restore it
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")
    yield

@pytest.fixture
def book():
    return Book("Java programming for dummies", "Vivek Chandra")

@pytest.fixture
def person():
    return Person("Roman", "Vanoyan")
