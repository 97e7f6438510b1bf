"""Process-wide identifier generators.

Books and people each draw ids from one shared counter, so ids stay unique
for the lifetime of the process no matter how many instances exist.
"""

from __future__ import annotations

import threading

from config import settings


class Sequence:
    """Monotonic, thread-safe integer counter."""

    def __init__(self, start: int = 0) -> None:
        self._start = start
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def reset(self) -> None:
        # Only meant for tests
        with self._lock:
            self._next = self._start


book_ids = Sequence(0)
person_ids = Sequence(settings.person_id_start)


def next_book_id() -> str:
    return f"{settings.book_id_prefix}-{book_ids.next()}"


def next_person_id() -> int:
    return person_ids.next()
