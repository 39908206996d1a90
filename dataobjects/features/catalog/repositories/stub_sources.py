"""Stub record sources seeded with demo catalog data."""

from .in_memory_record_source import InMemoryRecordSource

AUTHOR_RECORDS = [
    {
        "id": 101,
        "first_name": "Jerome",
        "last_name": "K. Jerome",
        "email": "jkj@hotmail.com",
    },
]

BOOK_RECORDS = [
    {
        "id": 201,
        "title": "Three Men In A Boat",
        "description": (
            "Jerome K. Jerome's tale of three well-to-do Englishmen, and one dog, "
            "on a boating expedition along the Thames is rightly famous as a comic classic."
        ),
        "author": "101",
        "publisher": "Aziloth Books",
        "topic": "Comedy",
        "price": "5.99",
    },
]


def author_source() -> InMemoryRecordSource:
    """Create a source holding the demo authors."""
    return InMemoryRecordSource(AUTHOR_RECORDS, name="authors")


def book_source() -> InMemoryRecordSource:
    """Create a source holding the demo books."""
    return InMemoryRecordSource(BOOK_RECORDS, name="books")
