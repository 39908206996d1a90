"""Pytest configuration and shared fixtures for all tests.

This module provides function-scoped fixtures for:
- An isolated identity cache per test
- Raw demo records and the catalog record sources
- Wired catalog use cases
"""

from typing import Any

import pytest

from dataobjects.core.settings import get_settings
from dataobjects.features.catalog.models import AuthorDataObject, BookDataObject
from dataobjects.features.catalog.repositories import (
    InMemoryRecordSource,
    author_source,
    book_source,
)
from dataobjects.features.catalog.usecases import (
    GetAuthorUseCaseImpl,
    GetBookUseCaseImpl,
)
from dataobjects.features.mapping.factory import DataObjectFactory

# Importing the catalog models registers the entity types used below
_ = (AuthorDataObject, BookDataObject)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def factory() -> DataObjectFactory:
    """Provide a fresh identity cache backed by the global registry."""
    return DataObjectFactory()


@pytest.fixture
def author_record() -> dict[str, Any]:
    """Raw author record keyed by storage names."""
    return {
        "id": 101,
        "first_name": "Jerome",
        "last_name": "K. Jerome",
        "email": "jkj@hotmail.com",
    }


@pytest.fixture
def book_record() -> dict[str, Any]:
    """Raw book record keyed by storage names."""
    return {
        "id": 201,
        "title": "Three Men In A Boat",
        "description": "A comic classic.",
        "author": "101",
        "publisher": "Aziloth Books",
        "topic": "Comedy",
        "price": "5.99",
    }


@pytest.fixture
def authors() -> InMemoryRecordSource:
    return author_source()


@pytest.fixture
def books() -> InMemoryRecordSource:
    return book_source()


@pytest.fixture
def get_author(
    authors: InMemoryRecordSource, factory: DataObjectFactory
) -> GetAuthorUseCaseImpl:
    """Author use case wired to the stub author source."""
    return GetAuthorUseCaseImpl(authors, factory)


@pytest.fixture
def get_book(
    books: InMemoryRecordSource,
    get_author: GetAuthorUseCaseImpl,
    factory: DataObjectFactory,
) -> GetBookUseCaseImpl:
    """Book use case sharing the author use case's factory."""
    return GetBookUseCaseImpl(books, get_author, factory)
