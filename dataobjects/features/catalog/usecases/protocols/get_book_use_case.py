"""Protocol for the get book use case."""

from typing import Protocol

from dataobjects.features.catalog.models import BookDataObject


class GetBookUseCase(Protocol):
    """Protocol for use cases that retrieve a book with its author."""

    def execute(self, book_id: object) -> BookDataObject:
        """Retrieve the book data object for ``book_id``.

        Args:
            book_id: Source-specific book id

        Returns:
            The cached BookDataObject, with its author under ``authorData``
        """
        ...
