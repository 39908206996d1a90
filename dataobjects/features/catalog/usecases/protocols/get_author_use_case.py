"""Protocol for the get author use case."""

from typing import Protocol

from dataobjects.features.catalog.models import AuthorDataObject


class GetAuthorUseCase(Protocol):
    """Protocol for use cases that retrieve an author by id."""

    def execute(self, author_id: object) -> AuthorDataObject:
        """Retrieve the author data object for ``author_id``.

        Args:
            author_id: Source-specific author id

        Returns:
            The cached AuthorDataObject for that author
        """
        ...
