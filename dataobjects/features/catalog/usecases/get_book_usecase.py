"""Use case for retrieving a book together with its author.

The book record references its author by id in the ``author`` storage field.
The author is resolved through the author use case, so it comes from the same
identity cache as any direct author lookup, and is injected into the book as
``authorData``.
"""

from __future__ import annotations

import logging
from typing import cast

from dataobjects.features.catalog.models import AuthorDataObject, BookDataObject
from dataobjects.features.catalog.repositories.protocols import RecordSource
from dataobjects.features.catalog.usecases.protocols import GetAuthorUseCase
from dataobjects.features.mapping.factory import DataObjectFactory
from dataobjects.features.mapping.records import normalize_record

logger = logging.getLogger(__name__)


class GetBookUseCaseImpl:
    """Implementation of the get book use case."""

    def __init__(
        self,
        source: RecordSource,
        get_author: GetAuthorUseCase,
        factory: DataObjectFactory,
    ):
        """Initialize the use case with dependencies.

        Args:
            source: Record source for books
            get_author: Use case resolving the book's author
            factory: Identity cache handing out data objects
        """
        self.source: RecordSource = source
        self.get_author: GetAuthorUseCase = get_author
        self.factory: DataObjectFactory = factory

    def execute(self, book_id: object) -> BookDataObject:
        """Retrieve the book data object for ``book_id``.

        Raises:
            RecordNotFound: If the book or its author does not exist
            SourceUnavailable: If a source cannot be reached
        """
        record = normalize_record(self.source.fetch_by_id(book_id))

        related: list[AuthorDataObject] = []
        author_id = record.get("author")
        if author_id is not None:
            related.append(self.get_author.execute(author_id))
        else:
            logger.debug("Book %r has no author reference", book_id)

        return cast(BookDataObject, self.factory.get_instance("Book", record, related))
