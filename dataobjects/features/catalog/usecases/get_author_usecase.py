"""Use case for retrieving an author by id."""

from typing import cast

from dataobjects.features.catalog.models import AuthorDataObject
from dataobjects.features.catalog.repositories.protocols import RecordSource
from dataobjects.features.mapping.factory import DataObjectFactory


class GetAuthorUseCaseImpl:
    """Implementation of the get author use case."""

    def __init__(self, source: RecordSource, factory: DataObjectFactory):
        """Initialize the use case with dependencies.

        Args:
            source: Record source for authors
            factory: Identity cache handing out data objects
        """
        self.source: RecordSource = source
        self.factory: DataObjectFactory = factory

    def execute(self, author_id: object) -> AuthorDataObject:
        """Retrieve the author data object for ``author_id``.

        Raises:
            RecordNotFound: If the source has no such author
            SourceUnavailable: If the source cannot be reached
        """
        record = self.source.fetch_by_id(author_id)
        return cast(AuthorDataObject, self.factory.get_instance("Author", record))
