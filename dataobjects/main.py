"""Demonstration driver.

Fetches a book and its author through the catalog use cases and prints the
book's exported fields.

Usage:
    python -m dataobjects.main
"""

import json
import logging

from dataobjects.core.logging import configure_logging
from dataobjects.core.settings import get_settings
from dataobjects.features.catalog.repositories import author_source, book_source
from dataobjects.features.catalog.usecases import (
    GetAuthorUseCaseImpl,
    GetBookUseCaseImpl,
)
from dataobjects.features.mapping.factory import get_factory

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the demo against the stub sources."""
    settings = get_settings()
    configure_logging(settings)
    logger.info("Starting %s v%s", settings.app_name, settings.app_version)

    factory = get_factory()
    get_author = GetAuthorUseCaseImpl(author_source(), factory)
    get_book = GetBookUseCaseImpl(book_source(), get_author, factory)

    book = get_book.execute(settings.demo_book_id)
    author = get_author.execute(settings.demo_author_id)
    logger.info(
        "Book author and direct author lookup share one instance: %s",
        book.get_field("authorData") is author,
    )

    print(json.dumps(book.to_record(settings.record_format), indent=2))


if __name__ == "__main__":
    main()
