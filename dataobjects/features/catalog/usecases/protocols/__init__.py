"""Use case protocols for the catalog feature."""

from .get_author_use_case import GetAuthorUseCase
from .get_book_use_case import GetBookUseCase

__all__ = ["GetAuthorUseCase", "GetBookUseCase"]
