"""Catalog use cases package."""

from .get_author_usecase import GetAuthorUseCaseImpl
from .get_book_usecase import GetBookUseCaseImpl
from .protocols import GetAuthorUseCase, GetBookUseCase

__all__ = [
    "GetAuthorUseCaseImpl",
    "GetBookUseCaseImpl",
    "GetAuthorUseCase",
    "GetBookUseCase",
]
