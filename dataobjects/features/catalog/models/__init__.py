"""Catalog data objects.

Importing this package registers the ``Author`` and ``Book`` entity types.
"""

from .author_model import AuthorDataObject
from .book_model import BookDataObject

__all__ = ["AuthorDataObject", "BookDataObject"]
