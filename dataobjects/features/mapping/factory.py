"""Identity cache for data objects.

The factory hands out exactly one data object per ``(entity type, identity
key)``. The first request builds the object; every later request for the same
key returns that instance untouched, whatever data it passes. Entries are
never evicted: the cache lives as long as the factory does.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Hashable, Iterable, Mapping
from functools import lru_cache

from .errors import MissingIdentityField, UnhashableIdentity, UnknownEntityType
from .models.data_object import (
    StandardDataObject,
    get_data_object_class,
    registered_entity_types,
)
from .records import normalize_record

logger = logging.getLogger(__name__)

CacheKey = tuple[str, Hashable]


class DataObjectFactory:
    """Creates data objects and caches them by identity.

    Safe to share between threads: concurrent requests for the same key
    construct a single instance.
    """

    def __init__(
        self, registry: Mapping[str, type[StandardDataObject]] | None = None
    ):
        """Initialize the factory.

        Args:
            registry: Entity type name to data object class. When omitted, the
                global registry filled by ``StandardDataObject`` subclasses is
                consulted on every lookup.
        """
        self.registry: dict[str, type[StandardDataObject]] | None = (
            dict(registry) if registry is not None else None
        )
        self._instances: dict[CacheKey, StandardDataObject] = {}
        self._key_locks: dict[CacheKey, threading.Lock] = {}
        self._lock: threading.Lock = threading.Lock()

    def _resolve_class(self, entity_type: str) -> type[StandardDataObject]:
        if self.registry is None:
            return get_data_object_class(entity_type)
        try:
            return self.registry[entity_type]
        except KeyError:
            raise UnknownEntityType(entity_type) from None

    def get_instance(
        self,
        entity_type: str,
        data: object,
        related: Iterable[StandardDataObject] | StandardDataObject | None = None,
    ) -> StandardDataObject:
        """Return the cached data object for ``data``, building it on first use.

        Args:
            entity_type: Registered entity type name (e.g. ``"Book"``).
            data: Raw record carrying the type's identity field.
            related: Related data objects, used only when the object is built.

        Returns:
            The single instance for ``(entity_type, identity key)``.

        Raises:
            UnknownEntityType: If ``entity_type`` is not registered.
            UnsupportedRecordShape: If ``data`` cannot be read as a record.
            MissingIdentityField: If the record has no identity value.
            UnhashableIdentity: If the identity value cannot key the cache.
        """
        data_object_class = self._resolve_class(entity_type)
        record = normalize_record(data)

        unique_id = data_object_class.get_unique_id()
        identity = record.get(unique_id)
        if identity is None:
            raise MissingIdentityField(entity_type, unique_id)

        try:
            _ = hash(identity)
        except TypeError:
            raise UnhashableIdentity(entity_type, unique_id, identity) from None

        key: CacheKey = (entity_type, identity)
        cached = self._instances.get(key)
        if cached is not None:
            return cached

        with self._lock:
            key_lock = self._key_locks.setdefault(key, threading.Lock())

        try:
            with key_lock:
                cached = self._instances.get(key)
                if cached is not None:
                    return cached

                logger.debug(
                    "Building %s data object for %s=%r", entity_type, unique_id, identity
                )
                instance = data_object_class(record, related)
                self._instances[key] = instance
                return instance
        finally:
            # The key lock stays registered until an instance is published
            with self._lock:
                if key in self._instances and self._key_locks.get(key) is key_lock:
                    del self._key_locks[key]

    def peek(self, entity_type: str, identity: Hashable) -> StandardDataObject | None:
        """Return the cached instance for a key without building anything."""
        return self._instances.get((entity_type, identity))

    def entity_types(self) -> list[str]:
        """Entity type names this factory can build."""
        registry = self.registry if self.registry is not None else registered_entity_types()
        return sorted(registry)

    def __contains__(self, key: object) -> bool:
        return key in self._instances

    def __len__(self) -> int:
        return len(self._instances)


@lru_cache
def get_factory() -> DataObjectFactory:
    """Get the process-wide factory backed by the global registry."""
    return DataObjectFactory()
