"""Key-value storage capability.

Purchase history lives in a small key-value store scoped to one visitor,
mirroring what a browser's local storage offers a single page:

- ``get(key)`` returns the stored bytes or ``None``
- ``set(key, value)`` replaces the stored bytes

Implementations:
- InMemoryStorage: dict-backed, for tests and local experiments
- SqlStorage: rows in ``storage_entries`` keyed by (namespace, key)
"""

import logging
from abc import ABC, abstractmethod

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.storage.models import StorageEntry

logger = logging.getLogger(__name__)


class KeyValueStorage(ABC):
    """Abstract byte-valued key-value store."""

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        pass

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        pass


class InMemoryStorage(KeyValueStorage):
    def __init__(self, initial: dict[str, bytes] | None = None):
        self._data: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)


class SqlStorage(KeyValueStorage):
    """Storage namespace persisted through a SQLAlchemy session.

    Every ``set`` commits immediately so the stored value never lags
    behind what callers hold in memory.
    """

    def __init__(self, db: Session, namespace: str):
        self.db = db
        self.namespace = namespace

    def _get_entry(self, key: str) -> StorageEntry | None:
        result = self.db.execute(
            select(StorageEntry).where(
                StorageEntry.namespace == self.namespace,
                StorageEntry.key == key,
            )
        )
        return result.scalar_one_or_none()

    def get(self, key: str) -> bytes | None:
        entry = self._get_entry(key)
        return entry.value if entry else None

    def set(self, key: str, value: bytes) -> None:
        entry = self._get_entry(key)
        if entry:
            entry.value = value
        else:
            self.db.add(StorageEntry(namespace=self.namespace, key=key, value=value))
        self.db.commit()
        logger.debug(f"Stored {len(value)} bytes under {self.namespace}/{key}")
