"""Purchase history persisted in visitor key-value storage.

The whole history is one JSON array stored under a single key. It is
read once when the store is created and every append rewrites the full
array, so the in-memory list and the stored bytes never diverge.
"""

import logging

from pydantic import TypeAdapter, ValidationError

from app.purchases.schemas import PurchaseRecord
from app.storage.service import KeyValueStorage

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(list[PurchaseRecord])


def serialize_records(records: list[PurchaseRecord]) -> bytes:
    return _records_adapter.dump_json(records, by_alias=True)


def deserialize_records(raw: bytes) -> list[PurchaseRecord]:
    """Parse stored history. Raises ValidationError on malformed data."""
    return _records_adapter.validate_json(raw)


class PurchaseRecordStore:
    def __init__(self, storage: KeyValueStorage, key: str):
        self.storage = storage
        self.key = key
        self._records: list[PurchaseRecord] = []
        self._loaded = False

    def load(self) -> list[PurchaseRecord]:
        """Read history from storage once; later calls return the cached list.

        Missing or malformed data both give an empty history. Malformed data
        stays in storage until the next append overwrites it.
        """
        if self._loaded:
            return self._records

        raw = self.storage.get(self.key)
        if raw:
            try:
                self._records = deserialize_records(raw)
            except ValidationError as e:
                logger.warning(
                    f"Discarding malformed purchase history under '{self.key}': "
                    f"{e.error_count()} error(s)"
                )
                self._records = []
        self._loaded = True
        return self._records

    def append(self, record: PurchaseRecord) -> None:
        """Prepend record and write the whole list back."""
        records = [record, *self.load()]
        self.storage.set(self.key, serialize_records(records))
        self._records = records

    def all(self) -> list[PurchaseRecord]:
        return list(self.load())

    def total(self) -> int:
        return sum(record.price for record in self.load())

    def ids(self) -> set[str]:
        return {record.id for record in self.load()}

    def __len__(self) -> int:
        return len(self.load())
