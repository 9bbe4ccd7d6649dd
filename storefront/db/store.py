"""In-memory entity store.

One ``EntityStore`` per resource, all owned by a ``Store`` that the app factory
creates and hangs on ``app.state``. Requests are handled one at a time on the
event loop, so the collections are mutated without locking.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from storefront.models.schemas import Order, Product, Record, User

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EntityStore(Generic[RecordT]):
    """Records of one type keyed by id. Insertion order is preserved."""

    def __init__(self, model: Type[RecordT], name: str):
        self.model = model
        self.name = name
        self._records: Dict[str, RecordT] = {}

    def get_all(self) -> List[RecordT]:
        return list(self._records.values())

    def get_by_id(self, record_id: str) -> Optional[RecordT]:
        return self._records.get(record_id)

    def exists(self, record_id: str) -> bool:
        return record_id in self._records

    def count(self) -> int:
        return len(self._records)

    def create(self, fields: Dict[str, Any]) -> RecordT:
        now = utcnow()
        record = self.model.model_validate(
            {**fields, "id": str(uuid.uuid4()), "created_at": now, "updated_at": now}
        )
        self._records[record.id] = record
        logger.info(f"Created {self.name} {record.id}")
        return record

    def update(self, record_id: str, changes: Dict[str, Any]) -> Optional[RecordT]:
        """Apply ``changes`` over the stored fields; absent fields keep their value."""
        current = self._records.get(record_id)
        if current is None:
            return None
        merged = current.model_dump()
        merged.update(changes)
        merged["id"] = record_id
        merged["created_at"] = current.created_at
        merged["updated_at"] = utcnow()
        record = self.model.model_validate(merged)
        self._records[record_id] = record
        logger.info(f"Updated {self.name} {record_id} ({', '.join(sorted(changes)) or 'no fields'})")
        return record

    def delete(self, record_id: str) -> bool:
        if self._records.pop(record_id, None) is None:
            return False
        logger.info(f"Deleted {self.name} {record_id}")
        return True

    def insert(self, record: RecordT) -> RecordT:
        """Store a fully built record as is (used to load fixtures)."""
        self._records[record.id] = record
        return record

    def clear(self) -> None:
        self._records.clear()


class Store:
    def __init__(self):
        self.users: EntityStore[User] = EntityStore(User, "user")
        self.products: EntityStore[Product] = EntityStore(Product, "product")
        self.orders: EntityStore[Order] = EntityStore(Order, "order")

    def reset(self) -> None:
        for collection in (self.users, self.products, self.orders):
            collection.clear()

    @classmethod
    def seeded(cls) -> "Store":
        from storefront.db.seed import load_demo_data

        store = cls()
        load_demo_data(store)
        return store
