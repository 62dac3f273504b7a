import logging
import threading
import time
from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

from app.db.json_store import DocumentStore
from app.schemas.leave_schema import LeavePeriod
from app.schemas.popup_schema import Popup


logger = logging.getLogger("uvicorn.error")

T = TypeVar("T", bound=BaseModel)


class IdGenerator:
    """Millisecond timestamps that never repeat or go backwards within a process."""

    def __init__(self) -> None:
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            now_ms = int(time.time() * 1000)
            self._last = max(now_ms, self._last + 1)
            return self._last


_ids = IdGenerator()


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ResourceManager(Generic[T]):
    """Add/delete/toggle/list against one collection of the site document.

    Each mutation is a full load -> mutate -> save cycle under the store lock.
    """

    def __init__(self, store: DocumentStore, collection: str, model: type[T], ids: IdGenerator | None = None) -> None:
        self.store = store
        self.collection = collection
        self.model = model
        self.ids = ids or _ids

    def _items(self, doc) -> list[T]:
        return getattr(doc, self.collection)

    def list(self) -> list[T]:
        return list(self._items(self.store.load()))

    def add(self, fields: dict[str, Any]) -> T:
        data = {k: v for k, v in fields.items() if v is not None}
        with self.store.lock:
            doc = self.store.load()
            entity = self.model.model_validate({**data, "id": self.ids.next_id(), "created_at": utc_now_iso()})
            self._items(doc).append(entity)
            self.store.save(doc)
        logger.info("Added %s id=%s", self.collection, entity.id)
        return entity

    def delete(self, entity_id: int) -> None:
        with self.store.lock:
            doc = self.store.load()
            items = self._items(doc)
            items[:] = [item for item in items if item.id != entity_id]
            # Persist even when nothing matched
            self.store.save(doc)
        logger.info("Deleted %s id=%s", self.collection, entity_id)

    def toggle(self, entity_id: int, field: str) -> Optional[T]:
        with self.store.lock:
            doc = self.store.load()
            target = next((item for item in self._items(doc) if item.id == entity_id), None)
            if target is None:
                return None
            setattr(target, field, not bool(getattr(target, field)))
            self.store.save(doc)
        logger.info("Toggled %s.%s id=%s -> %s", self.collection, field, entity_id, getattr(target, field))
        return target


def leave_period_manager(store: DocumentStore) -> ResourceManager[LeavePeriod]:
    return ResourceManager(store, "leave_periods", LeavePeriod)


def popup_manager(store: DocumentStore) -> ResourceManager[Popup]:
    return ResourceManager(store, "popups", Popup)
