import copy
import itertools
from typing import Any, Dict, List, Optional

from db.repository import Collection, Store
from utils.logger import get_logger

logger = get_logger("MEMORY_STORE")


class MemoryCollection(Collection):
    """Volatile dict-backed table; ids restart at 1 with every process."""

    def __init__(self, name: str):
        super().__init__(name)
        self._docs: Dict[int, Dict[str, Any]] = {}
        self._ids = itertools.count(1)

    async def insert(self, doc):
        doc_id = next(self._ids)
        stored = {**copy.deepcopy(doc), "id": doc_id}
        self._docs[doc_id] = stored
        return copy.deepcopy(stored)

    async def get(self, doc_id):
        doc = self._docs.get(doc_id)
        return copy.deepcopy(doc) if doc is not None else None

    async def find(self, **equals) -> List[Dict[str, Any]]:
        return [
            copy.deepcopy(d) for d in self._docs.values()
            if all(d.get(k) == v for k, v in equals.items())
        ]

    async def replace(self, doc_id, doc) -> Optional[Dict[str, Any]]:
        if doc_id not in self._docs:
            return None
        stored = {**copy.deepcopy(doc), "id": doc_id}
        self._docs[doc_id] = stored
        return copy.deepcopy(stored)

    async def update(self, doc_id, changes) -> Optional[Dict[str, Any]]:
        doc = self._docs.get(doc_id)
        if doc is None:
            return None
        doc.update(copy.deepcopy(changes))
        doc["id"] = doc_id
        return copy.deepcopy(doc)

    async def delete(self, doc_id) -> bool:
        return self._docs.pop(doc_id, None) is not None

    async def count(self) -> int:
        return len(self._docs)


def build_memory_store() -> Store:
    logger.info("Initializing in-memory store")
    return Store(
        restaurants=MemoryCollection("restaurants"),
        reviews=MemoryCollection("reviews"),
        reservations=MemoryCollection("reservations"),
        gift_cards=MemoryCollection("gift_cards"),
        admins=MemoryCollection("admins"),
    )
