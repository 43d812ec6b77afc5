"""
Storage interface shared by the in-memory and MongoDB backends.

Every entity table is a Collection keyed by an integer id. Single calls are
atomic; services hold ``collection.lock`` around read-modify-write sequences
(redeem, cancel, update) so no two requests interleave on the same table.
"""
import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class Collection(ABC):
    def __init__(self, name: str):
        self.name = name
        self.lock = asyncio.Lock()

    @abstractmethod
    async def insert(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        """Assign the next id, store a copy and return it (with "id")."""

    @abstractmethod
    async def get(self, doc_id: int) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    async def find(self, **equals) -> List[Dict[str, Any]]:
        """Documents whose fields equal every keyword, in insertion order."""

    async def find_one(self, **equals) -> Optional[Dict[str, Any]]:
        docs = await self.find(**equals)
        return docs[0] if docs else None

    async def list(self) -> List[Dict[str, Any]]:
        return await self.find()

    @abstractmethod
    async def replace(self, doc_id: int, doc: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Full replace keeping the id; None when the id is unknown."""

    @abstractmethod
    async def update(self, doc_id: int, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Partial update; None when the id is unknown."""

    @abstractmethod
    async def delete(self, doc_id: int) -> bool:
        ...

    @abstractmethod
    async def count(self) -> int:
        ...


class Store:
    """One collection per entity type, built once and handed to the API layer."""

    def __init__(self, restaurants: Collection, reviews: Collection, reservations: Collection,
                 gift_cards: Collection, admins: Collection):
        self.restaurants = restaurants
        self.reviews = reviews
        self.reservations = reservations
        self.gift_cards = gift_cards
        self.admins = admins

    async def close(self):
        pass
