from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError
from db.repository import Collection, Store
from settings.config import settings
from utils.logger import get_logger

logger = get_logger("DB_OPERATION")


def serialize_doc(doc):
    if not doc:
        return None
    doc["id"] = doc.pop("_id")
    return doc


class MongoCollection(Collection):
    """
    Collection backed by a Mongo collection. Documents use integer _id values
    drawn from the shared counters collection so ids look the same as the
    in-memory backend.
    """

    def __init__(self, db, name: str):
        super().__init__(name)
        self.collection = db[name]
        self.counters = db["counters"]

    async def _next_id(self) -> int:
        counter = await self.counters.find_one_and_update(
            {"_id": self.name},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER
        )
        return int(counter["seq"])

    async def insert(self, doc):
        doc_id = await self._next_id()
        to_insert = {k: v for k, v in doc.items() if k != "id"}
        to_insert["_id"] = doc_id
        try:
            await self.collection.insert_one(to_insert)
        except PyMongoError:
            logger.exception(f"DB error inserting into {self.name}")
            raise
        return serialize_doc(to_insert)

    async def get(self, doc_id):
        return serialize_doc(await self.collection.find_one({"_id": doc_id}))

    async def find(self, **equals):
        cursor = self.collection.find(equals).sort("_id", 1)
        docs = await cursor.to_list(length=None)
        return [serialize_doc(d) for d in docs]

    async def replace(self, doc_id, doc):
        body = {k: v for k, v in doc.items() if k != "id"}
        result = await self.collection.find_one_and_replace(
            {"_id": doc_id}, body, return_document=ReturnDocument.AFTER
        )
        return serialize_doc(result)

    async def update(self, doc_id, changes):
        body = {k: v for k, v in changes.items() if k != "id"}
        result = await self.collection.find_one_and_update(
            {"_id": doc_id}, {"$set": body}, return_document=ReturnDocument.AFTER
        )
        return serialize_doc(result)

    async def delete(self, doc_id):
        result = await self.collection.delete_one({"_id": doc_id})
        return result.deleted_count > 0

    async def count(self):
        return await self.collection.count_documents({})


class MongoConnection:
    def __init__(self, mongo_uri: str, db_name: str):
        logger.info("Initializing MongoDB Connection")
        self.client = AsyncIOMotorClient(mongo_uri, tz_aware=True)
        self.db = self.client[db_name]
        self.db_name = db_name

    async def connect(self):
        try:
            # Force an actual connection & authentication check
            await self.db.command("ping")
            logger.info("Successfully connected to MongoDB and authenticated.")
            logger.info(f"Using Database: {self.db_name}")
        except Exception as e:
            logger.error(f"Could not connect to MongoDB: {e}")
            raise e

    async def create_indexes(self):
        await self.db["reviews"].create_index("restaurant_id")
        await self.db["reservations"].create_index([("restaurant_id", 1), ("date", 1)])
        await self.db["gift_cards"].create_index("code", unique=True)
        await self.db["admins"].create_index("username", unique=True)
        logger.info("Indexes created")

    def close(self):
        self.client.close()


class MongoStore(Store):
    def __init__(self, conn: MongoConnection):
        super().__init__(
            restaurants=MongoCollection(conn.db, "restaurants"),
            reviews=MongoCollection(conn.db, "reviews"),
            reservations=MongoCollection(conn.db, "reservations"),
            gift_cards=MongoCollection(conn.db, "gift_cards"),
            admins=MongoCollection(conn.db, "admins"),
        )
        self.conn = conn

    async def close(self):
        self.conn.close()


async def build_mongo_store() -> MongoStore:
    if not settings.MONGO_URI or not settings.DB_NAME:
        raise RuntimeError("MONGO_URI and DB_NAME must be set for the mongo storage backend")
    conn = MongoConnection(settings.MONGO_URI, settings.DB_NAME)
    await conn.connect()
    await conn.create_indexes()
    return MongoStore(conn)
