"""
MongoDB connection for GameTracker API
Owns the single long-lived motor client shared by all requests
"""
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from ..core.config import settings
from ..core.logging import get_logger

logger = get_logger(__name__)

GAMES_COLLECTION = "games"
REVIEWS_COLLECTION = "reviews"


class MongoConnection:
    """MongoDB connection manager"""

    def __init__(self):
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self):
        """Connect to MongoDB and make sure indexes exist"""
        try:
            self.client = AsyncIOMotorClient(settings.MONGODB_URL)
            self.db = self.client[settings.MONGODB_DATABASE]

            # Test connection
            await self.client.admin.command('ping')

            logger.info("mongodb_connected", database=settings.MONGODB_DATABASE)

            await self._create_indexes()

        except Exception as e:
            logger.error("mongodb_connection_failed", error=str(e))
            raise

    async def disconnect(self):
        """Disconnect from MongoDB"""
        if self.client:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("mongodb_disconnected")

    async def ping(self) -> bool:
        """Return True when the server answers a ping"""
        if not self.client:
            return False
        try:
            await self.client.admin.command('ping')
            return True
        except Exception as e:
            logger.warning("mongodb_ping_failed", error=str(e))
            return False

    async def _create_indexes(self):
        # Reviews are grouped and looked up by game reference
        await self.db[REVIEWS_COLLECTION].create_index("game")
        logger.info("mongodb_indexes_created")


mongo_connection = MongoConnection()


def get_database() -> AsyncIOMotorDatabase:
    """
    FastAPI dependency returning the active database

    Usage:
        @router.get("/endpoint")
        async def endpoint(db: AsyncIOMotorDatabase = Depends(get_database)):
            ...
    """
    if mongo_connection.db is None:
        raise RuntimeError("MongoDB connection has not been initialised")
    return mongo_connection.db
