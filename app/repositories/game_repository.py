"""
Game repository for MongoDB operations
"""
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from ..core.logging import get_logger
from ..database import GAMES_COLLECTION

logger = get_logger(__name__)


class GameRepository:
    """Repository for game operations"""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[GAMES_COLLECTION]

    async def list_games(self) -> List[Dict[str, Any]]:
        """Get all games in insertion order"""
        cursor = self.collection.find({})
        return await cursor.to_list(length=None)

    async def get_game(self, game_id: ObjectId) -> Optional[Dict[str, Any]]:
        """Get a game by id"""
        return await self.collection.find_one({'_id': game_id})

    async def get_games_by_ids(self, game_ids: Iterable[ObjectId]) -> Dict[ObjectId, Dict[str, Any]]:
        """Get several games with a single $in query, keyed by id"""
        ids = list(set(game_ids))
        if not ids:
            return {}

        cursor = self.collection.find({'_id': {'$in': ids}})
        games = await cursor.to_list(length=None)
        return {game['_id']: game for game in games}

    async def exists(self, game_id: ObjectId) -> bool:
        """Check whether a game exists"""
        game = await self.collection.find_one({'_id': game_id}, {'_id': 1})
        return game is not None

    async def create_game(self, game_data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a new game and return the stored document"""
        now = datetime.now(timezone.utc)
        document = {**game_data, 'createdAt': now, 'updatedAt': now}

        result = await self.collection.insert_one(document)
        document['_id'] = result.inserted_id

        logger.info("game_created", game_id=str(result.inserted_id))
        return document

    async def update_game(self, game_id: ObjectId, update_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Apply a $set of the supplied fields

        Returns:
            The updated document, or None if no game matched
        """
        update = {**update_data, 'updatedAt': datetime.now(timezone.utc)}

        updated = await self.collection.find_one_and_update(
            {'_id': game_id},
            {'$set': update},
            return_document=ReturnDocument.AFTER
        )

        if updated is not None:
            logger.info("game_updated", game_id=str(game_id), fields=sorted(update_data))
        return updated

    async def delete_game(self, game_id: ObjectId) -> bool:
        """Delete a game. Returns True if it existed"""
        result = await self.collection.delete_one({'_id': game_id})

        if result.deleted_count:
            logger.info("game_deleted", game_id=str(game_id))
        return result.deleted_count > 0

    async def get_total_hours_played(self) -> float:
        """Sum hoursPlayed across every game"""
        cursor = self.collection.find({}, {'hoursPlayed': 1})
        games = await cursor.to_list(length=None)
        return sum(game.get('hoursPlayed') or 0 for game in games)
