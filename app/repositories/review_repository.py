"""
Review repository for MongoDB operations
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from ..core.logging import get_logger
from ..database import REVIEWS_COLLECTION

logger = get_logger(__name__)


class ReviewRepository:
    """Repository for review operations"""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[REVIEWS_COLLECTION]

    async def list_reviews(self) -> List[Dict[str, Any]]:
        """Get all reviews in insertion order"""
        cursor = self.collection.find({})
        return await cursor.to_list(length=None)

    async def get_review(self, review_id: ObjectId) -> Optional[Dict[str, Any]]:
        """Get a review by id"""
        return await self.collection.find_one({'_id': review_id})

    async def create_review(self, review_data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a new review and return the stored document"""
        now = datetime.now(timezone.utc)
        document = {**review_data, 'createdAt': now, 'updatedAt': now}

        result = await self.collection.insert_one(document)
        document['_id'] = result.inserted_id

        logger.info("review_created", review_id=str(result.inserted_id), game_id=str(document.get('game')))
        return document

    async def update_review(self, review_id: ObjectId, update_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Apply a $set of the supplied fields and return the updated document"""
        update = {**update_data, 'updatedAt': datetime.now(timezone.utc)}

        updated = await self.collection.find_one_and_update(
            {'_id': review_id},
            {'$set': update},
            return_document=ReturnDocument.AFTER
        )

        if updated is not None:
            logger.info("review_updated", review_id=str(review_id), fields=sorted(update_data))
        return updated

    async def delete_review(self, review_id: ObjectId) -> bool:
        """Delete a review. Returns True if it existed"""
        result = await self.collection.delete_one({'_id': review_id})

        if result.deleted_count:
            logger.info("review_deleted", review_id=str(review_id))
        return result.deleted_count > 0

    async def get_rating_projection(self) -> List[Dict[str, Any]]:
        """Get the game reference and rating of every review, in natural order"""
        cursor = self.collection.find({}, {'game': 1, 'rating': 1})
        return await cursor.to_list(length=None)
