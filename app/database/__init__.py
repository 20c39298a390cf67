"""Database connection and dependencies"""
from .connection import (
    GAMES_COLLECTION,
    REVIEWS_COLLECTION,
    MongoConnection,
    get_database,
    mongo_connection,
)

__all__ = [
    "GAMES_COLLECTION",
    "REVIEWS_COLLECTION",
    "MongoConnection",
    "get_database",
    "mongo_connection",
]
