"""
FastAPI dependencies wiring services to the request's database
"""
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..database import get_database
from ..repositories import GameRepository, ReviewRepository
from ..services import GameService, ReviewService, StatsService


def get_game_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> GameService:
    return GameService(GameRepository(db))


def get_review_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> ReviewService:
    return ReviewService(ReviewRepository(db), GameRepository(db))


def get_stats_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> StatsService:
    return StatsService(ReviewRepository(db), GameRepository(db))
