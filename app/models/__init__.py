"""Request, response and report models"""
from .common import MessageResponse
from .game import (
    GameCreate,
    GameUpdate,
    GameCompletedUpdate,
    GameRatingUpdate,
    GameHoursPlayedUpdate,
    GameResponse,
)
from .review import ReviewCreate, ReviewUpdate, ReviewResponse
from .stats import MostReviewedGame, StatsResponse

__all__ = [
    "MessageResponse",
    "GameCreate",
    "GameUpdate",
    "GameCompletedUpdate",
    "GameRatingUpdate",
    "GameHoursPlayedUpdate",
    "GameResponse",
    "ReviewCreate",
    "ReviewUpdate",
    "ReviewResponse",
    "MostReviewedGame",
    "StatsResponse",
]
