"""Business logic between the routes and the repositories"""
from .game_service import GameService
from .review_service import ReviewService
from .stats_service import StatsService

__all__ = [
    'GameService',
    'ReviewService',
    'StatsService',
]
