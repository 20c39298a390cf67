"""
Statistics report models
"""
from typing import Optional

from .common import CamelModel

NO_GENRE = "N/A"


class MostReviewedGame(CamelModel):
    game_id: str
    title: str
    review_count: int
    avg_rating: float


class StatsResponse(CamelModel):
    """Summary of review coverage and play time"""
    total_games_reviewed: int = 0
    total_reviews: int = 0
    avg_rating: Optional[float] = None
    total_hours_played: float = 0
    most_played_genre: str = NO_GENRE
    most_reviewed_game: Optional[MostReviewedGame] = None
