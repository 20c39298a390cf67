"""
Statistics report over games and reviews
Computed fresh on every request from two collection scans
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from bson import ObjectId

from ..core.logging import get_logger
from ..models.stats import NO_GENRE, MostReviewedGame, StatsResponse
from ..repositories.game_repository import GameRepository
from ..repositories.review_repository import ReviewRepository

logger = get_logger(__name__)


@dataclass
class GameReviewSummary:
    """Per-game review tally"""
    game_id: Any
    review_count: int = 0
    rating_total: float = 0

    @property
    def avg_rating(self) -> float:
        return round(self.rating_total / self.review_count, 1)


def summarize_reviews_by_game(reviews: List[Dict[str, Any]]) -> List[GameReviewSummary]:
    """
    Group reviews by game reference

    Returns:
        One summary per referenced game, ordered by review count descending.
        Games with equal counts keep the order in which their first review
        was encountered.
    """
    summaries: Dict[Any, GameReviewSummary] = {}
    for review in reviews:
        game_id = review.get('game')
        summary = summaries.get(game_id)
        if summary is None:
            summary = summaries[game_id] = GameReviewSummary(game_id=game_id)
        summary.review_count += 1
        summary.rating_total += review.get('rating') or 0

    return sorted(summaries.values(), key=lambda s: s.review_count, reverse=True)


def average_rating(reviews: List[Dict[str, Any]]) -> Optional[float]:
    """Mean review rating rounded to one decimal, None without reviews"""
    if not reviews:
        return None
    total = sum(review.get('rating') or 0 for review in reviews)
    return round(total / len(reviews), 1)


class StatsService:
    """Builds the statistics report"""

    def __init__(self, review_repository: ReviewRepository, game_repository: GameRepository):
        self._reviews = review_repository
        self._games = game_repository

    async def build_report(self) -> StatsResponse:
        reviews = await self._reviews.get_rating_projection()
        summaries = summarize_reviews_by_game(reviews)

        games = await self._games.get_games_by_ids(
            s.game_id for s in summaries if isinstance(s.game_id, ObjectId)
        )

        most_played_genre = NO_GENRE
        most_reviewed_game = None
        # Reviews of deleted games are skipped, like an inner join
        for summary in summaries:
            game = games.get(summary.game_id)
            if game is None:
                continue
            most_played_genre = game.get('genre') or NO_GENRE
            most_reviewed_game = MostReviewedGame(
                game_id=str(summary.game_id),
                title=game.get('title', ''),
                review_count=summary.review_count,
                avg_rating=summary.avg_rating,
            )
            break

        total_hours_played = await self._games.get_total_hours_played()

        report = StatsResponse(
            total_games_reviewed=len(summaries),
            total_reviews=len(reviews),
            avg_rating=average_rating(reviews),
            total_hours_played=total_hours_played,
            most_played_genre=most_played_genre,
            most_reviewed_game=most_reviewed_game,
        )

        logger.debug("stats_computed", total_reviews=report.total_reviews)
        return report
