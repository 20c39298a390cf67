"""
Business logic for reviews
"""
from typing import Any, Dict, List

from bson import ObjectId

from ..core.error_handling import NotFoundError
from ..core.logging import get_logger
from ..models.common import serialize_document
from ..models.review import UNKNOWN_GAME_TITLE, ReviewCreate, ReviewUpdate
from ..repositories.game_repository import GameRepository
from ..repositories.review_repository import ReviewRepository
from .identifiers import parse_object_id

logger = get_logger(__name__)

REVIEW_NOT_FOUND = "Review not found"
REVIEWED_GAME_NOT_FOUND = "Game not found for this review"


class ReviewService:
    """
    Validates review payloads and keeps them pointing at real games.

    Rules
    -----
    * ``game`` must be a well-formed id of an existing game when a review
      is created, and again whenever an update re-points it.
    * Every review returned carries ``gameTitle``; a game that has since
      been deleted yields ``"Unknown Game"`` instead of an error.
    """

    def __init__(self, repository: ReviewRepository, game_repository: GameRepository):
        self._repo = repository
        self._games = game_repository

    async def _resolve_game(self, game_id: Any) -> ObjectId:
        object_id = parse_object_id(game_id, "game")
        if not await self._games.exists(object_id):
            raise NotFoundError(REVIEWED_GAME_NOT_FOUND)
        return object_id

    async def _enrich(self, reviews: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Attach gameTitle to each review using one lookup for all games"""
        game_ids = [review.get('game') for review in reviews if isinstance(review.get('game'), ObjectId)]

        try:
            games = await self._games.get_games_by_ids(game_ids)
        except Exception as e:
            logger.warning("game_title_lookup_failed", error=str(e))
            games = {}

        enriched = []
        for review in reviews:
            game = games.get(review.get('game'))
            document = serialize_document(review)
            document['gameTitle'] = game.get('title', UNKNOWN_GAME_TITLE) if game else UNKNOWN_GAME_TITLE
            enriched.append(document)
        return enriched

    async def list_reviews(self) -> List[Dict[str, Any]]:
        reviews = await self._repo.list_reviews()
        return await self._enrich(reviews)

    async def get_review(self, review_id: str) -> Dict[str, Any]:
        review = await self._repo.get_review(parse_object_id(review_id, "review"))
        if review is None:
            raise NotFoundError(REVIEW_NOT_FOUND)
        return (await self._enrich([review]))[0]

    async def create_review(self, payload: ReviewCreate) -> Dict[str, Any]:
        game_id = await self._resolve_game(payload.game)

        review_data = payload.model_dump(by_alias=True)
        review_data['game'] = game_id

        review = await self._repo.create_review(review_data)
        return (await self._enrich([review]))[0]

    async def update_review(self, review_id: str, payload: ReviewUpdate) -> Dict[str, Any]:
        object_id = parse_object_id(review_id, "review")

        existing = await self._repo.get_review(object_id)
        if existing is None:
            raise NotFoundError(REVIEW_NOT_FOUND)

        fields = payload.to_update_document()
        if 'game' in fields:
            fields['game'] = await self._resolve_game(fields['game'])

        review = await self._repo.update_review(object_id, fields) if fields else existing
        if review is None:
            raise NotFoundError(REVIEW_NOT_FOUND)
        return (await self._enrich([review]))[0]

    async def delete_review(self, review_id: str) -> Dict[str, str]:
        object_id = parse_object_id(review_id, "review")

        if await self._repo.get_review(object_id) is None:
            raise NotFoundError(REVIEW_NOT_FOUND)

        await self._repo.delete_review(object_id)
        return {"message": "Review deleted"}
