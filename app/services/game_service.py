"""
Business logic for games
"""
from typing import Any, Dict, List

from ..core.error_handling import NotFoundError
from ..models.common import PartialUpdateModel, serialize_document
from ..models.game import GameCreate
from ..repositories.game_repository import GameRepository
from .identifiers import parse_object_id

GAME_NOT_FOUND = "Game not found"


class GameService:
    """
    Validates and applies game operations, delegating persistence to
    :class:`~app.repositories.game_repository.GameRepository`.

    Every operation that takes an id parses it first, so a malformed id
    is reported as a validation error before the store is queried.
    """

    def __init__(self, repository: GameRepository):
        self._repo = repository

    async def list_games(self) -> List[Dict[str, Any]]:
        games = await self._repo.list_games()
        return [serialize_document(game) for game in games]

    async def get_game(self, game_id: str) -> Dict[str, Any]:
        game = await self._repo.get_game(parse_object_id(game_id, "game"))
        if game is None:
            raise NotFoundError(GAME_NOT_FOUND)
        return serialize_document(game)

    async def create_game(self, payload: GameCreate) -> Dict[str, Any]:
        game = await self._repo.create_game(payload.model_dump(by_alias=True))
        return serialize_document(game)

    async def update_game(self, game_id: str, payload: PartialUpdateModel) -> Dict[str, Any]:
        """
        Replace the fields the client supplied, keep everything else

        Used by PUT and by the single-field PATCH endpoints; the payload
        model decides which fields are allowed.
        """
        object_id = parse_object_id(game_id, "game")
        fields = payload.to_update_document()

        if not fields:
            game = await self._repo.get_game(object_id)
        else:
            game = await self._repo.update_game(object_id, fields)

        if game is None:
            raise NotFoundError(GAME_NOT_FOUND)
        return serialize_document(game)

    async def delete_game(self, game_id: str) -> Dict[str, str]:
        deleted = await self._repo.delete_game(parse_object_id(game_id, "game"))
        if not deleted:
            raise NotFoundError(GAME_NOT_FOUND)
        # Reviews of the deleted game are kept and fall back to the unknown title
        return {"message": "Game deleted"}
