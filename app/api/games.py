"""
Game routes
"""
from typing import List

from fastapi import APIRouter, Depends, status

from ..models import (
    GameCompletedUpdate,
    GameCreate,
    GameHoursPlayedUpdate,
    GameRatingUpdate,
    GameResponse,
    GameUpdate,
    MessageResponse,
)
from ..services import GameService
from .dependencies import get_game_service

router = APIRouter(prefix="/api", tags=["games"])


@router.get("/games", response_model=List[GameResponse])
async def list_games(service: GameService = Depends(get_game_service)):
    """Get all games"""
    return await service.list_games()


@router.post("/games", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
async def create_game(payload: GameCreate, service: GameService = Depends(get_game_service)):
    """Create a new game"""
    return await service.create_game(payload)


@router.get("/games/{game_id}", response_model=GameResponse)
async def get_game(game_id: str, service: GameService = Depends(get_game_service)):
    """Get a game by id"""
    return await service.get_game(game_id)


@router.put("/games/{game_id}", response_model=GameResponse)
async def update_game(game_id: str, payload: GameUpdate, service: GameService = Depends(get_game_service)):
    """Update a game, replacing only the supplied fields"""
    return await service.update_game(game_id, payload)


@router.delete("/games/{game_id}", response_model=MessageResponse)
async def delete_game(game_id: str, service: GameService = Depends(get_game_service)):
    """Delete a game"""
    return await service.delete_game(game_id)


@router.patch("/games/{game_id}/completed", response_model=GameResponse)
async def update_game_completed(
    game_id: str,
    payload: GameCompletedUpdate,
    service: GameService = Depends(get_game_service)
):
    """Set the completed flag; an explicit false is applied"""
    return await service.update_game(game_id, payload)


@router.patch("/games/{game_id}/rating", response_model=GameResponse)
async def update_game_rating(
    game_id: str,
    payload: GameRatingUpdate,
    service: GameService = Depends(get_game_service)
):
    """Set the rating; an explicit 0 is applied"""
    return await service.update_game(game_id, payload)


@router.patch("/games/{game_id}/hoursPlayed", response_model=GameResponse)
async def update_game_hours_played(
    game_id: str,
    payload: GameHoursPlayedUpdate,
    service: GameService = Depends(get_game_service)
):
    """Set hours played"""
    return await service.update_game(game_id, payload)
