"""
Game models for requests, responses and storage
"""
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from ..core.config import settings
from .common import CamelModel, PartialUpdateModel


def _require_title(value: Optional[str]) -> Optional[str]:
    if value is not None:
        value = value.strip()
        if not value:
            raise ValueError("Title is required")
    return value


class GameCreate(CamelModel):
    """Schema for creating a game; omitted fields take the defaults below"""
    title: str = Field(..., description="Game title")
    genre: Optional[str] = None
    platform: Optional[str] = None
    developer: Optional[str] = None
    publisher: Optional[str] = None
    description: Optional[str] = None
    release_date: Optional[datetime] = None
    cover_image_url: Optional[str] = Field(default_factory=lambda: settings.DEFAULT_COVER_IMAGE_URL)
    completed: bool = False
    hours_played: float = Field(default=0, ge=0)
    rating: float = Field(default=0, ge=0, le=5)

    @field_validator("title")
    @classmethod
    def check_title(cls, value):
        return _require_title(value)


class GameUpdate(PartialUpdateModel):
    """Schema for replacing a game (PUT)"""
    NON_NULLABLE = frozenset({"title", "completed", "hours_played", "rating"})

    title: Optional[str] = None
    genre: Optional[str] = None
    platform: Optional[str] = None
    developer: Optional[str] = None
    publisher: Optional[str] = None
    description: Optional[str] = None
    release_date: Optional[datetime] = None
    cover_image_url: Optional[str] = None
    completed: Optional[bool] = None
    hours_played: Optional[float] = Field(default=None, ge=0)
    rating: Optional[float] = Field(default=None, ge=0, le=5)

    @field_validator("title")
    @classmethod
    def check_title(cls, value):
        return _require_title(value)


class GameCompletedUpdate(PartialUpdateModel):
    NON_NULLABLE = frozenset({"completed"})

    completed: Optional[bool] = None


class GameRatingUpdate(PartialUpdateModel):
    NON_NULLABLE = frozenset({"rating"})

    rating: Optional[float] = Field(default=None, ge=0, le=5)


class GameHoursPlayedUpdate(PartialUpdateModel):
    NON_NULLABLE = frozenset({"hours_played"})

    hours_played: Optional[float] = Field(default=None, ge=0)


class GameResponse(CamelModel):
    """Schema for game response"""
    id: str = Field(..., alias="_id")
    title: str
    genre: Optional[str] = None
    platform: Optional[str] = None
    developer: Optional[str] = None
    publisher: Optional[str] = None
    description: Optional[str] = None
    release_date: Optional[datetime] = None
    cover_image_url: Optional[str] = None
    completed: bool = False
    hours_played: float = 0
    rating: float = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
