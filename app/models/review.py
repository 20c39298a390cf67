"""
Review models for requests, responses and storage
"""
from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, Field, field_validator

from .common import CamelModel, PartialUpdateModel

DEFAULT_AUTHOR = "Anonymous"
UNKNOWN_GAME_TITLE = "Unknown Game"


def _require_comment(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError("Comment is required")
    return value


def _default_author(value: Optional[str]) -> str:
    if value is None or not value.strip():
        return DEFAULT_AUTHOR
    return value.strip()


class ReviewCreate(CamelModel):
    """Schema for creating a review"""
    game: str = Field(..., description="Id of the reviewed game")
    author: Optional[str] = DEFAULT_AUTHOR
    rating: float = Field(..., ge=1, le=5)
    comment: str = Field(..., validation_alias=AliasChoices("comment", "content"))

    @field_validator("comment")
    @classmethod
    def check_comment(cls, value):
        return _require_comment(value)

    @field_validator("author")
    @classmethod
    def default_author(cls, value):
        return _default_author(value)


class ReviewUpdate(PartialUpdateModel):
    """Schema for updating a review; game may be re-pointed"""
    NON_NULLABLE = frozenset({"game", "rating", "comment"})

    game: Optional[str] = None
    author: Optional[str] = None
    rating: Optional[float] = Field(default=None, ge=1, le=5)
    comment: Optional[str] = Field(default=None, validation_alias=AliasChoices("comment", "content"))

    @field_validator("comment")
    @classmethod
    def check_comment(cls, value):
        return _require_comment(value)

    @field_validator("author")
    @classmethod
    def default_author(cls, value):
        return _default_author(value)


class ReviewResponse(CamelModel):
    """Schema for review response, enriched with the game title"""
    id: str = Field(..., alias="_id")
    game: str
    game_title: str = UNKNOWN_GAME_TITLE
    author: str = DEFAULT_AUTHOR
    rating: float
    comment: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
