"""
Review routes
"""
from typing import List

from fastapi import APIRouter, Depends, status

from ..models import MessageResponse, ReviewCreate, ReviewResponse, ReviewUpdate
from ..services import ReviewService
from .dependencies import get_review_service

router = APIRouter(prefix="/api", tags=["reviews"])


@router.get("/reviews", response_model=List[ReviewResponse])
async def list_reviews(service: ReviewService = Depends(get_review_service)):
    """Get all reviews with their game titles"""
    return await service.list_reviews()


@router.post("/reviews", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
async def create_review(payload: ReviewCreate, service: ReviewService = Depends(get_review_service)):
    """Create a review for an existing game"""
    return await service.create_review(payload)


@router.get("/reviews/{review_id}", response_model=ReviewResponse)
async def get_review(review_id: str, service: ReviewService = Depends(get_review_service)):
    """Get a review by id"""
    return await service.get_review(review_id)


@router.put("/reviews/{review_id}", response_model=ReviewResponse)
async def update_review(
    review_id: str,
    payload: ReviewUpdate,
    service: ReviewService = Depends(get_review_service)
):
    """Update a review; a new game id is checked before it is applied"""
    return await service.update_review(review_id, payload)


@router.delete("/reviews/{review_id}", response_model=MessageResponse)
async def delete_review(review_id: str, service: ReviewService = Depends(get_review_service)):
    """Delete a review"""
    return await service.delete_review(review_id)
