"""API routers"""
from fastapi import APIRouter

from . import games, reviews, stats

router = APIRouter()
# stats first so /api/reviews/stats is not captured as a review id
router.include_router(stats.router)
router.include_router(games.router)
router.include_router(reviews.router)

__all__ = ["router"]
