"""
Statistics routes
"""
from fastapi import APIRouter, Depends

from ..models import StatsResponse
from ..services import StatsService
from .dependencies import get_stats_service

router = APIRouter(prefix="/api", tags=["stats"])


@router.get("/stats", response_model=StatsResponse)
async def get_stats(service: StatsService = Depends(get_stats_service)):
    """Global game and review statistics"""
    return await service.build_report()


# Must be registered ahead of /reviews/{review_id}
@router.get("/reviews/stats", response_model=StatsResponse, include_in_schema=False)
async def get_review_stats(service: StatsService = Depends(get_stats_service)):
    return await service.build_report()
