"""Statistics API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import CurrentUser, get_stats_service
from src.schemas.stats import StatsResponse
from src.services.stats import StatsService

router = APIRouter(prefix="/api/v1", tags=["stats"])


@router.get("/stats", response_model=StatsResponse)
@router.get("/todos/stats/overview", response_model=StatsResponse)
def get_stats(
    current_user: CurrentUser,
    stats_service: Annotated[StatsService, Depends(get_stats_service)],
):
    """Get completion statistics for the current user."""
    return stats_service.overview(current_user.id)
