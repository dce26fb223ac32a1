"""
Analytics API Endpoints
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from storefront.dashboard import AnalyticsPoint, DashboardService
from storefront.serving.api.dependencies import get_dashboard_service

router = APIRouter()


@router.get("", response_model=List[AnalyticsPoint])
async def list_analytics(
    days: int = Query(30, ge=1, le=365),
    service: DashboardService = Depends(get_dashboard_service),
) -> List[AnalyticsPoint]:
    """
    Daily analytics for the trailing ``days`` days, oldest first.
    """
    return await service.list_analytics(days=days)
