"""
Dashboard API Endpoints

Summary metrics for the operator dashboard.
"""

from fastapi import APIRouter, Depends

from storefront.dashboard import DashboardService, DashboardSnapshot, DashboardStats
from storefront.serving.api.dependencies import get_dashboard_service

router = APIRouter()


@router.get("", response_model=DashboardSnapshot)
async def get_dashboard(
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardSnapshot:
    """
    Everything the dashboard page renders: stats, recent orders, products
    and customers. Sections that could not be read are filled with
    placeholder data.
    """
    return await service.load_dashboard()


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardStats:
    """Today's revenue and orders compared with yesterday."""
    return await service.compute_dashboard_stats()
