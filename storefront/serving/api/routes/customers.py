"""
Customers API Endpoints
"""

from typing import List

from fastapi import APIRouter, Depends

from storefront.dashboard import Customer, DashboardService
from storefront.serving.api.dependencies import get_dashboard_service

router = APIRouter()


@router.get("", response_model=List[Customer])
async def list_customers(
    service: DashboardService = Depends(get_dashboard_service),
) -> List[Customer]:
    """Newest customers first."""
    return await service.list_customers()
