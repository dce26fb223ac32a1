"""
Orders API Endpoints
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from storefront.dashboard import DashboardService, Order, OrderStatus
from storefront.serving.api.dependencies import get_dashboard_service

router = APIRouter()


class OrderStatusUpdate(BaseModel):
    """Order status change request"""
    status: OrderStatus


class OrderStatusResult(BaseModel):
    """Order status change response"""
    order_id: str
    status: OrderStatus
    updated: bool


@router.get("/recent", response_model=List[Order])
async def list_recent_orders(
    service: DashboardService = Depends(get_dashboard_service),
) -> List[Order]:
    """Newest orders first."""
    return await service.list_recent_orders()


@router.patch("/{order_id}/status", response_model=OrderStatusResult)
async def update_order_status(
    order_id: str,
    body: OrderStatusUpdate,
    service: DashboardService = Depends(get_dashboard_service),
) -> OrderStatusResult:
    """Change an order's status."""
    updated = await service.update_order_status(order_id, body.status)
    if not updated:
        raise HTTPException(status_code=502, detail="Order status update was rejected by the store")

    return OrderStatusResult(order_id=order_id, status=body.status, updated=True)
