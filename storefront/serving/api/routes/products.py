"""
Products API Endpoints

Product catalog listing and management. Prices are in dollars.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from storefront.client import CollectionClientError
from storefront.dashboard import DashboardService, Product, ProductInput
from storefront.serving.api.dependencies import get_dashboard_service

router = APIRouter()


@router.get("", response_model=List[Product])
async def list_products(
    service: DashboardService = Depends(get_dashboard_service),
) -> List[Product]:
    """Newest products first."""
    return await service.list_products()


@router.post("", response_model=Product, status_code=201)
async def create_product(
    body: ProductInput,
    service: DashboardService = Depends(get_dashboard_service),
) -> Product:
    """Create a product."""
    try:
        return await service.create_product(body)
    except CollectionClientError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.patch("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    body: ProductInput,
    service: DashboardService = Depends(get_dashboard_service),
) -> Product:
    """Update the supplied product fields."""
    try:
        return await service.update_product(product_id, body)
    except CollectionClientError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.delete("/{product_id}", status_code=204)
async def delete_product(
    product_id: str,
    service: DashboardService = Depends(get_dashboard_service),
) -> Response:
    """Delete a product."""
    if not await service.delete_product(product_id):
        raise HTTPException(status_code=502, detail="Product deletion was rejected by the store")
    return Response(status_code=204)
