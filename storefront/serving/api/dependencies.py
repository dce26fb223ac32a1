"""
API Dependencies
"""

from fastapi import Request

from storefront.dashboard import DashboardService


def get_dashboard_service(request: Request) -> DashboardService:
    """Dashboard service created during application startup"""
    return request.app.state.dashboard_service
