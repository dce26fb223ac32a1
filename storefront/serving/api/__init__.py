"""
API Module
"""
from .dependencies import get_dashboard_service
from .middleware import RequestLoggingMiddleware

__all__ = [
    "get_dashboard_service",
    "RequestLoggingMiddleware",
]
