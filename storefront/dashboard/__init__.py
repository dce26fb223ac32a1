"""
Dashboard Metrics Module
"""
from .models import (
    AnalyticsPoint,
    Customer,
    DashboardSnapshot,
    DashboardStats,
    Embedded,
    Order,
    OrderStatus,
    Product,
    ProductInput,
    Reference,
)
from .service import DashboardService

__all__ = [
    "AnalyticsPoint",
    "Customer",
    "DashboardSnapshot",
    "DashboardStats",
    "Embedded",
    "Order",
    "OrderStatus",
    "Product",
    "ProductInput",
    "Reference",
    "DashboardService",
]
