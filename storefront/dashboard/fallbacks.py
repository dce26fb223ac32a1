"""
Fallback Policy

Dashboard reads never fail: when the collection store is unreachable or
returns something unusable, the read logs the failure and serves a fixed
substitute of the same shape. Substitutes are rebuilt on every call so
callers can never mutate a shared copy.

Writes are not covered here; a faked mutation would lie to the caller.
"""

import functools
from typing import Awaitable, Callable, List, TypeVar

import structlog

from storefront.client import CollectionClientError
from storefront.dashboard.models import (
    AnalyticsPoint,
    Customer,
    DashboardStats,
    Embedded,
    Order,
    OrderStatus,
    Product,
)

logger = structlog.get_logger(__name__)

T = TypeVar("T")

# Store failures plus documents the shaper could not map
READ_FAILURES = (CollectionClientError, ValueError, TypeError)


def fallback_stats() -> DashboardStats:
    return DashboardStats(
        revenue_today=24580,
        revenue_change=5.2,
        new_orders=345,
        orders_change=15,
        conversion_rate=4.8,
        conversion_change=-0.2,
        active_customers=1200,
        customers_change=8,
    )


def _order(order_id: str, number: str, customer: str, total: float, status: OrderStatus, at: str) -> Order:
    return Order(
        id=order_id,
        order_number=number,
        customer=Embedded(document={"email": customer}),
        total=total,
        status=status,
        created_at=at,
        updated_at=at,
    )


def fallback_orders() -> List[Order]:
    return [
        _order("1", "#ORD-1234", "A. Johnson", 450.00, OrderStatus.PROCESSING, "2024-01-01T13:02:00Z"),
        _order("2", "#ORD-1235", "B. Smith", 89.99, OrderStatus.SHIPPED, "2024-01-01T12:45:00Z"),
        _order("3", "#ORD-1236", "C. Williams", 12.50, OrderStatus.DELIVERED, "2024-01-01T11:14:00Z"),
        _order("4", "#ORD-1237", "D. Jones", 600.00, OrderStatus.PENDING, "2024-01-01T09:30:00Z"),
    ]


def fallback_products() -> List[Product]:
    return [
        Product(id="1", name="Premium Wireless Headphones", sku="HP-001", price=249.99,
                inventory_count=45, is_active=True, tags=["Audio", "Wireless"]),
        Product(id="2", name="Smart Fitness Watch X", sku="SW-005", price=199.00,
                inventory_count=12, is_active=True, tags=["Fitness", "Smartwatch"]),
        Product(id="3", name="Portable Bluetooth Speaker", sku="BS-010", price=75.00,
                inventory_count=30, is_active=True, tags=["Audio", "Portable"]),
        Product(id="4", name="USB-C Fast Charger", sku="CH-003", price=29.99,
                inventory_count=0, is_active=False, tags=["Needs AI Review"]),
    ]


def fallback_customers() -> List[Customer]:
    return []


def fallback_analytics() -> List[AnalyticsPoint]:
    return []


def with_fallback(
    substitute: Callable[[], T],
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Wrap an async read so read failures yield ``substitute()``.

    Example:
        @with_fallback(fallback_products)
        async def list_products(self) -> List[Product]:
            ...
    """
    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except READ_FAILURES as e:
                logger.error(
                    "Dashboard read failed, serving fallback",
                    operation=func.__name__,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return substitute()
        return wrapper
    return decorator
