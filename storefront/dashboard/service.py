"""
Dashboard Service

Read and write operations backing the storefront dashboard:

Reads (fallback-safe, never raise collection store failures):
- compute_dashboard_stats: today vs. yesterday revenue and order metrics
- list_recent_orders / list_products / list_customers / list_analytics
- load_dashboard: all dashboard reads at once

Writes (failures are reported to the caller):
- update_order_status / delete_product: return False on failure
- create_product / update_product: raise CollectionWriteError on failure
"""

import asyncio
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import structlog

from storefront.client import (
    CollectionClient,
    CollectionClientError,
    MalformedResponseError,
    RawDocument,
)
from storefront.config import PayloadSettings
from storefront.dashboard.fallbacks import (
    fallback_analytics,
    fallback_customers,
    fallback_orders,
    fallback_products,
    fallback_stats,
    with_fallback,
)
from storefront.dashboard.models import (
    AnalyticsPoint,
    Customer,
    DashboardSnapshot,
    DashboardStats,
    Order,
    OrderStatus,
    Product,
    ProductInput,
)
from storefront.dashboard.shaping import (
    shape_analytics_point,
    shape_customer,
    shape_order,
    shape_product,
)
from storefront.dashboard.units import minor_amount, to_major_units, to_minor_units
from storefront.dashboard.windows import compare_windows, trailing_days

logger = structlog.get_logger(__name__)

ORDERS = "orders"
PRODUCTS = "products"
USERS = "users"
ANALYTICS = "analytics"

NEWEST_FIRST = "-created_at"
CUSTOMER_ROLE = {"role": {"equals": "customer"}}

# No visitor tracking or user-growth source exists yet. These are fixed
# values, not computed metrics.
CONVERSION_RATE_NOT_COMPUTED = 4.8
CONVERSION_CHANGE_NOT_COMPUTED = -0.2
CUSTOMERS_CHANGE_NOT_COMPUTED = 8.0


def percent_change(current: Union[int, float], prior: Union[int, float]) -> float:
    """Signed percentage change; 0 when there is no prior value to compare against"""
    if prior <= 0:
        return 0.0
    return (current - prior) / prior * 100


def sum_minor_totals(orders: Sequence[RawDocument]) -> int:
    """Sum raw order totals in cents"""
    return sum(minor_amount(order.get("total")) for order in orders)


def summarize(
    current_orders: Sequence[RawDocument],
    prior_orders: Sequence[RawDocument],
    customers: Sequence[RawDocument],
) -> DashboardStats:
    """Reduce the two order windows and the customer list into dashboard stats"""
    current_revenue = sum_minor_totals(current_orders)
    prior_revenue = sum_minor_totals(prior_orders)

    return DashboardStats(
        revenue_today=to_major_units(current_revenue),
        revenue_change=percent_change(current_revenue, prior_revenue),
        new_orders=len(current_orders),
        orders_change=percent_change(len(current_orders), len(prior_orders)),
        conversion_rate=CONVERSION_RATE_NOT_COMPUTED,
        conversion_change=CONVERSION_CHANGE_NOT_COMPUTED,
        active_customers=len(customers),
        customers_change=CUSTOMERS_CHANGE_NOT_COMPUTED,
    )


def product_payload(data: Union[ProductInput, Mapping[str, Any]], creating: bool) -> Dict[str, Any]:
    """
    Build the store payload for a product write.

    Prices go out in cents. A create always sends a price (0 when absent);
    an update only sends one when it was supplied.
    """
    if not isinstance(data, ProductInput):
        data = ProductInput.model_validate(data)

    payload = data.model_dump(exclude_none=True)
    if creating or data.price is not None:
        payload["price"] = to_minor_units(data.price)
    return payload


def _shape_stored_product(doc: RawDocument) -> Product:
    try:
        return shape_product(doc)
    except (ValueError, TypeError) as e:
        raise MalformedResponseError(f"Stored product is unreadable: {e}", collection=PRODUCTS) from e


class DashboardService:
    """
    Dashboard operations over a collection client.

    Example:
        service = DashboardService(client, settings.payload)
        stats = await service.compute_dashboard_stats()
    """

    def __init__(self, client: CollectionClient, payload: PayloadSettings):
        self.client = client
        self.recent_orders_limit = payload.recent_orders_limit
        self.list_page_size = payload.list_page_size
        self.stats_page_size = payload.stats_page_size

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @with_fallback(fallback_stats)
    async def compute_dashboard_stats(self, now: Optional[datetime] = None) -> DashboardStats:
        """
        Today's revenue and orders against yesterday's.

        The three queries run concurrently; if any one fails the whole
        result is replaced by the fallback stats.
        """
        current, prior = compare_windows(now)
        logger.debug(
            "Computing dashboard stats",
            today_start=current.start.isoformat(),
            yesterday_start=prior.start.isoformat(),
        )

        try:
            async with asyncio.TaskGroup() as tg:
                current_task = tg.create_task(
                    self.client.list_documents(ORDERS, where=current.predicate(), limit=self.stats_page_size)
                )
                prior_task = tg.create_task(
                    self.client.list_documents(ORDERS, where=prior.predicate(), limit=self.stats_page_size)
                )
                customers_task = tg.create_task(
                    self.client.list_documents(USERS, where=CUSTOMER_ROLE, limit=self.stats_page_size)
                )
        except ExceptionGroup as eg:
            raise eg.exceptions[0]

        stats = summarize(current_task.result(), prior_task.result(), customers_task.result())
        logger.info(
            "Dashboard stats computed",
            revenue_today=stats.revenue_today,
            new_orders=stats.new_orders,
            active_customers=stats.active_customers,
        )
        return stats

    @with_fallback(fallback_orders)
    async def list_recent_orders(self) -> List[Order]:
        """Newest orders first"""
        docs = await self.client.list_documents(ORDERS, limit=self.recent_orders_limit, sort=NEWEST_FIRST)
        return [shape_order(doc) for doc in docs]

    @with_fallback(fallback_products)
    async def list_products(self) -> List[Product]:
        """Newest products first"""
        docs = await self.client.list_documents(PRODUCTS, limit=self.list_page_size, sort=NEWEST_FIRST)
        return [shape_product(doc) for doc in docs]

    @with_fallback(fallback_customers)
    async def list_customers(self) -> List[Customer]:
        """Newest customer-role users first"""
        docs = await self.client.list_documents(
            USERS, where=CUSTOMER_ROLE, limit=self.list_page_size, sort=NEWEST_FIRST
        )
        return [shape_customer(doc) for doc in docs]

    @with_fallback(fallback_analytics)
    async def list_analytics(self, days: int = 30, now: Optional[datetime] = None) -> List[AnalyticsPoint]:
        """Daily analytics rows for the trailing ``days`` days, oldest first"""
        start, end = trailing_days(days, now)
        docs = await self.client.list_documents(
            ANALYTICS,
            where={"date": {"gte": start.isoformat(), "lte": end.isoformat()}},
            sort="date",
        )
        return [shape_analytics_point(doc) for doc in docs]

    async def load_dashboard(self, now: Optional[datetime] = None) -> DashboardSnapshot:
        """Run every dashboard read concurrently"""
        async with asyncio.TaskGroup() as tg:
            stats = tg.create_task(self.compute_dashboard_stats(now))
            orders = tg.create_task(self.list_recent_orders())
            products = tg.create_task(self.list_products())
            customers = tg.create_task(self.list_customers())

        return DashboardSnapshot(
            stats=stats.result(),
            recent_orders=orders.result(),
            products=products.result(),
            customers=customers.result(),
        )

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    async def update_order_status(self, order_id: str, status: Union[OrderStatus, str]) -> bool:
        """
        Set an order's status.

        Raises:
            ValueError: ``status`` is not a known order status

        Returns:
            True if the store accepted the change, False otherwise
        """
        status = OrderStatus(status)
        try:
            await self.client.update_document(ORDERS, order_id, {"status": status.value})
        except CollectionClientError as e:
            logger.error("Error updating order status", order_id=order_id, status=status.value, error=str(e))
            return False

        logger.info("Order status updated", order_id=order_id, status=status.value)
        return True

    async def create_product(self, data: Union[ProductInput, Mapping[str, Any]]) -> Product:
        """
        Create a product; ``data.price`` is in dollars.

        Raises:
            CollectionWriteError: the store rejected the product
            MalformedResponseError: the stored product could not be read back
        """
        try:
            doc = await self.client.create_document(PRODUCTS, product_payload(data, creating=True))
        except CollectionClientError as e:
            logger.error("Error creating product", error=str(e), error_type=type(e).__name__)
            raise

        product = _shape_stored_product(doc)
        logger.info("Product created", product_id=product.id)
        return product

    async def update_product(self, product_id: str, data: Union[ProductInput, Mapping[str, Any]]) -> Product:
        """
        Patch a product; ``data.price`` is in dollars when given.

        Raises:
            CollectionWriteError: the store rejected the change
            MalformedResponseError: the stored product could not be read back
        """
        try:
            doc = await self.client.update_document(PRODUCTS, product_id, product_payload(data, creating=False))
        except CollectionClientError as e:
            logger.error("Error updating product", product_id=product_id, error=str(e))
            raise

        logger.info("Product updated", product_id=product_id)
        return _shape_stored_product(doc)

    async def delete_product(self, product_id: str) -> bool:
        """Delete a product; False if the store refused"""
        try:
            await self.client.delete_document(PRODUCTS, product_id)
        except CollectionClientError as e:
            logger.error("Error deleting product", product_id=product_id, error=str(e))
            return False

        logger.info("Product deleted", product_id=product_id)
        return True
