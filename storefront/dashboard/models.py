"""
Dashboard Records

Typed, presentation-ready records shaped from raw collection documents:

- Order / OrderItem: order with totals in major units
- Product: catalog entry with display-safe defaults
- Customer: customer-role user
- DashboardStats: today vs. yesterday summary
- AnalyticsPoint: daily analytics row
- Reference / Embedded: a field holding either an ID or a sub-document
"""

from datetime import date, datetime
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, computed_field

# Field below is also named "date"
CalendarDate = date


# =============================================================================
# ENUMERATIONS
# =============================================================================

class OrderStatus(str, Enum):
    """Order status enumeration"""
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


class PaymentStatus(str, Enum):
    """Payment status enumeration"""
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"
    PARTIALLY_REFUNDED = "partially_refunded"


# =============================================================================
# REFERENCE-OR-EMBEDDED FIELDS
# =============================================================================

PLACEHOLDER_LABEL = "Customer"


class Reference(BaseModel):
    """A related document known only by its identifier"""
    kind: Literal["reference"] = "reference"
    id: Optional[str] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def display_label(self) -> str:
        return PLACEHOLDER_LABEL


class Embedded(BaseModel):
    """A related document delivered inline, kept exactly as received"""
    kind: Literal["embedded"] = "embedded"
    document: Dict[str, Any]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def display_label(self) -> str:
        for key in ("email", "name", "title"):
            if self.document.get(key):
                return str(self.document[key])
        return PLACEHOLDER_LABEL


Related = Annotated[Union[Reference, Embedded], Field(discriminator="kind")]


# =============================================================================
# RECORDS
# =============================================================================

class OrderItem(BaseModel):
    """Order line item"""
    product: Related
    quantity: int = 0
    price: float = 0.0
    total: float = 0.0


class Order(BaseModel):
    """Order with totals in major units"""
    id: str
    order_number: Optional[str] = None
    customer: Related
    items: Optional[List[OrderItem]] = None
    total: float
    status: OrderStatus
    payment_status: Optional[PaymentStatus] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Product(BaseModel):
    """Catalog product; price in major units"""
    id: str
    name: Optional[str] = None
    sku: Optional[str] = None
    price: float = 0.0
    inventory_count: int = Field(default=0, ge=0)
    is_active: bool = True
    tags: List[str] = Field(default_factory=list)
    category: Optional[Related] = None


class Customer(BaseModel):
    """Customer-role user"""
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[str] = None
    created_at: Optional[datetime] = None


class DashboardStats(BaseModel):
    """Today vs. yesterday summary; change fields are signed percentages"""
    revenue_today: float
    revenue_change: float
    new_orders: int
    orders_change: float
    conversion_rate: float
    conversion_change: float
    active_customers: int
    customers_change: float


class AnalyticsPoint(BaseModel):
    """Daily analytics row, passed through as stored"""
    date: CalendarDate
    revenue: float = 0.0
    orders: int = 0
    visitors: int = 0
    conversion_rate: float = 0.0
    average_order_value: float = 0.0
    new_customers: int = 0
    returning_customers: int = 0


class DashboardSnapshot(BaseModel):
    """Everything the dashboard page renders"""
    stats: DashboardStats
    recent_orders: List[Order]
    products: List[Product]
    customers: List[Customer]


class ProductInput(BaseModel):
    """Product fields accepted on create/update; price in major units"""
    name: Optional[str] = None
    sku: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    inventory_count: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[bool] = None
    tags: Optional[List[str]] = None
    category: Optional[str] = None
