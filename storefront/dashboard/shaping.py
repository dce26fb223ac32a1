"""
Record Shaping

Maps raw, loosely-typed collection documents onto the typed dashboard
records. Shaping applies the display defaults the dashboard relies on:

- Monetary fields are converted from cents to dollars
- Reference-or-embedded fields resolve to ``Reference`` or ``Embedded``
- Missing tags become an empty list, missing inventory becomes 0
- A missing ``is_active`` flag means active

Documents that cannot be shaped at all (no ID, unknown status, non-numeric
amounts, list fields holding something else) raise ``ValueError`` or
``TypeError``.
"""

from typing import Any, List, Mapping, Optional, Union

from storefront.client import RawDocument
from storefront.dashboard.models import (
    AnalyticsPoint,
    Customer,
    Embedded,
    Order,
    OrderItem,
    Product,
    Reference,
)
from storefront.dashboard.units import minor_amount, to_major_units


def resolve_reference(value: Any) -> Union[Reference, Embedded]:
    """
    Decide whether a related field holds a sub-document or an identifier.

    Mappings are embedded documents; anything else (string, number, None)
    is an opaque identifier.
    """
    if isinstance(value, Mapping):
        return Embedded(document=dict(value))
    return Reference(id=None if value is None else str(value))


def _money(raw: RawDocument, field: str) -> float:
    return to_major_units(minor_amount(raw.get(field)))


def _identifier(raw: RawDocument) -> str:
    value = raw.get("id")
    if value is None or value == "":
        raise ValueError("Document has no id")
    return str(value)


def shape_order_item(raw: RawDocument) -> OrderItem:
    """Shape an order line item"""
    return OrderItem(
        product=resolve_reference(raw.get("product")),
        quantity=raw.get("quantity") or 0,
        price=_money(raw, "price"),
        total=_money(raw, "total"),
    )


def _list_field(raw: RawDocument, field: str) -> Optional[list]:
    value = raw.get(field)
    if value is None:
        return None
    if not isinstance(value, list):
        raise TypeError(f"Expected a list for {field!r}, got {type(value).__name__}")
    return value


def shape_order(raw: RawDocument) -> Order:
    """Shape an order document; the total is returned in dollars"""
    items: Optional[List[OrderItem]] = None
    raw_items = _list_field(raw, "items")
    if raw_items is not None:
        if not all(isinstance(item, Mapping) for item in raw_items):
            raise TypeError("Order items must be documents")
        items = [shape_order_item(item) for item in raw_items]

    return Order(
        id=_identifier(raw),
        order_number=raw.get("order_number"),
        customer=resolve_reference(raw.get("customer")),
        items=items,
        total=_money(raw, "total"),
        status=raw.get("status"),
        payment_status=raw.get("payment_status"),
        created_at=raw.get("created_at"),
        updated_at=raw.get("updated_at"),
    )


def shape_product(raw: RawDocument) -> Product:
    """Shape a product document"""
    category = raw.get("category", raw.get("category_id"))

    return Product(
        id=_identifier(raw),
        name=raw.get("name"),
        sku=raw.get("sku"),
        price=_money(raw, "price"),
        inventory_count=max(raw.get("inventory_count") or 0, 0),
        is_active=raw.get("is_active") is not False,
        tags=list(_list_field(raw, "tags") or []),
        category=None if category is None else resolve_reference(category),
    )


def shape_customer(raw: RawDocument) -> Customer:
    """Shape a customer-role user document"""
    return Customer(
        id=_identifier(raw),
        email=raw.get("email"),
        first_name=raw.get("firstName"),
        last_name=raw.get("lastName"),
        role=raw.get("role"),
        created_at=raw.get("created_at"),
    )


def shape_analytics_point(raw: RawDocument) -> AnalyticsPoint:
    """Pass an analytics row through; stored timestamps are cut to the date"""
    day = raw.get("date")
    if isinstance(day, str):
        day = day[:10]
    return AnalyticsPoint.model_validate({**raw, "date": day})
