"""
Unit Tests - Record Shaping
"""
from datetime import date

import pytest

from storefront.dashboard.models import Embedded, OrderStatus, Reference
from storefront.dashboard.shaping import (
    resolve_reference,
    shape_analytics_point,
    shape_customer,
    shape_order,
    shape_product,
)


class TestResolveReference:
    """Tests for the reference-or-embedded rule"""

    def test_mapping_is_embedded(self):
        doc = {"id": "usr-1", "email": "jane@example.com"}
        resolved = resolve_reference(doc)

        assert isinstance(resolved, Embedded)
        assert resolved.document == doc
        assert resolved.display_label == "jane@example.com"

    @pytest.mark.parametrize("value, expected_id", [("usr-1", "usr-1"), (42, "42"), (None, None)])
    def test_scalar_is_reference(self, value, expected_id):
        resolved = resolve_reference(value)

        assert isinstance(resolved, Reference)
        assert resolved.id == expected_id
        assert resolved.display_label == "Customer"


class TestShapeOrder:
    """Tests for order shaping"""

    def test_total_in_major_units(self):
        order = shape_order({"id": "ord-1", "customer": "usr-1", "total": 45000, "status": "processing"})

        assert order.total == 450.00
        assert order.status == OrderStatus.PROCESSING

    def test_embedded_customer_passes_through(self, sample_order_docs):
        raw = sample_order_docs[0]
        order = shape_order(raw)

        assert isinstance(order.customer, Embedded)
        assert order.customer.document == raw["customer"]

    def test_scalar_customer_gets_placeholder(self, sample_order_docs):
        order = shape_order(sample_order_docs[1])

        assert isinstance(order.customer, Reference)
        assert order.customer.id == "usr-2"
        assert order.customer.display_label == "Customer"

    def test_totals_sum_matches_raw(self, sample_order_docs):
        shaped = sum(shape_order(doc).total for doc in sample_order_docs)
        raw = sum(doc["total"] for doc in sample_order_docs) / 100

        assert shaped == pytest.approx(raw)

    def test_line_items(self):
        order = shape_order({
            "id": "ord-1",
            "customer": "usr-1",
            "total": 5998,
            "status": "pending",
            "items": [{"product": "prod-1", "quantity": 2, "price": 2999, "total": 5998}],
        })

        assert len(order.items) == 1
        assert order.items[0].price == 29.99
        assert order.items[0].total == 59.98
        assert isinstance(order.items[0].product, Reference)

    @pytest.mark.parametrize("items", [["prod-1"], {"product": "prod-1"}, "prod-1"])
    def test_malformed_line_items_rejected(self, items):
        with pytest.raises(TypeError):
            shape_order({"id": "ord-1", "total": 100, "status": "pending", "items": items})

    def test_missing_total_is_zero(self):
        order = shape_order({"id": "ord-1", "status": "pending"})
        assert order.total == 0

    def test_unknown_status_rejected(self):
        with pytest.raises(ValueError):
            shape_order({"id": "ord-1", "total": 100, "status": "lost"})

    def test_missing_id_rejected(self):
        with pytest.raises(ValueError):
            shape_order({"total": 100, "status": "pending"})


class TestShapeProduct:
    """Tests for product shaping"""

    def test_full_product(self, sample_product_docs):
        product = shape_product(sample_product_docs[0])

        assert product.price == 29.99
        assert product.inventory_count == 100
        assert product.tags == ["electronics"]
        assert isinstance(product.category, Reference)
        assert product.category.id == "cat-1"

    def test_defaults_for_missing_fields(self, sample_product_docs):
        product = shape_product(sample_product_docs[1])

        assert product.inventory_count == 0
        assert product.tags == []
        assert product.is_active is True
        assert product.category is None

    def test_explicitly_inactive(self):
        product = shape_product({"id": "p", "price": 100, "is_active": False})
        assert product.is_active is False

    def test_null_is_active_counts_as_active(self):
        product = shape_product({"id": "p", "price": 100, "is_active": None})
        assert product.is_active is True

    def test_scalar_tags_rejected(self):
        with pytest.raises(TypeError):
            shape_product({"id": "p", "price": 100, "tags": "Audio"})

    def test_embedded_category(self):
        category = {"id": "cat-1", "name": "Audio"}
        product = shape_product({"id": "p", "price": 100, "category": category})

        assert isinstance(product.category, Embedded)
        assert product.category.display_label == "Audio"


class TestShapeCustomer:
    """Tests for customer shaping"""

    def test_names_mapped(self, sample_user_docs):
        customer = shape_customer(sample_user_docs[0])

        assert customer.first_name == "Jane"
        assert customer.last_name == "Smith"
        assert customer.role == "customer"

    def test_optional_names(self, sample_user_docs):
        customer = shape_customer(sample_user_docs[1])

        assert customer.first_name is None
        assert customer.email == "bob@example.com"


class TestShapeAnalyticsPoint:
    """Tests for analytics pass-through"""

    def test_timestamp_cut_to_date(self):
        point = shape_analytics_point({
            "id": "a-1",
            "date": "2024-03-10T00:00:00.000Z",
            "revenue": 1250.5,
            "orders": 12,
            "visitors": 300,
            "conversion_rate": 4.0,
            "average_order_value": 104.2,
            "new_customers": 5,
            "returning_customers": 7,
        })

        assert point.date == date(2024, 3, 10)
        assert point.orders == 12
        assert point.revenue == 1250.5
