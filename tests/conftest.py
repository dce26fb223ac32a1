"""
Test Suite Configuration
"""
import json
from typing import Any, AsyncIterator, Dict, List, Optional, Tuple

import httpx
import pytest
import pytest_asyncio

from storefront.client import CollectionClient
from storefront.config import PayloadSettings, Settings
from storefront.dashboard import DashboardService

STORE_URL = "http://store.test/api"


class FakeStore:
    """
    In-memory stand-in for the collection store.

    Routes are keyed by method and path (relative to the API root). A route
    is either a JSON body, an ``httpx.Response``, an exception to raise, or
    a callable taking the request.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Any] = {}
        self.requests: List[httpx.Request] = []

    def on(self, method: str, path: str, reply: Any) -> None:
        self.routes[(method.upper(), path)] = reply

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")
        reply = self.routes.get((request.method, path))

        if reply is None:
            return httpx.Response(404, json={"errors": [{"message": "Not Found"}]})
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(request)
        if isinstance(reply, httpx.Response):
            return reply
        return httpx.Response(200, json=reply)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def sent(self, method: str, path: str) -> List[httpx.Request]:
        return [
            r for r in self.requests
            if r.method == method and r.url.path.removeprefix("/api") == path
        ]

    @staticmethod
    def body(request: httpx.Request) -> Optional[Dict[str, Any]]:
        return json.loads(request.content) if request.content else None


@pytest.fixture
def payload_settings() -> PayloadSettings:
    """Collection store settings pointing at the fake store"""
    return PayloadSettings(api_url=STORE_URL)


@pytest.fixture
def test_settings(payload_settings) -> Settings:
    """Create test settings"""
    return Settings(payload=payload_settings)


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest_asyncio.fixture
async def client(store, payload_settings) -> AsyncIterator[CollectionClient]:
    async with CollectionClient.from_settings(payload_settings, transport=store.transport()) as collection_client:
        yield collection_client


@pytest.fixture
def service(client, payload_settings) -> DashboardService:
    return DashboardService(client, payload_settings)


@pytest.fixture
def sample_order_docs() -> List[Dict[str, Any]]:
    """Raw order documents as the store returns them (totals in cents)"""
    return [
        {
            "id": "ord-1",
            "order_number": "#ORD-2001",
            "customer": {"id": "usr-1", "email": "jane@example.com"},
            "total": 45000,
            "status": "processing",
            "payment_status": "paid",
            "created_at": "2024-03-10T13:02:00.000Z",
            "updated_at": "2024-03-10T13:05:00.000Z",
        },
        {
            "id": "ord-2",
            "order_number": "#ORD-2002",
            "customer": "usr-2",
            "total": 8999,
            "status": "shipped",
            "created_at": "2024-03-10T12:45:00.000Z",
            "updated_at": "2024-03-10T12:45:00.000Z",
        },
    ]


@pytest.fixture
def sample_product_docs() -> List[Dict[str, Any]]:
    """Raw product documents (prices in cents)"""
    return [
        {
            "id": "prod-1",
            "name": "Wireless Mouse",
            "sku": "SKU-001",
            "price": 2999,
            "inventory_count": 100,
            "is_active": True,
            "tags": ["electronics"],
            "category_id": "cat-1",
        },
        {
            "id": "prod-2",
            "name": "Monitor Stand",
            "sku": "SKU-003",
            "price": 3999,
        },
    ]


@pytest.fixture
def sample_user_docs() -> List[Dict[str, Any]]:
    """Raw customer-role user documents"""
    return [
        {
            "id": "usr-1",
            "email": "jane@example.com",
            "firstName": "Jane",
            "lastName": "Smith",
            "role": "customer",
            "created_at": "2024-02-01T09:00:00.000Z",
        },
        {
            "id": "usr-2",
            "email": "bob@example.com",
            "role": "customer",
            "created_at": "2024-01-15T09:00:00.000Z",
        },
    ]
