"""
FastAPI Application

Main entry point for the Storefront Dashboard API.
"""

from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
import structlog

from storefront.client import CollectionClient
from storefront.config import Settings, get_settings
from storefront.config.logging import configure_logging
from storefront.dashboard import DashboardService
from storefront.serving.api.middleware import RequestLoggingMiddleware
from storefront.serving.api.routes import (
    analytics_router,
    customers_router,
    dashboard_router,
    health_router,
    orders_router,
    products_router,
)

logger = structlog.get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Settings are loaded here rather than at startup so a missing
    ``PAYLOAD_API_URL`` stops the process before it binds a port.

    Args:
        settings: Application settings; loaded from the environment if omitted
        transport: Optional httpx transport for the collection client

    Returns:
        Configured FastAPI app instance
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        configure_logging(logging_settings=settings.logging)
        logger.info("Starting Storefront Dashboard API", environment=settings.app_env)

        client = CollectionClient.from_settings(settings.payload, transport=transport)
        app.state.dashboard_service = DashboardService(client, settings.payload)

        yield

        logger.info("Shutting down...")
        await client.aclose()

    app = FastAPI(
        title="Storefront Dashboard API",
        description="Revenue, order, product and customer metrics for the storefront dashboard",
        version=settings.version,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(health_router, prefix="/api/v1", tags=["Health"])
    app.include_router(dashboard_router, prefix="/api/v1/dashboard", tags=["Dashboard"])
    app.include_router(orders_router, prefix="/api/v1/orders", tags=["Orders"])
    app.include_router(products_router, prefix="/api/v1/products", tags=["Products"])
    app.include_router(customers_router, prefix="/api/v1/customers", tags=["Customers"])
    app.include_router(analytics_router, prefix="/api/v1/analytics", tags=["Analytics"])

    @app.get("/api/v1/info")
    async def api_info():
        """API information endpoint."""
        return {
            "name": "Storefront Dashboard API",
            "version": settings.version,
            "environment": settings.app_env,
            "documentation": "/docs",
        }

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.api_host, port=settings.api_port)
