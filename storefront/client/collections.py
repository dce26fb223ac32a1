"""
Remote Collection Client

Async client for a Payload-style document collection API:
- Filtered list queries (``where[field][op]=value``)
- Get, create, patch and delete by document ID
- Envelope unwrapping (``docs`` for lists, ``doc`` for writes)
"""

from typing import Any, Dict, List, Optional

import httpx
import structlog

from storefront.client.errors import (
    CollectionTransportError,
    CollectionWriteError,
    MalformedResponseError,
)
from storefront.config import PayloadSettings

logger = structlog.get_logger(__name__)

RawDocument = Dict[str, Any]

# field -> {operator -> value}
WhereClause = Dict[str, Dict[str, Any]]


def build_query_params(
    where: Optional[WhereClause] = None,
    limit: Optional[int] = None,
    sort: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Encode filter predicates the way the collection store expects them.

    Example:
        >>> build_query_params({"role": {"equals": "customer"}}, limit=100)
        {'where[role][equals]': 'customer', 'limit': 100}
    """
    params: Dict[str, Any] = {}
    for field, predicates in (where or {}).items():
        for operator, value in predicates.items():
            params[f"where[{field}][{operator}]"] = value
    if limit is not None:
        params["limit"] = limit
    if sort:
        params["sort"] = sort
    return params


class CollectionClient:
    """
    Request/response client over named collections.

    The client owns its ``httpx.AsyncClient``; call ``aclose()`` (or use it
    as an async context manager) when done.

    Example:
        async with CollectionClient.from_settings(settings.payload) as client:
            orders = await client.list_documents("orders", limit=10, sort="-created_at")
    """

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    @classmethod
    def from_settings(
        cls,
        payload: PayloadSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "CollectionClient":
        """Build a client bound to the configured store base URL"""
        http = httpx.AsyncClient(
            base_url=payload.api_url,
            headers={"Content-Type": "application/json"},
            timeout=payload.timeout_seconds,
            transport=transport,
        )
        logger.info("Collection client created", base_url=payload.api_url)
        return cls(http)

    async def __aenter__(self) -> "CollectionClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool"""
        await self._http.aclose()

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    async def list_documents(
        self,
        collection: str,
        where: Optional[WhereClause] = None,
        limit: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[RawDocument]:
        """
        List documents in a collection.

        Args:
            collection: Collection name (e.g. ``orders``)
            where: Filter predicates keyed by field then operator
            limit: Page size
            sort: Sort field, ``-`` prefix for descending

        Returns:
            Raw documents; an envelope without ``docs`` yields an empty list
        """
        params = build_query_params(where, limit, sort)
        body = await self._read(collection, f"/{collection}", params=params)

        docs = body.get("docs")
        if docs is None:
            return []
        if not isinstance(docs, list):
            raise MalformedResponseError(
                f"Expected 'docs' to be a list, got {type(docs).__name__}",
                collection=collection,
            )
        if not all(isinstance(doc, dict) for doc in docs):
            raise MalformedResponseError("Expected every document to be an object", collection=collection)
        return docs

    async def get_document(self, collection: str, document_id: str) -> RawDocument:
        """Fetch a single document by ID"""
        return await self._read(collection, f"/{collection}/{document_id}")

    async def _read(
        self,
        collection: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        try:
            response = await self._http.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise CollectionTransportError(
                f"GET {path} returned {e.response.status_code}",
                collection=collection,
            ) from e
        except httpx.HTTPError as e:
            raise CollectionTransportError(f"GET {path} failed: {e}", collection=collection) from e

        return self._json_object(response, collection)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    async def create_document(self, collection: str, data: Dict[str, Any]) -> RawDocument:
        """Create a document; returns the stored document"""
        response = await self._write("POST", collection, f"/{collection}", data)
        return self._unwrap_doc(response, collection)

    async def update_document(
        self,
        collection: str,
        document_id: str,
        data: Dict[str, Any],
    ) -> RawDocument:
        """Patch a document; returns the stored document"""
        response = await self._write("PATCH", collection, f"/{collection}/{document_id}", data)
        return self._unwrap_doc(response, collection)

    async def delete_document(self, collection: str, document_id: str) -> None:
        """Delete a document by ID"""
        await self._write("DELETE", collection, f"/{collection}/{document_id}")

    async def _write(
        self,
        method: str,
        collection: str,
        path: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        try:
            response = await self._http.request(method, path, json=data)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise CollectionWriteError(
                f"{method} {path} rejected with {e.response.status_code}",
                collection=collection,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise CollectionWriteError(f"{method} {path} failed: {e}", collection=collection) from e

        logger.debug("Write accepted", method=method, path=path, status_code=response.status_code)
        return response

    # -------------------------------------------------------------------------
    # Envelopes
    # -------------------------------------------------------------------------

    @staticmethod
    def _json_object(response: httpx.Response, collection: str) -> Dict[str, Any]:
        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponseError("Response body is not JSON", collection=collection) from e

        if not isinstance(body, dict):
            raise MalformedResponseError(
                f"Expected a JSON object, got {type(body).__name__}",
                collection=collection,
            )
        return body

    @classmethod
    def _unwrap_doc(cls, response: httpx.Response, collection: str) -> RawDocument:
        body = cls._json_object(response, collection)
        doc = body.get("doc", body)
        if not isinstance(doc, dict):
            raise MalformedResponseError("Expected 'doc' to be an object", collection=collection)
        return doc
