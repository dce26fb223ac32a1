"""
Collection Client Module
"""
from .collections import CollectionClient, RawDocument, build_query_params
from .errors import (
    CollectionClientError,
    CollectionTransportError,
    CollectionWriteError,
    MalformedResponseError,
)

__all__ = [
    "CollectionClient",
    "RawDocument",
    "build_query_params",
    "CollectionClientError",
    "CollectionTransportError",
    "CollectionWriteError",
    "MalformedResponseError",
]
