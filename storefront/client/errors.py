"""
Collection Client Errors

Failures raised by the remote collection client:
- Transport failures (network errors, HTTP error statuses on reads)
- Malformed or unexpected response bodies
- Write rejections from the store
"""

from typing import Optional


class CollectionClientError(Exception):
    """Base class for all collection store failures"""

    def __init__(self, message: str, collection: Optional[str] = None):
        super().__init__(message)
        self.collection = collection


class CollectionTransportError(CollectionClientError):
    """The request never produced a usable response"""


class MalformedResponseError(CollectionClientError):
    """The response body does not have the expected envelope shape"""


class CollectionWriteError(CollectionClientError):
    """The store rejected a create, update or delete"""

    def __init__(
        self,
        message: str,
        collection: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, collection=collection)
        self.status_code = status_code
