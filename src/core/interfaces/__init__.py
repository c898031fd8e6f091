"""Contratos (Protocol) del Core.

Por qué:
- El loader depende del transporte solo a través de `HTTPClient`.
- Los adaptadores concretos (httpx, spies de test) los implementan por estructura.
"""

from core.interfaces.feed_loader import FeedLoader
from core.interfaces.http_client import (
    HTTPClient,
    HTTPClientFailure,
    HTTPClientResponse,
    HTTPClientSuccess,
    HTTPResponse,
)

__all__ = [
    "FeedLoader",
    "HTTPClient",
    "HTTPClientFailure",
    "HTTPClientResponse",
    "HTTPClientSuccess",
    "HTTPResponse",
]
