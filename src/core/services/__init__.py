"""Servicios del Core: loader remoto y mapper de payloads."""

from core.services.feed_items_mapper import FeedDecodeError, FeedItemsMapper
from core.services.remote_feed_loader import RemoteFeedLoader

__all__ = [
    "FeedDecodeError",
    "FeedItemsMapper",
    "RemoteFeedLoader",
]
