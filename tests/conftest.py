"""Shared pytest fixtures and test helpers for feed-loader tests."""

from __future__ import annotations

import gc
import json
import weakref
from typing import Any, Callable, Iterator
from uuid import UUID

import pytest

from core.domain.models import FeedItem
from core.interfaces.http_client import (
    Completion,
    HTTPClientFailure,
    HTTPClientSuccess,
    HTTPResponse,
)


class HTTPClientSpy:
    """`HTTPClient` that records requests and completes them on demand."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, Completion]] = []

    @property
    def requested_urls(self) -> list[str]:
        return [url for url, _ in self.messages]

    def get(self, url: str, completion: Completion) -> None:
        self.messages.append((url, completion))

    def complete_with_error(self, error: BaseException, index: int = 0) -> None:
        self.messages[index][1](HTTPClientFailure(error))

    def complete_with_status(self, code: int, data: bytes, index: int = 0) -> None:
        response = HTTPResponse(url=self.requested_urls[index], status_code=code)
        self.messages[index][1](HTTPClientSuccess(data, response))


@pytest.fixture
def track_for_leaks() -> Iterator[Callable[[object], None]]:
    """Assert that every tracked instance is collectable once the test ends."""
    refs: list[weakref.ref] = []

    def track(instance: object) -> None:
        refs.append(weakref.ref(instance))

    yield track

    gc.collect()
    leaked = [ref() for ref in refs if ref() is not None]
    assert not leaked, f"Potential memory leak: {leaked!r}"


# ---------------------------------------------------------------------------
# Payload helpers
# ---------------------------------------------------------------------------


def make_item(
    id: UUID,
    image_url: str,
    description: str | None = None,
    location: str | None = None,
) -> tuple[FeedItem, dict[str, Any]]:
    """Build a `FeedItem` and its wire representation (absent keys omitted)."""
    item = FeedItem(id=id, description=description, location=location, image=image_url)
    raw = {
        "id": str(id),
        "description": description,
        "location": location,
        "image": image_url,
    }
    return item, {key: value for key, value in raw.items() if value is not None}


def make_items_json(items: list[dict[str, Any]]) -> bytes:
    return json.dumps({"items": items}).encode("utf-8")
