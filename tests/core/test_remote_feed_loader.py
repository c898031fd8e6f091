"""Tests for RemoteFeedLoader: request issuing, error mapping, lifetime guard."""

from __future__ import annotations

import gc
import weakref
from typing import Callable
from uuid import uuid4

import pytest

from core.domain.models import LoadError, LoadFailure, LoadResult, LoadSuccess
from core.interfaces.feed_loader import FeedLoader
from core.services.remote_feed_loader import RemoteFeedLoader
from tests.conftest import HTTPClientSpy, make_item, make_items_json


def make_sut(
    track_for_leaks: Callable[[object], None],
    url: str = "https://a-url.com",
) -> tuple[RemoteFeedLoader, HTTPClientSpy]:
    client = HTTPClientSpy()
    sut = RemoteFeedLoader(client, url)
    track_for_leaks(sut)
    track_for_leaks(client)
    return sut, client


def expect(sut: RemoteFeedLoader, expected: LoadResult, action: Callable[[], None]) -> None:
    received: list[LoadResult] = []
    sut.load(received.append)

    action()

    assert received == [expected]


class TestRequests:
    def test_init_does_not_request_data(self, track_for_leaks: Callable[[object], None]) -> None:
        _, client = make_sut(track_for_leaks)

        assert client.requested_urls == []

    def test_load_requests_data_from_url(self, track_for_leaks: Callable[[object], None]) -> None:
        url = "https://a-given-url.com"
        sut, client = make_sut(track_for_leaks, url=url)

        sut.load(lambda _: None)

        assert client.requested_urls == [url]

    def test_load_twice_requests_data_twice(self, track_for_leaks: Callable[[object], None]) -> None:
        url = "https://a-given-url.com"
        sut, client = make_sut(track_for_leaks, url=url)

        sut.load(lambda _: None)
        sut.load(lambda _: None)

        assert client.requested_urls == [url, url]

    def test_concurrent_loads_complete_independently(
        self, track_for_leaks: Callable[[object], None]
    ) -> None:
        sut, client = make_sut(track_for_leaks)
        first: list[LoadResult] = []
        second: list[LoadResult] = []

        sut.load(first.append)
        sut.load(second.append)
        client.complete_with_status(200, make_items_json([]), index=1)
        client.complete_with_error(ConnectionError("offline"), index=0)

        assert first == [LoadFailure(LoadError.CONNECTIVITY)]
        assert second == [LoadSuccess([])]

    def test_satisfies_feed_loader_protocol(self, track_for_leaks: Callable[[object], None]) -> None:
        sut, _ = make_sut(track_for_leaks)

        assert isinstance(sut, FeedLoader)


class TestResults:
    def test_delivers_connectivity_error_on_client_error(
        self, track_for_leaks: Callable[[object], None]
    ) -> None:
        sut, client = make_sut(track_for_leaks)

        expect(
            sut,
            LoadFailure(LoadError.CONNECTIVITY),
            lambda: client.complete_with_error(OSError("Test")),
        )

    @pytest.mark.parametrize("code", [199, 201, 300, 400, 500])
    def test_delivers_invalid_data_on_non_200_response(
        self, code: int, track_for_leaks: Callable[[object], None]
    ) -> None:
        sut, client = make_sut(track_for_leaks)

        expect(
            sut,
            LoadFailure(LoadError.INVALID_DATA),
            lambda: client.complete_with_status(code, make_items_json([])),
        )

    def test_delivers_invalid_data_on_200_with_invalid_json(
        self, track_for_leaks: Callable[[object], None]
    ) -> None:
        sut, client = make_sut(track_for_leaks)

        expect(
            sut,
            LoadFailure(LoadError.INVALID_DATA),
            lambda: client.complete_with_status(200, b"Invalid Json"),
        )

    def test_delivers_no_items_on_200_with_empty_list(
        self, track_for_leaks: Callable[[object], None]
    ) -> None:
        sut, client = make_sut(track_for_leaks)

        expect(
            sut,
            LoadSuccess([]),
            lambda: client.complete_with_status(200, make_items_json([])),
        )

    def test_delivers_items_on_200_with_items(
        self, track_for_leaks: Callable[[object], None]
    ) -> None:
        sut, client = make_sut(track_for_leaks)
        item1, json1 = make_item(id=uuid4(), image_url="https://image-string-1.com")
        item2, json2 = make_item(
            id=uuid4(),
            description="description",
            location="location",
            image_url="https://image-string-2.com",
        )

        expect(
            sut,
            LoadSuccess([item1, item2]),
            lambda: client.complete_with_status(200, make_items_json([json1, json2])),
        )

    def test_delivers_invalid_data_when_one_item_is_invalid(
        self, track_for_leaks: Callable[[object], None]
    ) -> None:
        sut, client = make_sut(track_for_leaks)
        _, valid = make_item(id=uuid4(), image_url="https://image.com")
        invalid = {"id": str(uuid4()), "description": "no image"}

        expect(
            sut,
            LoadFailure(LoadError.INVALID_DATA),
            lambda: client.complete_with_status(200, make_items_json([valid, invalid])),
        )


class TestLifetime:
    def test_does_not_deliver_result_after_loader_is_released(self) -> None:
        client = HTTPClientSpy()
        sut: RemoteFeedLoader | None = RemoteFeedLoader(client, "https://any-url.com")
        captured: list[LoadResult] = []

        assert sut is not None
        sut.load(captured.append)
        sut = None
        gc.collect()
        client.complete_with_status(200, make_items_json([]))

        assert captured == []

    def test_does_not_deliver_result_after_loader_is_closed(self) -> None:
        client = HTTPClientSpy()
        captured: list[LoadResult] = []

        with RemoteFeedLoader(client, "https://any-url.com") as sut:
            sut.load(captured.append)
        client.complete_with_error(OSError("late"))

        assert captured == []

    def test_pending_request_does_not_keep_loader_alive(self) -> None:
        client = HTTPClientSpy()
        sut = RemoteFeedLoader(client, "https://any-url.com")
        ref = weakref.ref(sut)

        sut.load(lambda _: None)
        del sut
        gc.collect()

        assert ref() is None
        assert len(client.messages) == 1

    def test_load_after_close_sends_no_request(self) -> None:
        client = HTTPClientSpy()
        captured: list[LoadResult] = []
        sut = RemoteFeedLoader(client, "https://any-url.com")

        sut.close()
        sut.load(captured.append)

        assert client.requested_urls == []
        assert captured == []
