"""Loader de feed remoto.

Orquesta una petición por cada `load`:
transporte (`HTTPClient`) -> mapper (`FeedItemsMapper`) -> `LoadResult`.

Reglas:
- Cualquier error de transporte se colapsa en `LoadError.CONNECTIVITY`.
- Cualquier respuesta no utilizable (status != 200, JSON inválido) se colapsa
  en `LoadError.INVALID_DATA`.
- Si el loader ya fue liberado (GC o `close()`) cuando el transporte responde,
  el resultado se descarta y el `completion` del caller nunca se invoca.
"""

from __future__ import annotations

import logging
import weakref
from typing import Callable

from core.domain.models import LoadError, LoadFailure, LoadResult, LoadSuccess
from core.interfaces.http_client import HTTPClient, HTTPClientFailure, HTTPClientResponse
from core.services.feed_items_mapper import FeedDecodeError, FeedItemsMapper

logger = logging.getLogger(__name__)


class RemoteFeedLoader:
    """Implementa `core.interfaces.feed_loader.FeedLoader` sobre un `HTTPClient`."""

    def __init__(self, client: HTTPClient, url: str) -> None:
        self._client = client
        self._url = url
        self._closed = False

    @property
    def url(self) -> str:
        return self._url

    def load(self, completion: Callable[[LoadResult], None]) -> None:
        if self._closed:
            logger.debug("Ignoring load for %s: loader is closed", self._url)
            return

        # The in-flight callback only holds a weak reference to the loader.
        loader_ref = weakref.ref(self)
        url = self._url

        def on_response(response: HTTPClientResponse) -> None:
            loader = loader_ref()
            if loader is None or loader._closed:
                logger.debug("Dropping feed result for %s: loader released", url)
                return
            completion(loader._map(response))

        self._client.get(url, on_response)

    def close(self) -> None:
        """Libera el loader.

        Las respuestas pendientes se descartan y los `load` posteriores no
        hacen ninguna petición ni invocan su completion.
        """

        self._closed = True

    def __enter__(self) -> "RemoteFeedLoader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @staticmethod
    def _map(response: HTTPClientResponse) -> LoadResult:
        if isinstance(response, HTTPClientFailure):
            logger.debug("Feed request failed: %r", response.error)
            return LoadFailure(LoadError.CONNECTIVITY)

        try:
            items = FeedItemsMapper.map(response.data, response.response)
        except FeedDecodeError:
            return LoadFailure(LoadError.INVALID_DATA)
        return LoadSuccess(items)
