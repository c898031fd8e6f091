"""Contrato de un cargador de feed.

Por qué existe aparte del loader remoto:
- La capa de presentación solo necesita "dame los items", sin saber si vienen
  de la red, de una caché o de un fixture.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from core.domain.models import LoadResult


@runtime_checkable
class FeedLoader(Protocol):
    def load(self, completion: Callable[[LoadResult], None]) -> None:
        """Carga el feed y entrega un único `LoadResult` a `completion`."""

        ...
