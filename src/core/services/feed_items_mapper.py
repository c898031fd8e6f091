"""Traducción de la respuesta HTTP a items del dominio.

Por qué un mapper separado del loader:
- Es una función pura (status + bytes -> items), fácil de testear sin red.
- Concentra la validación del payload remoto; el loader solo orquesta.

Formato esperado (JSON):

    {"items": [{"id": "<uuid>", "description": "...", "location": "...",
                "image": "<url>"}]}

`description` y `location` son opcionales (pueden faltar o ser null); `id` e
`image` son obligatorios. La decodificación es todo-o-nada: un solo registro
inválido invalida la respuesta completa.
"""

from __future__ import annotations

import logging
from uuid import UUID

from pydantic import AnyUrl, BaseModel, ValidationError
from pydantic.config import ConfigDict

from core.domain.models import FeedItem
from core.interfaces.http_client import HTTPResponse

logger = logging.getLogger(__name__)

OK_200 = 200


class FeedDecodeError(ValueError):
    """La respuesta no es un 200 con un payload de feed válido."""


class _RemoteFeedItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: UUID
    description: str | None = None
    location: str | None = None
    image: AnyUrl

    def to_item(self) -> FeedItem:
        return FeedItem(
            id=self.id,
            description=self.description,
            location=self.location,
            image=self.image,
        )


class _RemoteFeed(BaseModel):
    model_config = ConfigDict(extra="ignore")

    items: list[_RemoteFeedItem]


class FeedItemsMapper:
    @staticmethod
    def map(data: bytes, response: HTTPResponse) -> list[FeedItem]:
        """Valida `response` + `data` y devuelve los items en el orden del payload.

        Lanza `FeedDecodeError` si el status no es 200 (sin parsear el cuerpo)
        o si el JSON no cumple el esquema.
        """

        if response.status_code != OK_200:
            logger.debug("Rejecting feed response with status %s", response.status_code)
            raise FeedDecodeError(f"unexpected status code {response.status_code}")

        try:
            feed = _RemoteFeed.model_validate_json(data)
        except ValidationError as exc:
            logger.debug("Invalid feed payload (%d errors)", exc.error_count())
            raise FeedDecodeError("invalid feed payload") from exc

        return [remote.to_item() for remote in feed.items]
