"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta (URLs, UUIDs) sin acoplar el Core a librerías
  de I/O.
- Los modelos congelados dan igualdad estructural e inmutabilidad gratis.

Nota:
- Estos modelos describen *qué* es un item del feed, no *cómo* se obtiene.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union
from uuid import UUID

from pydantic import AnyUrl, BaseModel, Field
from pydantic.config import ConfigDict


class FeedItem(BaseModel):
    """Un item del feed.

    Solo lo construye `FeedItemsMapper` a partir de un payload validado.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(
        ...,
        description="Identificador único del item.",
    )
    description: str | None = Field(
        default=None,
        description="Texto descriptivo, si el feed lo trae.",
    )
    location: str | None = Field(
        default=None,
        description="Ubicación asociada, si el feed la trae.",
    )
    image: AnyUrl = Field(
        ...,
        description="URL de la imagen del item.",
    )


class LoadError(str, Enum):
    """Closed set of errors a loader reports to its caller."""

    CONNECTIVITY = "connectivity"
    INVALID_DATA = "invalid_data"


@dataclass(frozen=True)
class LoadSuccess:
    items: tuple[FeedItem, ...]

    def __post_init__(self) -> None:
        # Accept any sequence; store an immutable, hashable tuple.
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class LoadFailure:
    error: LoadError


LoadResult = Union[LoadSuccess, LoadFailure]
