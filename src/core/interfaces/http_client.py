"""Contrato del transporte HTTP.

Por qué Protocol:
- El loader depende de esta abstracción, no de httpx ni de ningún stack de red.
- Permite sustituir el transporte por un spy en tests sin herencia rígida.

Reglas del contrato:
- `get` nunca llama a `completion` antes de retornar.
- `completion` se llama exactamente una vez por llamada, en el contexto de
  ejecución que elija el transporte (hilo de trabajo, event loop, ...).
- No hay orden garantizado entre llamadas concurrentes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, Union, runtime_checkable


@dataclass(frozen=True)
class HTTPResponse:
    """Metadatos de una respuesta HTTP (sin el cuerpo).

    `headers` guarda pares (nombre, valor) en orden; puede repetir nombres.
    """

    url: str
    status_code: int
    headers: tuple[tuple[str, str], ...] = ()

    def header(self, name: str) -> str | None:
        """Primer valor de la cabecera `name` (sin distinguir mayúsculas)."""

        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None


@dataclass(frozen=True)
class HTTPClientSuccess:
    data: bytes
    response: HTTPResponse


@dataclass(frozen=True)
class HTTPClientFailure:
    error: BaseException


HTTPClientResponse = Union[HTTPClientSuccess, HTTPClientFailure]

Completion = Callable[[HTTPClientResponse], None]


@runtime_checkable
class HTTPClient(Protocol):
    """Contrato mínimo de un transporte: traer bytes de una URL."""

    def get(self, url: str, completion: Completion) -> None:
        """Inicia un GET contra `url` y entrega un único resultado a `completion`."""

        ...
