"""Transporte HTTP sobre httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y redirects para todas las peticiones.
- Adapta la llamada bloqueante de `httpx.Client` al contrato asíncrono de
  `core.interfaces.http_client.HTTPClient` (un único completion por `get`,
  entregado desde un hilo del pool).
- Facilita testeo: la sesión y el executor se pueden sustituir.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from functools import partial

import httpx

from core.config import AppSettings
from core.interfaces.http_client import (
    Completion,
    HTTPClientFailure,
    HTTPClientResponse,
    HTTPClientSuccess,
    HTTPResponse,
)

logger = logging.getLogger(__name__)


class UnexpectedOutcomeError(Exception):
    """La sesión no reportó error pero tampoco devolvió una respuesta HTTP."""


class ClientClosedError(RuntimeError):
    """Se llamó a `get` sobre un `HTTPXClient` ya cerrado."""


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las peticiones se comporten igual.
    - Facilita testeo y futuras políticas (proxies, transportes mock).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )


class HTTPXClient:
    """Implementa `HTTPClient` con un `httpx.Client` y un pool de hilos.

    Cada `get` se encola en el executor; el completion se invoca exactamente
    una vez desde el hilo de trabajo, nunca antes de que `get` retorne.
    Si no se inyectan, la sesión y el executor son propios y `close()` los
    libera.
    """

    def __init__(
        self,
        session: httpx.Client | None = None,
        *,
        executor: Executor | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        settings = settings or AppSettings()
        self._owns_session = session is None
        self._session = session if session is not None else build_client(settings)
        self._owns_executor = executor is None
        self._executor = (
            executor
            if executor is not None
            else ThreadPoolExecutor(
                max_workers=settings.max_workers,
                thread_name_prefix="feed-loader-http",
            )
        )
        self._closed = False

    def get(self, url: str, completion: Completion) -> None:
        if self._closed:
            raise ClientClosedError(f"cannot GET {url}: client is closed")
        logger.debug("Scheduling GET %s", url)
        future = self._executor.submit(self._perform, url, completion)
        future.add_done_callback(partial(_log_unhandled_error, url))

    def close(self) -> None:
        """Espera las peticiones en curso y libera sesión/executor propios.

        Después de `close()`, `get` lanza `ClientClosedError` de forma
        síncrona y no entrega ningún completion.
        """

        self._closed = True
        if self._owns_executor:
            self._executor.shutdown(wait=True)
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "HTTPXClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _perform(self, url: str, completion: Completion) -> None:
        response: object | None = None
        error: BaseException | None = None
        try:
            response = self._session.get(url)
        except Exception as exc:
            error = exc

        outcome = self._normalize(url, response, error)
        if isinstance(outcome, HTTPClientFailure):
            logger.debug("GET %s failed: %r", url, outcome.error)
        else:
            logger.debug("GET %s -> HTTP %s", url, outcome.response.status_code)
        completion(outcome)

    @staticmethod
    def _normalize(
        url: str,
        response: object | None,
        error: BaseException | None,
    ) -> HTTPClientResponse:
        if error is not None:
            return HTTPClientFailure(error)
        if isinstance(response, httpx.Response):
            return HTTPClientSuccess(
                data=response.content,
                response=HTTPResponse(
                    url=url,
                    status_code=response.status_code,
                    headers=tuple(response.headers.multi_items()),
                ),
            )
        return HTTPClientFailure(UnexpectedOutcomeError(f"no response for GET {url}"))


def _log_unhandled_error(url: str, future: Future) -> None:
    # Errors raised by a completion end up in the future; surface them.
    if future.cancelled():
        return
    error = future.exception()
    if error is not None:
        logger.error("Unhandled error while completing GET %s", url, exc_info=error)
