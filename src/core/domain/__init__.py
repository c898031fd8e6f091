"""Modelos del dominio del feed.

Por qué:
- Aquí viven los items y los resultados de carga, inmutables y validados.
- El dominio no conoce HTTP, CLI, ni SDKs: solo conceptos del problema.
"""

from core.domain.models import FeedItem, LoadError, LoadFailure, LoadResult, LoadSuccess

__all__ = [
    "FeedItem",
    "LoadError",
    "LoadFailure",
    "LoadResult",
    "LoadSuccess",
]
