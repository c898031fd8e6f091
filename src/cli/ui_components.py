"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.models import FeedItem, LoadError


_ERROR_MESSAGES = {
    LoadError.CONNECTIVITY: "Could not reach the feed (connectivity error).",
    LoadError.INVALID_DATA: "The feed responded with unusable data (invalid data).",
}


def build_items_table(items: Iterable[FeedItem], *, title: str = "Feed Items") -> Table:
    """Crea una tabla Rich con los items en el orden recibido."""

    table = Table(title=title)
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Description", style="white")
    table.add_column("Location", style="green")
    table.add_column("Image", style="magenta")
    for index, item in enumerate(items, start=1):
        table.add_row(
            str(index),
            str(item.id),
            item.description or "-",
            item.location or "-",
            str(item.image),
        )
    return table


def build_settings_table(settings: AppSettings) -> Table:
    table = Table(title="feed-loader settings")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    for name, value in settings.model_dump().items():
        table.add_row(name, "-" if value is None else str(value))
    return table


def format_load_error(error: LoadError) -> Text:
    return Text(_ERROR_MESSAGES[error], style="bold red")
