"""CLI de feed-loader (Typer).

Comandos:
- `fetch [URL]`: carga el feed y lo muestra como tabla o JSON.
- `config`: muestra la configuración efectiva.

La CLI es el único lugar que bloquea esperando al loader; el Core sigue
siendo callback-based.
"""

from __future__ import annotations

import json
import logging
import threading
from typing import Optional

import typer
from rich.console import Console

from adapters.http_client import HTTPXClient
from cli.ui_components import build_items_table, build_settings_table, format_load_error
from core.config import AppSettings
from core.domain.models import LoadFailure, LoadResult
from core.interfaces.feed_loader import FeedLoader
from core.logging import configure_logging
from core.services.remote_feed_loader import RemoteFeedLoader

app = typer.Typer(no_args_is_help=True, help="Fetch and inspect remote JSON feeds.")

_console = Console()
logger = logging.getLogger(__name__)


def wait_for_result(loader: FeedLoader, timeout: float | None = None) -> LoadResult:
    """Run a single `load` and block until its completion fires."""

    done = threading.Event()
    results: list[LoadResult] = []

    def on_complete(result: LoadResult) -> None:
        results.append(result)
        done.set()

    loader.load(on_complete)
    if not done.wait(timeout):
        raise TimeoutError("feed load did not complete in time")
    return results[0]


@app.command()
def fetch(
    url: Optional[str] = typer.Argument(
        None,
        help="Feed URL. Defaults to FEED_LOADER_FEED_URL.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print items as JSON instead of a table."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    log_json: bool = typer.Option(False, "--log-json", help="Emit logs as JSON lines."),
) -> None:
    """Load a feed once and print its items."""

    settings = AppSettings()
    configure_logging(
        verbose=verbose,
        log_json=log_json or settings.log_json,
        level=settings.log_level,
    )

    target = url or settings.feed_url
    if not target:
        raise typer.BadParameter("a feed URL is required (argument or FEED_LOADER_FEED_URL)")

    with HTTPXClient(settings=settings) as client:
        with RemoteFeedLoader(client, target) as loader:
            result = wait_for_result(loader)

    if isinstance(result, LoadFailure):
        logger.debug("Feed load failed for %s: %s", target, result.error.value)
        _console.print(format_load_error(result.error))
        raise typer.Exit(code=1)

    if as_json:
        payload = [item.model_dump(mode="json") for item in result.items]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    _console.print(build_items_table(result.items, title=f"Feed: {target}"))


@app.command()
def config() -> None:
    """Show the effective settings (env vars and .env files)."""

    _console.print(build_settings_table(AppSettings()))


def run() -> None:
    app(prog_name="feed-loader")
