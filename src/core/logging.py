"""Configuración de logging (structlog sobre logging estándar).

Dos modos de salida, ambos a stderr:
- Humano (default): renderer de consola de structlog.
- JSON (`log_json=True`): una línea JSON por evento.

Los módulos siguen usando `logging.getLogger(__name__)`; structlog solo
formatea.
"""

from __future__ import annotations

import logging
import sys
import threading

import structlog
from structlog.types import EventDict, WrappedLogger


def add_thread_name(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    """Añade el hilo emisor: los completions llegan desde `feed-loader-http_N`."""

    event_dict.setdefault("thread", threading.current_thread().name)
    return event_dict


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    level: str = "WARNING",
) -> None:
    """Configura structlog y el handler raíz.

    Args:
        verbose: Fuerza DEBUG. Si es False se usa `level`.
        log_json: JSON renderer en lugar del renderer de consola.
        level: Nivel por nombre ("INFO", "WARNING", ...).
    """

    app_level = logging.DEBUG if verbose else logging.getLevelName(level.upper())
    if not isinstance(app_level, int):
        app_level = logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_thread_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    for name in ("core", "adapters", "cli"):
        logging.getLogger(name).setLevel(app_level)
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
