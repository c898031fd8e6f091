"""Ejecuta la CLI desde un checkout, sin `pip install -e .`.

    python -m main fetch https://example.com/feed.json

Los paquetes viven en `src/`; se añade al path antes de importar `cli`.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))
    # Las tablas Rich usan caracteres de caja que cp1252 no codifica.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
