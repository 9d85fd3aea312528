"""Entry point de desarrollo (sin instalación).

Permite ejecutar la CLI con:
- `python -m main ...` desde la raíz del repo.

Instalado (`pip install -e .`) el comando equivalente es `cms-admin`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    # Tablas Rich con caracteres no-ASCII en consolas cp1252.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    from cli.main import app  # noqa: PLC0415

    app(args=argv)


if __name__ == "__main__":
    main()
