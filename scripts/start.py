#!/usr/bin/env python3
"""
Production entrypoint: migrate, then hand the process over to gunicorn.

Usage:
    PORT=8080 python scripts/start.py

GUNICORN_WORKERS (default 2) and GUNICORN_TIMEOUT (default 60) tune the server.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

DEFAULT_PORT = 8080
WSGI_TARGET = "app.wsgi:app"


def resolve_port(raw: str | None) -> int:
    """Parse PORT; blank means DEFAULT_PORT. Raises ValueError when out of range or not an integer."""
    value = (raw or "").strip()
    if not value:
        return DEFAULT_PORT
    port = int(value)
    if not 1 <= port <= 65535:
        raise ValueError(f"Port out of range: {port}")
    return port


def build_gunicorn_argv(port: int, *, workers: int = 2, timeout: int = 60) -> list[str]:
    return [
        "gunicorn",
        WSGI_TARGET,
        "--bind", f"0.0.0.0:{port}",
        "--workers", str(workers),
        "--timeout", str(timeout),
        # engine is disposed in each child after fork (see create_app)
        "--preload",
        "--access-logfile", "-",
        "--error-logfile", "-",
    ]


def main() -> None:
    try:
        port = resolve_port(os.environ.get("PORT"))
    except ValueError as e:
        print(f"ERROR: invalid PORT ({e}). Must be integer 1-65535.", flush=True)
        sys.exit(1)

    from scripts.release import run_release
    try:
        run_release()
    except Exception as e:
        print(f"Release failed: {e}", flush=True)
        sys.exit(1)

    argv = build_gunicorn_argv(
        port,
        workers=int(os.environ.get("GUNICORN_WORKERS") or 2),
        timeout=int(os.environ.get("GUNICORN_TIMEOUT") or 60),
    )
    print(f"Starting: {' '.join(argv)}", flush=True)
    os.execvp(argv[0], argv)


if __name__ == "__main__":
    main()
